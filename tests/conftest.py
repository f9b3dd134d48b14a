"""Pytest configuration and fixtures."""

from decimal import Decimal
from typing import Callable

import pytest

from atm_sim.atm import Atm
from atm_sim.bank import InMemoryBankService
from atm_sim.models.banking import Account, User
from atm_sim.sinks import ConsoleSink


@pytest.fixture
def account() -> Account:
    """Account ACC1001 opened with 1000."""
    return Account("ACC1001", Decimal("1000"))


@pytest.fixture
def alice() -> User:
    return User(name="Alice", pin="1234")


@pytest.fixture
def bank(alice: User, account: Account) -> InMemoryBankService:
    """Bank with Alice (ACC1001, 1000) and Bob (ACC2001, 500)."""
    service = InMemoryBankService()
    service.register(alice, [account])
    service.register(User(name="Bob", pin="4321"), [Account("ACC2001", Decimal("500"))])
    return service


@pytest.fixture
def atm(bank: InMemoryBankService) -> Atm:
    return Atm(bank, ConsoleSink())


@pytest.fixture
def scripted() -> Callable[..., Callable[[str], str]]:
    """Build a ``read_line`` that replays lines and then raises EOFError."""

    def factory(*lines: str) -> Callable[[str], str]:
        remaining = iter(lines)

        def read_line(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read_line

    return factory
