"""Tests for the bank service directory."""

import json
import logging
import threading
from decimal import Decimal

import pytest

from atm_sim.bank import BankService, InMemoryBankService
from atm_sim.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidCredentialsError,
)
from atm_sim.logging import JsonFormatter
from atm_sim.models.banking import Account, TransactionType, User


class TestBankServiceContract:
    """Tests for the abstract capability."""

    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            BankService()  # type: ignore[abstract]

    def test_in_memory_is_bank_service(self, bank: InMemoryBankService) -> None:
        assert isinstance(bank, BankService)


class TestRegistration:
    """Tests for directory registration."""

    def test_register_populates_both_directories(
        self, bank: InMemoryBankService, alice: User, account: Account
    ) -> None:
        assert bank.find_account("ACC1001") is account
        assert bank.find_user_by_account("ACC1001") is alice
        assert alice.account_ids == ["ACC1001"]

    def test_register_multiple_accounts(self) -> None:
        bank = InMemoryBankService()
        user = User(name="Carol", pin="1111")

        bank.register(user, [Account("ACC3001"), Account("ACC3002", "20")])

        assert user.account_ids == ["ACC3001", "ACC3002"]
        assert bank.find_user_by_account("ACC3002") is user
        assert bank.get_balance("ACC3002") == Decimal("20")

    def test_duplicate_registration_rejected(
        self, bank: InMemoryBankService, account: Account
    ) -> None:
        intruder = User(name="Mallory", pin="9999")

        with pytest.raises(DuplicateAccountError, match="ACC1001"):
            bank.register(intruder, [Account("ACC5000"), Account("ACC1001", "999")])

        assert bank.find_account("ACC1001") is account
        assert bank.find_account("ACC5000") is None
        assert intruder.account_ids == []

    def test_duplicate_within_one_call_rejected(self) -> None:
        bank = InMemoryBankService()

        with pytest.raises(DuplicateAccountError):
            bank.register(User(name="Dan", pin="1"), [Account("ACC1"), Account("ACC1")])

        assert bank.accounts == {}

    def test_concurrent_registration_of_same_id(self) -> None:
        bank = InMemoryBankService()
        barrier = threading.Barrier(4)
        errors: list[Exception] = []

        def register(i: int) -> None:
            barrier.wait()
            try:
                bank.register(User(name=f"U{i}", pin="0"), [Account("ACC-RACE")])
            except DuplicateAccountError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=register, args=(i,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(errors) == 3
        assert len(bank.accounts) == 1


class TestLookups:
    """Tests for not-found behavior."""

    def test_find_returns_none_for_unknown(self, bank: InMemoryBankService) -> None:
        assert bank.find_account("ACC404") is None
        assert bank.find_user_by_account("ACC404") is None

    @pytest.mark.parametrize(
        "call",
        [
            lambda b: b.deposit("ACC404", Decimal("1")),
            lambda b: b.withdraw("ACC404", Decimal("1")),
            lambda b: b.get_balance("ACC404"),
            lambda b: b.list_transactions("ACC404"),
        ],
        ids=["deposit", "withdraw", "get_balance", "list_transactions"],
    )
    def test_operations_raise_for_unknown(self, bank: InMemoryBankService, call) -> None:
        with pytest.raises(AccountNotFoundError, match="ACC404 not found"):
            call(bank)


class TestOperations:
    """Tests for delegation to accounts."""

    def test_deposit_and_withdraw(self, bank: InMemoryBankService) -> None:
        deposit = bank.deposit("ACC2001", Decimal("250"))
        withdraw = bank.withdraw("ACC2001", Decimal("700"))

        assert bank.get_balance("ACC2001") == Decimal("50")
        assert bank.list_transactions("ACC2001") == [deposit, withdraw]

    def test_insufficient_funds_propagates(self, bank: InMemoryBankService) -> None:
        with pytest.raises(InsufficientFundsError):
            bank.withdraw("ACC2001", Decimal("500.01"))

        assert bank.get_balance("ACC2001") == Decimal("500")
        assert bank.list_transactions("ACC2001") == []

    def test_accounts_are_independent(self, bank: InMemoryBankService) -> None:
        bank.deposit("ACC1001", Decimal("1"))

        assert bank.get_balance("ACC2001") == Decimal("500")
        assert bank.list_transactions("ACC2001") == []

    def test_acc1001_scenario(self, bank: InMemoryBankService) -> None:
        bank.deposit("ACC1001", Decimal("500"))
        with pytest.raises(InsufficientFundsError):
            bank.withdraw("ACC1001", Decimal("2000"))
        bank.withdraw("ACC1001", Decimal("1500"))

        log = bank.list_transactions("ACC1001")
        assert bank.get_balance("ACC1001") == Decimal("0")
        assert [(t.transaction_type, t.amount) for t in log] == [
            (TransactionType.DEPOSIT, Decimal("500")),
            (TransactionType.WITHDRAW, Decimal("1500")),
        ]

    def test_concurrent_callers_no_lost_update(self, bank: InMemoryBankService) -> None:
        barrier = threading.Barrier(2)

        def deposit() -> None:
            barrier.wait()
            bank.deposit("ACC1001", Decimal("100"))

        def withdraw() -> None:
            barrier.wait()
            bank.withdraw("ACC1001", Decimal("50"))

        threads = [threading.Thread(target=deposit), threading.Thread(target=withdraw)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert bank.get_balance("ACC1001") == Decimal("1050")
        assert len(bank.list_transactions("ACC1001")) == 2

    def test_summary(self, bank: InMemoryBankService) -> None:
        bank.deposit("ACC1001", Decimal("1"))
        bank.register(User(name="Eve", pin="5"), [Account("ACC7"), Account("ACC8")])

        assert bank.summary() == {"users": 3, "accounts": 4, "transactions": 1}


class TestAuthenticate:
    """Tests for PIN checks through the directory."""

    def test_correct_pin(self, bank: InMemoryBankService, alice: User) -> None:
        assert bank.authenticate("ACC1001", "1234") is alice

    def test_wrong_pin(self, bank: InMemoryBankService) -> None:
        with pytest.raises(InvalidCredentialsError):
            bank.authenticate("ACC1001", "4321")

    def test_unknown_account(self, bank: InMemoryBankService) -> None:
        with pytest.raises(InvalidCredentialsError, match="Invalid account number or PIN"):
            bank.authenticate("ACC404", "1234")


class TestEventLogging:
    """Tests for transaction events written to the log."""

    def test_deposit_logs_event(
        self, bank: InMemoryBankService, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="atm_sim")

        tx = bank.deposit("ACC1001", Decimal("500"))

        records = [r for r in caplog.records if r.getMessage().startswith("transaction.created")]
        assert len(records) == 1
        event = records[0].extra
        assert event["event_type"] == "transaction.created"
        assert event["subject"] == "ACC1001"
        assert event["data"]["transaction_id"] == tx.transaction_id
        assert event["data"]["amount"] == "500.00"
        assert event["data"]["balance_after"] == "1500.00"
        assert event["data"]["transaction_type"] == "DEPOSIT"

        payload = json.loads(JsonFormatter().format(records[0]))
        assert payload["data"]["account_id"] == "ACC1001"

    def test_declined_withdrawal_logs_warning(
        self, bank: InMemoryBankService, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="atm_sim")

        with pytest.raises(InsufficientFundsError):
            bank.withdraw("ACC2001", Decimal("9999"))

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert any("Declined withdrawal" in r.getMessage() for r in warnings)
        assert not any(r.getMessage().startswith("transaction.created") for r in caplog.records)
