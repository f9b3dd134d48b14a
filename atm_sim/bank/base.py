"""Abstract bank service consumed by the ATM front end."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from atm_sim.exceptions import InvalidCredentialsError
from atm_sim.logging import get_logger
from atm_sim.models.banking import Account, Transaction, User

logger = get_logger(__name__)


class BankService(ABC):
    """Capability the ATM uses to reach account data.

    The ATM never touches ``Account`` objects directly; every balance
    read or mutation goes through this interface. Implementations may be
    in-memory, remote, or test doubles, but they must all honor the same
    not-found behavior:

    - ``deposit``, ``withdraw``, ``get_balance`` and ``list_transactions``
      raise ``AccountNotFoundError`` for an unknown identifier.
    - ``find_user_by_account`` and ``find_account`` return ``None`` and
      never raise.

    ``authenticate`` is built on the two lookups, so every implementation
    shares the same login rule.
    """

    @abstractmethod
    def deposit(self, account_id: str, amount: Decimal) -> Transaction:
        """Deposit ``amount`` into the account and return the new record."""

    @abstractmethod
    def withdraw(self, account_id: str, amount: Decimal) -> Transaction:
        """Withdraw ``amount`` from the account and return the new record."""

    @abstractmethod
    def get_balance(self, account_id: str) -> Decimal:
        """Return the account balance."""

    @abstractmethod
    def list_transactions(self, account_id: str) -> list[Transaction]:
        """Return the account's transactions in chronological order."""

    @abstractmethod
    def find_user_by_account(self, account_id: str) -> User | None:
        """Return the owner of the account, or None."""

    @abstractmethod
    def find_account(self, account_id: str) -> Account | None:
        """Return the account, or None."""

    def authenticate(self, account_id: str, pin: str) -> User:
        """Return the account owner if ``pin`` is correct.

        Raises
        ------
        InvalidCredentialsError
            For an unknown account or a wrong PIN. The message does not
            say which.
        """
        user = self.find_user_by_account(account_id)
        if user is None or not user.authenticate(pin) or self.find_account(account_id) is None:
            logger.warning("Rejected login for account %s", account_id)
            raise InvalidCredentialsError("Invalid account number or PIN.")
        return user
