"""In-memory bank directory with per-account locking."""

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from atm_sim.bank.base import BankService
from atm_sim.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
)
from atm_sim.logging import get_logger
from atm_sim.models.base import Event
from atm_sim.models.banking import Account, Transaction, User
from atm_sim.sinks.serialization import to_dict

logger = get_logger(__name__)


@dataclass
class InMemoryBankService(BankService):
    """Bank service backed by two dicts keyed by account identifier.

    The service owns every registered ``Account``; users only carry the
    identifiers. Balance operations delegate to the account, which does
    its own locking. ``_directory_lock`` only guards registration so the
    duplicate check and the inserts happen as one step.
    """

    users: dict[str, User] = field(default_factory=dict)
    accounts: dict[str, Account] = field(default_factory=dict)
    source: str = "atm-sim.bank"

    _directory_lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def register(self, user: User, accounts: Iterable[Account]) -> None:
        """Register ``user`` as the owner of ``accounts``.

        Raises
        ------
        DuplicateAccountError
            If any identifier is already registered, or repeated within
            ``accounts``. Nothing is inserted in that case.
        """
        accounts = list(accounts)
        with self._directory_lock:
            seen: set[str] = set()
            for account in accounts:
                if account.account_id in self.accounts or account.account_id in seen:
                    raise DuplicateAccountError(
                        f"Account {account.account_id} is already registered"
                    )
                seen.add(account.account_id)

            for account in accounts:
                user.add_account(account)
                self.users[account.account_id] = user
                self.accounts[account.account_id] = account

        logger.debug("Registered %s with accounts %s", user.name, sorted(seen))

    def deposit(self, account_id: str, amount: Decimal) -> Transaction:
        transaction = self._require(account_id).deposit(amount)
        self._emit(transaction)
        return transaction

    def withdraw(self, account_id: str, amount: Decimal) -> Transaction:
        account = self._require(account_id)
        try:
            transaction = account.withdraw(amount)
        except InsufficientFundsError:
            logger.warning("Declined withdrawal of %s from %s", amount, account_id)
            raise
        self._emit(transaction)
        return transaction

    def get_balance(self, account_id: str) -> Decimal:
        return self._require(account_id).get_balance()

    def list_transactions(self, account_id: str) -> list[Transaction]:
        return self._require(account_id).list_transactions()

    def find_user_by_account(self, account_id: str) -> User | None:
        return self.users.get(account_id)

    def find_account(self, account_id: str) -> Account | None:
        return self.accounts.get(account_id)

    def summary(self) -> dict[str, int]:
        """Return summary counts of registered entities."""
        unique_users = {id(user) for user in self.users.values()}
        return {
            "users": len(unique_users),
            "accounts": len(self.accounts),
            "transactions": sum(
                len(account.list_transactions()) for account in self.accounts.values()
            ),
        }

    def _require(self, account_id: str) -> Account:
        account = self.find_account(account_id)
        if account is None:
            logger.warning("Account %s not found", account_id)
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account

    def _emit(self, transaction: Transaction) -> None:
        event = Event(
            event_id=uuid.uuid4().hex,
            event_type="transaction.created",
            event_time=datetime.now(),
            source=self.source,
            subject=transaction.account_id,
            data=to_dict(transaction),
        )
        logger.info(
            "%s %s %s on %s",
            event.event_type,
            transaction.transaction_type.value,
            transaction.amount,
            transaction.account_id,
            extra={"extra": to_dict(event)},
        )
