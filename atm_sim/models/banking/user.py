"""User model for banking domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from atm_sim.models.banking.account import Account


@dataclass
class User:
    """Bank customer holding a PIN and the identifiers of their accounts.

    Accounts are referenced by ``account_id`` only; the bank directory owns
    the ``Account`` objects and resolves identifiers on demand.
    """

    name: str
    pin: str = field(repr=False)
    account_ids: list[str] = field(default_factory=list)

    def authenticate(self, pin: str) -> bool:
        """Return True when ``pin`` matches the stored PIN."""
        return self.pin == pin

    def add_account(self, account: Account) -> None:
        """Associate an account with this user."""
        if account.account_id not in self.account_ids:
            self.account_ids.append(account.account_id)
