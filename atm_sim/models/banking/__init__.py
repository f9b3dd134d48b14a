"""Banking domain models."""

from atm_sim.models.banking.account import Account, to_amount
from atm_sim.models.banking.enums import MenuChoice, SessionState, TransactionType
from atm_sim.models.banking.transaction import Transaction
from atm_sim.models.banking.user import User

__all__ = [
    "Account",
    "MenuChoice",
    "SessionState",
    "Transaction",
    "TransactionType",
    "User",
    "to_amount",
]
