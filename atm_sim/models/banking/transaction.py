"""Transaction model for banking domain."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from atm_sim.models.banking.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Immutable record of one deposit or withdrawal."""

    transaction_id: str
    account_id: str
    transaction_type: TransactionType
    amount: Decimal
    timestamp: datetime
    balance_after: Decimal  # balance once this record was applied
