"""Account model for banking domain."""

import threading
import uuid
from datetime import datetime
from decimal import Decimal, InvalidOperation

from atm_sim.exceptions import InsufficientFundsError, InvalidAmountError
from atm_sim.models.banking.enums import TransactionType
from atm_sim.models.banking.transaction import Transaction

CENT = Decimal("0.01")

# Largest single deposit or withdrawal, and largest balance an account may hold.
# Both stay far inside the default 28-digit decimal context, so balance
# arithmetic is always exact.
MAX_AMOUNT = Decimal("1000000000.00")
MAX_BALANCE = Decimal("1000000000000.00")


def _to_decimal(value: Decimal | int | float | str, label: str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid {label}: {value!r}")
    try:
        return value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Invalid {label}: {value!r}") from exc


def _to_cents(amount: Decimal, label: str) -> Decimal:
    # caller has bounded the magnitude, so quantize cannot overflow
    cents = amount.quantize(CENT)
    if cents != amount:
        raise InvalidAmountError(f"{label.capitalize()} must be in whole cents, got {amount}")
    return cents


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Coerce ``value`` to a positive ``Decimal`` in whole cents.

    Floats go through ``str()`` so ``0.1`` stays ``Decimal("0.10")``.

    Raises
    ------
    InvalidAmountError
        If the value is not numeric, not finite, not greater than zero,
        above ``MAX_AMOUNT``, or has digits below one cent.
    """
    amount = _to_decimal(value, "amount")
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")
    if amount > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount must not exceed {MAX_AMOUNT}, got {amount}")
    return _to_cents(amount, "amount")


class Account:
    """Bank account owning a balance and its transaction log.

    Every public method holds the account lock for its whole body, so a
    reader never sees a balance without its matching log entry. No method
    takes a second account's lock.

    Parameters
    ----------
    account_id : str
        Unique account identifier (e.g. ``ACC1001``).
    opening_balance : Decimal | int | float | str
        Starting balance, at most ``MAX_BALANCE``. Does not produce a
        transaction.
    """

    def __init__(
        self,
        account_id: str,
        opening_balance: Decimal | int | float | str = Decimal("0"),
    ) -> None:
        balance = _to_decimal(opening_balance, "opening balance")
        if not balance.is_finite() or balance < 0 or balance > MAX_BALANCE:
            raise InvalidAmountError(
                f"Opening balance must be between 0 and {MAX_BALANCE}, got {opening_balance!r}"
            )
        balance = _to_cents(balance, "opening balance")

        self._account_id = account_id
        self._balance = balance
        self._transactions: list[Transaction] = []
        self._lock = threading.Lock()

    @property
    def account_id(self) -> str:
        return self._account_id

    def deposit(self, amount: Decimal | int | float | str) -> Transaction:
        """Add ``amount`` to the balance and record a DEPOSIT.

        Raises
        ------
        InvalidAmountError
            If the new balance would exceed ``MAX_BALANCE``. Nothing is
            changed.
        """
        value = to_amount(amount)
        with self._lock:
            if self._balance + value > MAX_BALANCE:
                raise InvalidAmountError(
                    f"Deposit of {value} would take {self._account_id} above {MAX_BALANCE}"
                )
            self._balance += value
            return self._record(TransactionType.DEPOSIT, value)

    def withdraw(self, amount: Decimal | int | float | str) -> Transaction:
        """Remove ``amount`` from the balance and record a WITHDRAW.

        Raises
        ------
        InsufficientFundsError
            If ``amount`` exceeds the balance. Nothing is changed.
        """
        value = to_amount(amount)
        with self._lock:
            if value > self._balance:
                raise InsufficientFundsError(
                    f"Insufficient funds in {self._account_id}: "
                    f"requested {value}, available {self._balance}"
                )
            self._balance -= value
            return self._record(TransactionType.WITHDRAW, value)

    def get_balance(self) -> Decimal:
        """Return the current balance."""
        with self._lock:
            return self._balance

    def list_transactions(self) -> list[Transaction]:
        """Return the transaction log in chronological order."""
        with self._lock:
            return list(self._transactions)

    def _record(self, transaction_type: TransactionType, amount: Decimal) -> Transaction:
        # caller holds self._lock
        transaction = Transaction(
            transaction_id=uuid.uuid4().hex,
            account_id=self._account_id,
            transaction_type=transaction_type,
            amount=amount,
            timestamp=datetime.now(),
            balance_after=self._balance,
        )
        self._transactions.append(transaction)
        return transaction

    def __repr__(self) -> str:
        return f"Account(account_id={self._account_id!r})"
