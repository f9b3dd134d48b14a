"""Console sink for the interactive ATM session."""

from decimal import Decimal

from atm_sim.models.banking import MenuChoice, Transaction, TransactionType


class ConsoleSink:
    """Render ATM prompts, receipts and history to stdout."""

    def __init__(self, currency_symbol: str = "$") -> None:
        """Initialize console sink.

        Parameters
        ----------
        currency_symbol : str
            Prefix used when formatting amounts.
        """
        self.currency_symbol = currency_symbol
        self._counts: dict[str, int] = {}

    def message(self, text: str) -> None:
        """Print a plain status line."""
        print(text)

    def error(self, exc: Exception) -> None:
        """Print a recovered error."""
        self._counts["errors"] = self._counts.get("errors", 0) + 1
        print(str(exc))

    def menu(self) -> None:
        """Print the main menu."""
        print("\n--- ATM Menu ---")
        for choice in MenuChoice:
            print(f"{choice.value}. {choice.label}")

    def balance(self, balance: Decimal) -> None:
        print(f"Balance: {self.money(balance)}")

    def receipt(self, transaction: Transaction) -> None:
        """Print the outcome of a successful deposit or withdrawal.

        The balance shown is the one recorded with the transaction.
        """
        if transaction.transaction_type is TransactionType.DEPOSIT:
            verb = "Deposit"
        else:
            verb = "Withdrawal"
        self._counts[transaction.transaction_type.value] = (
            self._counts.get(transaction.transaction_type.value, 0) + 1
        )
        print(f"{verb} successful! Balance: {self.money(transaction.balance_after)}")

    def transactions(self, account_id: str, transactions: list[Transaction]) -> None:
        """Print an account's history, or a notice when it is empty."""
        if not transactions:
            print("No transactions yet.")
            return

        print(f"Transaction history for account {account_id}:")
        for transaction in transactions:
            print(self.format_transaction(transaction))

    def format_transaction(self, transaction: Transaction) -> str:
        timestamp = transaction.timestamp.strftime("%a %b %d %H:%M:%S %Y")
        return (
            f"{timestamp} | {transaction.transaction_type.label} | "
            f"Amount: {self.money(transaction.amount)}"
        )

    def money(self, amount: Decimal) -> str:
        return f"{self.currency_symbol}{amount:.2f}"

    def close(self) -> None:
        """Print a per-session summary of completed operations."""
        if not self._counts:
            return
        print(f"\n{'=' * 30}")
        print("Session Summary")
        print("=" * 30)
        for name, count in self._counts.items():
            print(f"  {name}: {count}")
