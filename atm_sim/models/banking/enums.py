"""Enumeration types for banking domain entities."""

from enum import Enum, IntEnum


class TransactionType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"

    @property
    def label(self) -> str:
        """Human-readable label used on receipts."""
        return self.value.capitalize()


class SessionState(str, Enum):
    LOGGED_OUT = "LOGGED_OUT"
    LOGGED_IN = "LOGGED_IN"


class MenuChoice(IntEnum):
    CHECK_BALANCE = 1
    DEPOSIT = 2
    WITHDRAW = 3
    SHOW_TRANSACTIONS = 4
    LOGOUT = 5

    @property
    def label(self) -> str:
        """Menu line text."""
        return _MENU_LABELS[self]


_MENU_LABELS = {
    MenuChoice.CHECK_BALANCE: "Check Balance",
    MenuChoice.DEPOSIT: "Deposit",
    MenuChoice.WITHDRAW: "Withdraw",
    MenuChoice.SHOW_TRANSACTIONS: "Show Transactions",
    MenuChoice.LOGOUT: "Logout",
}
