"""ATM front end: session state machine and menu loop."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from atm_sim.bank.base import BankService
from atm_sim.exceptions import (
    AtmError,
    InsufficientFundsError,
    InvalidCredentialsError,
    InvalidMenuChoiceError,
    NotLoggedInError,
)
from atm_sim.logging import get_logger
from atm_sim.models.banking import MenuChoice, SessionState, User, to_amount
from atm_sim.sinks.console import ConsoleSink

logger = get_logger(__name__)

ReadLine = Callable[[str], str]


def parse_choice(text: str) -> MenuChoice:
    """Parse a menu selection.

    Raises
    ------
    InvalidMenuChoiceError
        If ``text`` is not one of the menu numbers.
    """
    try:
        return MenuChoice(int(text.strip()))
    except ValueError as exc:
        raise InvalidMenuChoiceError("Invalid choice.") from exc


def parse_amount(text: str) -> Decimal:
    """Parse an amount typed at the prompt; see ``to_amount``."""
    return to_amount(text)


class Atm:
    """Session driver talking to a ``BankService``.

    Only one account is current per session. Every balance operation is
    forwarded to the bank with that account's identifier.
    """

    def __init__(self, bank: BankService, sink: ConsoleSink | None = None) -> None:
        self.bank = bank
        self.sink = sink or ConsoleSink()
        self.state = SessionState.LOGGED_OUT
        self.current_user: User | None = None
        self.current_account_id: str | None = None

    @property
    def logged_in(self) -> bool:
        return self.state is SessionState.LOGGED_IN

    def login(self, account_id: str, pin: str) -> User:
        """Start a session for ``account_id``.

        Raises
        ------
        InvalidCredentialsError
            If the account is unknown or the PIN is wrong. The session
            stays logged out.
        """
        user = self.bank.authenticate(account_id, pin)

        self.current_user = user
        self.current_account_id = account_id
        self.state = SessionState.LOGGED_IN
        logger.info("Session opened for account %s", account_id)
        self.sink.message("Login successful!")
        return user

    def logout(self) -> None:
        if self.logged_in:
            logger.info("Session closed for account %s", self.current_account_id)
        self.current_user = None
        self.current_account_id = None
        self.state = SessionState.LOGGED_OUT
        self.sink.message("Logged out successfully.")

    def check_balance(self) -> Decimal:
        balance = self.bank.get_balance(self._account_id())
        self.sink.balance(balance)
        return balance

    def deposit(self, amount: Decimal | str) -> Decimal:
        account_id = self._account_id()
        transaction = self.bank.deposit(account_id, to_amount(amount))
        self.sink.receipt(transaction)
        return transaction.balance_after

    def withdraw(self, amount: Decimal | str) -> Decimal:
        account_id = self._account_id()
        transaction = self.bank.withdraw(account_id, to_amount(amount))
        self.sink.receipt(transaction)
        return transaction.balance_after

    def show_transactions(self) -> None:
        account_id = self._account_id()
        self.sink.transactions(account_id, self.bank.list_transactions(account_id))

    def run_menu(self, read_line: ReadLine = input) -> None:
        """Loop over the menu until logout or end of input.

        Every ``AtmError`` is reported and the loop moves on to the next
        prompt; ``InsufficientFundsError`` is shown as the short
        "Insufficient funds!" notice.
        """
        if not self.logged_in:
            self.sink.error(NotLoggedInError("Please login first."))
            return

        while self.logged_in:
            self.sink.menu()
            try:
                raw = read_line("Enter choice: ")
            except EOFError:
                self.logout()
                break

            try:
                self._dispatch(parse_choice(raw), read_line)
            except EOFError:
                self.logout()
            except AtmError as exc:
                self._report(exc)

    def run_session(self, read_line: ReadLine = input) -> bool:
        """Prompt for credentials, then run the menu.

        Returns
        -------
        bool
            False if the login was rejected or input ended early.
        """
        try:
            account_id = read_line("Enter account number: ").strip()
            pin = read_line("Enter PIN: ").strip()
        except EOFError:
            return False

        try:
            self.login(account_id, pin)
        except InvalidCredentialsError as exc:
            self.sink.error(exc)
            return False

        self.run_menu(read_line)
        return True

    def _dispatch(self, choice: MenuChoice, read_line: ReadLine) -> None:
        if choice is MenuChoice.CHECK_BALANCE:
            self.check_balance()
        elif choice is MenuChoice.DEPOSIT:
            self.deposit(parse_amount(read_line("Enter amount to deposit: ")))
        elif choice is MenuChoice.WITHDRAW:
            self.withdraw(parse_amount(read_line("Enter amount to withdraw: ")))
        elif choice is MenuChoice.SHOW_TRANSACTIONS:
            self.show_transactions()
        elif choice is MenuChoice.LOGOUT:
            self.logout()

    def _report(self, exc: AtmError) -> None:
        if isinstance(exc, InsufficientFundsError):
            self.sink.error(InsufficientFundsError("Insufficient funds!"))
        else:
            self.sink.error(exc)

    def _account_id(self) -> str:
        if not self.logged_in or self.current_account_id is None:
            raise NotLoggedInError("Please login first.")
        return self.current_account_id
