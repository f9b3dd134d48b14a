"""Custom exception hierarchy for atm-sim."""


class AtmError(Exception):
    """Base exception for all atm-sim errors."""


class AccountNotFoundError(AtmError):
    """Raised when an account identifier is not in the directory."""


class DuplicateAccountError(AtmError):
    """Raised when an account identifier is registered twice."""


class InsufficientFundsError(AtmError):
    """Raised when a withdrawal exceeds the available balance."""


class InvalidAmountError(AtmError):
    """Raised when an amount is not a finite positive number."""


class InvalidCredentialsError(AtmError):
    """Raised when an account number and PIN do not match."""


class InvalidMenuChoiceError(AtmError):
    """Raised when menu input is not a known option."""


class NotLoggedInError(AtmError):
    """Raised when a session operation is attempted while logged out."""


class ConfigurationError(AtmError):
    """Raised when configuration is invalid or missing."""
