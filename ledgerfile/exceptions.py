"""Custom exception hierarchy for ledgerfile."""

from decimal import Decimal


class LedgerFileError(Exception):
    """Base exception for all ledgerfile errors."""


class NotFoundError(LedgerFileError):
    """Raised when a referenced account or file does not exist."""


class AccountNotFoundError(NotFoundError):
    """Raised when an account index is out of range."""


class RecordNotFoundError(NotFoundError):
    """Raised when a file record is absent on disk."""


class InvalidAmountError(LedgerFileError):
    """Raised when an amount is not a positive, finite number."""


class InsufficientFundsError(LedgerFileError):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, requested: Decimal, available: Decimal) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient funds: requested {requested}, available {available}"
        )


class InvalidNameError(LedgerFileError):
    """Raised when an account or file name is empty."""


class RecordIOError(LedgerFileError):
    """Raised when an underlying file operation fails."""


class ConfigurationError(LedgerFileError):
    """Raised when configuration is invalid or missing."""
