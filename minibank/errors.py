"""Error taxonomy for MiniBank.

Every failure is raised synchronously where it is detected and aborts the
operation before any balance or log change. All of them are expected,
user-correctable outcomes: ``message`` is safe to show to the user as-is.
"""

from typing import Optional


class BankError(Exception):
    """Base class for all ledger failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BankError):
    """Malformed or out-of-range input (empty name, bad amount, same sender/receiver)."""


class NotFoundError(BankError):
    """Raised when a referenced account number does not exist."""

    def __init__(self, account_number: str, message: Optional[str] = None):
        super().__init__(message or f"Account {account_number} not found.")
        self.account_number = account_number


class InsufficientFundsError(BankError):
    """Raised when a requested amount exceeds the available balance."""

    def __init__(self, account_number: str, available: float, requested: float,
                 message: str):
        super().__init__(message)
        self.account_number = account_number
        self.available = available
        self.requested = requested


class ComplianceError(BankError):
    """Raised when a transfer sender is not KYC verified."""

    def __init__(self, account_number: str, message: str):
        super().__init__(message)
        self.account_number = account_number
