"""MiniBank - in-memory ledger for a toy banking demo."""

__version__ = "0.1.0"

# Main ledger interface
from minibank.bank_system import BankSystem, BankSummary, TransferResult

# Core models
from minibank.models import (
    BankAccount,
    LogEntry,
    LogEntryType,
    LogStatus,
)

# Errors
from minibank.errors import (
    BankError,
    ValidationError,
    NotFoundError,
    InsufficientFundsError,
    ComplianceError,
)

# Components (for advanced usage)
from minibank.account_registry import AccountRegistry
from minibank.amounts import parse_amount
from minibank.config import BankSettings

__all__ = [
    # Ledger
    "BankSystem",
    "BankSummary",
    "TransferResult",
    # Models
    "BankAccount",
    "LogEntry",
    "LogEntryType",
    "LogStatus",
    # Errors
    "BankError",
    "ValidationError",
    "NotFoundError",
    "InsufficientFundsError",
    "ComplianceError",
    # Components
    "AccountRegistry",
    "parse_amount",
    "BankSettings",
]
