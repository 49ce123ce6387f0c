"""Core data models for MiniBank."""

from minibank.models.account import BankAccount, Amount
from minibank.models.log_entry import LogEntry, LogEntryType, LogStatus

__all__ = [
    "BankAccount",
    "Amount",
    "LogEntry",
    "LogEntryType",
    "LogStatus",
]
