"""Transaction log models - records of completed ledger operations.

This module provides the LogEntry class and the LogEntryType / LogStatus enums
used by the BankSystem's transaction log. The log is newest-first: every
successful operation prepends exactly one entry. Failed operations write
nothing.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from minibank.models.account import DISPLAY_TIME_FORMAT


class LogEntryType(str, Enum):
    """Kinds of operations recorded in the transaction log.

    Attributes:
        CREATE_ACCOUNT (str): A new account was opened.
        DEPOSIT (str): Funds were added to one account.
        WITHDRAWAL (str): Funds were removed from one account.
        TRANSFER (str): Funds moved from a KYC-verified sender to a receiver.
        ERROR (str): Reserved. No operation writes it, since every failure
            aborts before logging.
    """
    CREATE_ACCOUNT = "CREATE_ACCOUNT"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    TRANSFER = "TRANSFER"
    ERROR = "ERROR"


class LogStatus(str, Enum):
    """Outcome recorded on a log entry. Only SUCCESS is ever written."""
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class LogEntry(BaseModel):
    """One immutable record of a successfully completed operation.

    Usage Example:
        ```python
        entry = LogEntry(
            id=1,
            entry_type=LogEntryType.DEPOSIT,
            details="₹1000 deposited to ACC-1001 (Alice). New balance: ₹1000.",
        )
        entry.label               # "DEPOSIT"
        entry.format_timestamp()  # "17/10/2026, 09:30:00"
        ```

    Attributes:
        id (int): Position of the entry when it was written (log length + 1).
            Not stable across a cleared log.
        timestamp (datetime): Local time the entry was written.
        entry_type (LogEntryType): Operation that produced the entry.
        details (str): Human-readable description of the operation and its effect.
        status (LogStatus): Always SUCCESS for entries actually written.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ge=1,
        description="Log position at insertion time"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="Entry creation time"
    )
    entry_type: LogEntryType = Field(
        description="Type of operation"
    )
    details: str = Field(
        description="Human-readable description"
    )
    status: LogStatus = Field(
        default=LogStatus.SUCCESS,
        description="Operation outcome"
    )

    @property
    def label(self) -> str:
        """Entry type with underscores shown as spaces (``CREATE ACCOUNT``)."""
        return self.entry_type.value.replace("_", " ")

    def format_timestamp(self, time_format: str = DISPLAY_TIME_FORMAT) -> str:
        """Entry time rendered with a ``strftime`` format."""
        return self.timestamp.strftime(time_format)
