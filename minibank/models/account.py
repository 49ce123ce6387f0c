"""BankAccount model - one account holder's identity and balance.

This module provides the BankAccount class. An account is an invariant-bearing
record: it carries the balance that must never go negative, but it does not
enforce any business rules itself. All validation lives in the BankSystem.
"""

from datetime import datetime
from typing import Any, Dict, Union

from pydantic import BaseModel, Field

Amount = Union[int, float]

DISPLAY_TIME_FORMAT = "%d/%m/%Y, %H:%M:%S"


class BankAccount(BaseModel):
    """A single bank account held in the ledger.

    Identity fields (``account_number``, ``holder_name``, ``is_kyc_verified``,
    ``created_at``) are frozen: assigning to them raises a pydantic
    ValidationError. Only ``balance`` changes after creation, and only through
    deposit, withdrawal and transfer operations on the BankSystem.

    Usage Example:
        ```python
        account = BankAccount(
            account_number="ACC-1001",
            holder_name="Alice Johnson",
            balance=50000,
            is_kyc_verified=True,
        )

        account.can_spend(20000)   # True
        account.to_display()["created_at"]  # "17/10/2026, 09:30:00"
        ```

    Attributes:
        account_number (str): Unique identifier assigned by the ledger (e.g. ``ACC-1001``).
        holder_name (str): Trimmed, non-empty name of the account holder.
        balance (float): Current balance. Must be >= 0. Plain number, no
            currency precision handling.
        is_kyc_verified (bool): Whether the holder passed KYC. Only verified
            accounts may send transfers.
        created_at (datetime): Local time the account was constructed.
    """

    account_number: str = Field(
        frozen=True,
        description="Ledger-assigned account number"
    )
    holder_name: str = Field(
        min_length=1,
        frozen=True,
        description="Name of the account holder"
    )
    balance: float = Field(
        default=0,
        ge=0,
        description="Current balance"
    )
    is_kyc_verified: bool = Field(
        default=False,
        frozen=True,
        description="KYC verification status"
    )
    created_at: datetime = Field(
        default_factory=datetime.now,
        frozen=True,
        description="Account creation time"
    )

    @property
    def initials(self) -> str:
        """Upper-cased first letters of the first two words of the holder name.

        Example:
            ```python
            BankAccount(account_number="ACC-1001", holder_name="carol ann davis").initials
            # "CA"
            ```
        """
        words = self.holder_name.split()
        return "".join(word[0] for word in words[:2]).upper()

    def can_spend(self, amount: Amount) -> bool:
        """Check if the balance covers ``amount``.

        Args:
            amount (int | float): Amount to check

        Returns:
            bool: True if balance >= amount, False otherwise
        """
        return self.balance >= amount

    def to_display(self, time_format: str = DISPLAY_TIME_FORMAT) -> Dict[str, Any]:
        """Return a plain-dict snapshot that is safe to render or print.

        The snapshot is a copy: changing it does not touch the account.

        Args:
            time_format (str): ``strftime`` format for ``created_at``

        Returns:
            Dict[str, Any]: All fields, with ``created_at`` as a formatted string
        """
        return {
            "account_number": self.account_number,
            "holder_name": self.holder_name,
            "balance": self.balance,
            "is_kyc_verified": self.is_kyc_verified,
            "created_at": self.created_at.strftime(time_format),
        }
