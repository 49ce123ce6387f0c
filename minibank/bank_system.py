"""Bank System - the ledger that owns accounts and the transaction log.

The BankSystem is responsible for:
- Opening accounts with sequential, never-reused account numbers
- Deposits, withdrawals and KYC-gated transfers
- Enforcing every business rule before any state changes
- Keeping a newest-first log of successful operations

Key Principle: every operation validates first and mutates last. The first
failing check raises a BankError and leaves balances and the log untouched.
"""

import logging
import math
from typing import List, Optional

from pydantic import BaseModel

from minibank.account_registry import AccountRegistry
from minibank.amounts import format_number, require_number
from minibank.config import BankSettings
from minibank.errors import (
    BankError,
    ComplianceError,
    InsufficientFundsError,
    NotFoundError,
    ValidationError,
)
from minibank.models import Amount, BankAccount, LogEntry, LogEntryType

logger = logging.getLogger(__name__)


class TransferResult:
    """Result of a successful transfer.

    Attributes:
        sender (BankAccount): The debited account, with its new balance
        receiver (BankAccount): The credited account, with its new balance
        amount (float): Amount moved
    """

    def __init__(self, sender: BankAccount, receiver: BankAccount, amount: float):
        self.sender = sender
        self.receiver = receiver
        self.amount = amount

    def __repr__(self) -> str:
        return (
            f"TransferResult(sender={self.sender.account_number}, "
            f"receiver={self.receiver.account_number}, amount={self.amount})"
        )


class BankSummary(BaseModel):
    """Headline numbers for the accounts overview."""
    total_accounts: int
    kyc_verified_accounts: int
    total_balance: float


class BankSystem:
    """In-memory ledger for accounts, money movement and the transaction log.

    A BankSystem is an ordinary object: the entry point constructs one and
    hands it to whatever needs it (console, tests). There is no shared global
    instance.

    Ordering of checks:
        Amount is checked first, then account existence, then (for transfers)
        KYC, then funds. An unverified sender with too little money therefore
        gets a ComplianceError, not an InsufficientFundsError.

    Usage Example:
        ```python
        bank = BankSystem()

        alice = bank.create_account("Alice Johnson", 50000, is_kyc_verified=True)
        bob = bank.create_account("Bob Smith")

        bank.deposit(bob.account_number, 1000)
        result = bank.transfer(alice.account_number, bob.account_number, 2500)
        print(result.sender.balance, result.receiver.balance)  # 47500.0 3500.0

        for entry in bank.get_log():  # newest first
            print(entry.label, entry.details)
        ```
    """

    def __init__(self, settings: Optional[BankSettings] = None,
                 registry: Optional[AccountRegistry] = None):
        """Initialize an empty ledger.

        Args:
            settings (Optional[BankSettings]): Numbering and currency settings.
                Defaults to ``BankSettings()``.
            registry (Optional[AccountRegistry]): Account storage. Defaults to
                a new empty registry.
        """
        self.settings = settings or BankSettings()
        self.registry = registry or AccountRegistry()
        self._log: List[LogEntry] = []
        self._counter = self.settings.account_number_base

    # ========== Helpers ==========

    def _money(self, amount: float) -> str:
        return f"{self.settings.currency_symbol}{format_number(amount)}"

    def _next_account_number(self) -> str:
        self._counter += 1
        return f"{self.settings.account_prefix}-{self._counter}"

    def _record(self, entry_type: LogEntryType, details: str) -> LogEntry:
        entry = LogEntry(id=len(self._log) + 1, entry_type=entry_type, details=details)
        self._log.insert(0, entry)
        return entry

    def _reject(self, operation: str, error: BankError) -> BankError:
        logger.info(
            "%s rejected: %s", operation, error.message,
            extra={"operation": operation, "error": type(error).__name__},
        )
        return error

    def _require_account(self, operation: str, account_number: str) -> BankAccount:
        account = self.registry.get_account(account_number)
        if account is None:
            raise self._reject(operation, NotFoundError(account_number.strip()))
        return account

    def _require_positive(self, operation: str, amount: Amount, message: str) -> float:
        try:
            value = require_number(amount, message)
        except ValidationError as e:
            raise self._reject(operation, e) from None
        if value <= 0:
            raise self._reject(operation, ValidationError(message))
        return value

    def _require_credit(self, operation: str, account: BankAccount, value: float) -> None:
        if not math.isfinite(account.balance + value):
            raise self._reject(operation, ValidationError(
                f"Amount would take the balance of {account.account_number} "
                f"beyond the largest supported number."
            ))

    # ========== Core Operations ==========

    def create_account(self, holder_name: str, initial_balance: Amount = 0,
                       is_kyc_verified: bool = False) -> BankAccount:
        """Open a new account.

        Args:
            holder_name (str): Account holder's name. Trimmed; must not be empty.
            initial_balance (int | float): Opening balance, >= 0. Default 0.
            is_kyc_verified (bool): KYC status. Default False.

        Returns:
            BankAccount: The new account

        Raises:
            ValidationError: If the name is empty or the balance is not a
                non-negative number
        """
        name = holder_name.strip() if isinstance(holder_name, str) else ""
        if not name:
            raise self._reject("create_account", ValidationError("Holder name cannot be empty."))

        message = "Initial balance must be a non-negative number."
        try:
            balance = require_number(initial_balance, message)
        except ValidationError as e:
            raise self._reject("create_account", e) from None
        if balance < 0:
            raise self._reject("create_account", ValidationError(message))

        account_number = self._next_account_number()
        account = BankAccount(
            account_number=account_number,
            holder_name=name,
            balance=balance,
            is_kyc_verified=bool(is_kyc_verified),
        )
        self.registry.add_account(account)

        kyc = "Verified" if account.is_kyc_verified else "Not Verified"
        self._record(
            LogEntryType.CREATE_ACCOUNT,
            f'Account {account_number} created for "{name}". '
            f"Balance: {self._money(balance)}. KYC: {kyc}.",
        )
        logger.info(
            "Opened %s for %s", account_number, name,
            extra={"operation": "create_account", "account_number": account_number},
        )
        return account

    def deposit(self, account_number: str, amount: Amount) -> BankAccount:
        """Add funds to an account.

        Args:
            account_number (str): Target account (whitespace ignored)
            amount (int | float): Amount to add, > 0

        Returns:
            BankAccount: The updated account

        Raises:
            ValidationError: If amount is not a number, is <= 0, or would push
                the balance past the largest finite number
            NotFoundError: If the account does not exist
        """
        value = self._require_positive(
            "deposit", amount, "Deposit amount must be greater than zero."
        )
        account = self._require_account("deposit", account_number)
        self._require_credit("deposit", account, value)

        account.balance += value

        self._record(
            LogEntryType.DEPOSIT,
            f"{self._money(value)} deposited to {account.account_number} "
            f"({account.holder_name}). New balance: {self._money(account.balance)}.",
        )
        logger.info(
            "Deposited %s to %s", format_number(value), account.account_number,
            extra={"operation": "deposit", "account_number": account.account_number},
        )
        return account

    def withdraw(self, account_number: str, amount: Amount) -> BankAccount:
        """Remove funds from an account.

        Args:
            account_number (str): Source account (whitespace ignored)
            amount (int | float): Amount to remove, > 0 and <= balance

        Returns:
            BankAccount: The updated account

        Raises:
            ValidationError: If amount is not a number or is <= 0
            NotFoundError: If the account does not exist
            InsufficientFundsError: If amount exceeds the balance
        """
        value = self._require_positive(
            "withdraw", amount, "Withdrawal amount must be greater than zero."
        )
        account = self._require_account("withdraw", account_number)

        if not account.can_spend(value):
            raise self._reject("withdraw", InsufficientFundsError(
                account.account_number, account.balance, value,
                f"Insufficient balance. Available: {self._money(account.balance)}, "
                f"Requested: {self._money(value)}.",
            ))

        account.balance -= value

        self._record(
            LogEntryType.WITHDRAWAL,
            f"{self._money(value)} withdrawn from {account.account_number} "
            f"({account.holder_name}). New balance: {self._money(account.balance)}.",
        )
        logger.info(
            "Withdrew %s from %s", format_number(value), account.account_number,
            extra={"operation": "withdraw", "account_number": account.account_number},
        )
        return account

    def transfer(self, sender_account_number: str, receiver_account_number: str,
                 amount: Amount) -> TransferResult:
        """Move funds from a KYC-verified sender to a receiver.

        The receiver does not need to be verified. Both balances change
        together after every check has passed.

        Args:
            sender_account_number (str): Account to debit
            receiver_account_number (str): Account to credit
            amount (int | float): Amount to move, > 0

        Returns:
            TransferResult: Both updated accounts

        Raises:
            ValidationError: If amount is invalid or sender == receiver
            NotFoundError: If the sender (checked first) or receiver is unknown
            ComplianceError: If the sender is not KYC verified
            InsufficientFundsError: If amount exceeds the sender's balance
            ValidationError: If the credit would push the receiver's balance
                past the largest finite number
        """
        value = self._require_positive(
            "transfer", amount, "Transfer amount must be greater than zero."
        )
        if sender_account_number.strip() == receiver_account_number.strip():
            raise self._reject("transfer", ValidationError(
                "Sender and receiver accounts cannot be the same."
            ))

        sender = self._require_account("transfer", sender_account_number)
        receiver = self._require_account("transfer", receiver_account_number)

        if not sender.is_kyc_verified:
            raise self._reject("transfer", ComplianceError(
                sender.account_number,
                f"Transfer failed: Sender account {sender.account_number} "
                f"({sender.holder_name}) is not KYC verified.",
            ))

        if not sender.can_spend(value):
            raise self._reject("transfer", InsufficientFundsError(
                sender.account_number, sender.balance, value,
                f"Transfer failed: Insufficient balance in {sender.account_number}. "
                f"Available: {self._money(sender.balance)}, Requested: {self._money(value)}.",
            ))
        self._require_credit("transfer", receiver, value)

        sender.balance -= value
        receiver.balance += value

        self._record(
            LogEntryType.TRANSFER,
            f"{self._money(value)} transferred from {sender.account_number} "
            f"({sender.holder_name}) to {receiver.account_number} ({receiver.holder_name}). "
            f"Sender balance: {self._money(sender.balance)}. "
            f"Receiver balance: {self._money(receiver.balance)}.",
        )
        logger.info(
            "Transferred %s from %s to %s", format_number(value),
            sender.account_number, receiver.account_number,
            extra={"operation": "transfer", "account_number": sender.account_number},
        )
        return TransferResult(sender=sender, receiver=receiver, amount=value)

    def clear_log(self) -> int:
        """Empty the transaction log.

        Account numbering is not affected: numbers issued before the clear are
        never reissued.

        Returns:
            int: Number of entries removed
        """
        removed = len(self._log)
        self._log.clear()
        logger.info("Cleared %d log entries", removed, extra={"operation": "clear_log"})
        return removed

    # ========== Read Operations ==========

    def get_account(self, account_number: str) -> Optional[BankAccount]:
        """Look up an account. Returns None if it does not exist."""
        return self.registry.get_account(account_number)

    def list_accounts(self) -> List[BankAccount]:
        """All accounts in creation order."""
        return self.registry.list_accounts()

    def list_kyc_verified_accounts(self) -> List[BankAccount]:
        """Accounts allowed to send transfers, in creation order."""
        return self.registry.list_kyc_verified()

    def get_log(self) -> List[LogEntry]:
        """Transaction log, most recent first. Returns a copy."""
        return list(self._log)

    def get_summary(self) -> BankSummary:
        """Account count, KYC-verified count and total balance across accounts."""
        accounts = self.registry.list_accounts()
        return BankSummary(
            total_accounts=len(accounts),
            kyc_verified_accounts=sum(1 for a in accounts if a.is_kyc_verified),
            total_balance=sum(a.balance for a in accounts),
        )
