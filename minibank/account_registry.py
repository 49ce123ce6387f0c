"""Account Registry - storage for bank accounts.

The AccountRegistry is responsible for:
- Storing and retrieving accounts by account number
- Ensuring account numbers are unique
- Listing accounts in creation order

This implementation uses in-memory storage (a dictionary, whose insertion
order is the creation order). Accounts are never deleted.
"""

from typing import Dict, List, Optional

from minibank.models import BankAccount


class AccountRegistry:
    """Registry for storing bank accounts.

    The registry does no business validation: the BankSystem decides what gets
    stored and when balances change. Lookups trim surrounding whitespace from
    the account number, since numbers usually arrive as typed text.

    Thread Safety:
        This implementation is NOT thread-safe. The ledger runs single-threaded.

    Usage Example:
        ```python
        registry = AccountRegistry()
        registry.add_account(BankAccount(account_number="ACC-1001", holder_name="Alice"))

        registry.get_account(" ACC-1001 ").holder_name  # "Alice"
        registry.count_accounts()                      # 1
        ```
    """

    def __init__(self):
        """Initialize the registry with empty storage."""
        self._accounts: Dict[str, BankAccount] = {}

    def add_account(self, account: BankAccount) -> BankAccount:
        """Store a new account.

        Args:
            account (BankAccount): The account to store

        Returns:
            BankAccount: The stored account (same instance)

        Raises:
            ValueError: If an account with this number is already stored
        """
        if account.account_number in self._accounts:
            raise ValueError(f"Account {account.account_number} already exists")

        self._accounts[account.account_number] = account
        return account

    def get_account(self, account_number: str) -> Optional[BankAccount]:
        """Look up an account by number.

        Args:
            account_number (str): Account number, surrounding whitespace ignored

        Returns:
            Optional[BankAccount]: The account if found, None otherwise
        """
        return self._accounts.get(account_number.strip())

    def account_exists(self, account_number: str) -> bool:
        return account_number.strip() in self._accounts

    def list_accounts(self) -> List[BankAccount]:
        """Get all accounts in creation order.

        Note:
            Returns a new list, not a view.
        """
        return list(self._accounts.values())

    def list_kyc_verified(self) -> List[BankAccount]:
        """Get the KYC-verified accounts (the ones allowed to send transfers)."""
        return [a for a in self._accounts.values() if a.is_kyc_verified]

    def count_accounts(self) -> int:
        return len(self._accounts)
