"""Account domain service."""

from typing import Optional
from ledgerly.database.base import Database
from ledgerly.domain.entities import ACCOUNT_TYPES, Account as AccountEntity
from ledgerly.domain.errors import ConflictError, ValidationError, duplicate_account_name


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, name: str, account_type: str = "checking", currency: str = "EUR") -> int:
        """Create a new account.

        Args:
            name: Account name
            account_type: One of checking, savings, cash, investment
            currency: ISO currency code

        Returns:
            Account ID

        Raises:
            ValidationError: If name is blank or type is unknown
            ConflictError: If account name already exists
        """
        if not name or not name.strip():
            raise ValidationError("Account name is required")
        if account_type not in ACCOUNT_TYPES:
            raise ValidationError(f"Account type must be one of: {', '.join(ACCOUNT_TYPES)}")

        for acc in self.db.list_accounts():
            if acc.name == name:
                raise ConflictError(duplicate_account_name(name))

        return self.db.create_account(name=name, account_type=account_type, currency=currency.upper())

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts."""
        return self.db.list_accounts()

    def account_exists(self, account_id: int) -> bool:
        """Return True if an account with the given ID exists."""
        return self.db.account_exists(account_id)
