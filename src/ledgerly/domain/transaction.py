"""Transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal
from ledgerly.database.base import Database
from ledgerly.domain.entities import DEFAULT_ACCOUNT_ID, Transaction as TransactionEntity
from ledgerly.domain.errors import NotFoundError, transaction_not_found
from ledgerly.domain.validation import require_accounts, validate_payload


class TransactionService:
    """Service for managing manually entered transactions.

    Generated recurring instances can be read, edited and deleted here like any
    other row, but this service never sets or changes their recurring markers.
    """

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        amount: Decimal,
        type: str,
        date: date,
        account_id: Optional[int] = None,
        dest_account_id: Optional[int] = None,
        category: str = "",
        description: str = "",
    ) -> int:
        """Create a transaction.

        Args:
            amount: Positive amount
            type: income, expense or transfer
            date: Transaction date
            account_id: Source account ID (defaults to the main account)
            dest_account_id: Destination account ID, transfers only
            category: Category name, required unless transfer
            description: Optional description

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the input is invalid or an account doesn't exist
        """
        if account_id is None:
            account_id = DEFAULT_ACCOUNT_ID

        validate_payload(amount, type, account_id, dest_account_id, category)
        require_accounts(self.db, account_id, dest_account_id)

        return self.db.create_transaction(
            amount=amount,
            type=type,
            account_id=account_id,
            date=date,
            category=category.strip(),
            description=description,
            dest_account_id=dest_account_id,
        )

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        type: Optional[str] = None,
        account_id: Optional[int] = None,
        dest_account_id: Optional[int] = None,
        category: Optional[str] = None,
        description: Optional[str] = None,
        date: Optional[date] = None,
    ) -> None:
        """Update transaction fields.

        Only the provided fields change. The merged result is validated as a
        whole, so e.g. switching a transfer to an expense clears the
        destination account and requires a category.

        Raises:
            NotFoundError: If transaction doesn't exist
            ValidationError: If the merged transaction is invalid
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        new_type = type if type is not None else txn.type
        new_account_id = account_id if account_id is not None else txn.account_id
        new_category = category if category is not None else txn.category
        new_amount = amount if amount is not None else txn.amount
        if new_type == "transfer":
            new_dest = dest_account_id if dest_account_id is not None else txn.dest_account_id
        else:
            new_dest = None

        validate_payload(new_amount, new_type, new_account_id, new_dest, new_category)
        require_accounts(self.db, new_account_id, new_dest)

        self.db.update_transaction(
            transaction_id=transaction_id,
            amount=amount,
            type=type,
            account_id=account_id,
            dest_account_id=new_dest,
            category=category,
            description=description,
            date=date,
            update_dest_account=True,
        )

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Deleting a generated instance does not affect its rule; the rule's
        watermark keeps the date from being generated again.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        self.db.delete_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[int] = None,
        recurring_rule_id: Optional[int] = None,
        recurring_only: bool = False,
    ) -> list[TransactionEntity]:
        """List transactions with filters, newest first."""
        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            account_id=account_id,
            recurring_rule_id=recurring_rule_id,
            recurring_only=recurring_only,
        )
