"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerly.domain.entities import (
    Account,
    Transaction,
    RecurringRule,
)


class Database(ABC):
    """Abstract database interface for ledgerly."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema and seed the default account."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, name: str, account_type: str, currency: str) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def account_exists(self, account_id: int) -> bool:
        """Check whether an account with the given ID exists."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        amount: Decimal,
        type: str,
        account_id: int,
        date: date,
        category: str = "",
        description: str = "",
        dest_account_id: Optional[int] = None,
    ) -> int:
        """Create a manual transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[int] = None,
        recurring_rule_id: Optional[int] = None,
        recurring_only: bool = False,
    ) -> list[Transaction]:
        """List transactions with optional filters, newest first."""
        pass

    @abstractmethod
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
        update_dest_account: bool = False,
    ) -> None:
        """Update transaction fields.

        Recurring markers (is_recurring_instance, recurring_rule_id) are never
        modified by this operation.

        Args:
            update_dest_account: If True, write dest_account_id even if it's None
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def recurring_instance_exists(self, rule_id: int, on_date: date) -> bool:
        """Check if a generated transaction exists for the rule on the given date."""
        pass

    # Recurring rule operations
    @abstractmethod
    def create_recurring_rule(
        self,
        amount: Decimal,
        type: str,
        account_id: int,
        dest_account_id: Optional[int],
        category: str,
        description: str,
        frequency: str,
        day_of_month: Optional[int],
        day_of_week: Optional[int],
        month_of_year: Optional[int],
        start_date: date,
        end_date: Optional[date],
    ) -> int:
        """Create an active recurring rule with no watermark. Returns rule ID."""
        pass

    @abstractmethod
    def get_recurring_rule(self, rule_id: int) -> Optional[RecurringRule]:
        """Get recurring rule by ID."""
        pass

    @abstractmethod
    def list_recurring_rules(self, active_only: bool = False) -> list[RecurringRule]:
        """List recurring rules, newest first."""
        pass

    @abstractmethod
    def list_due_recurring_rules(self, today: date) -> list[RecurringRule]:
        """List active rules whose watermark is unset or before ``today``."""
        pass

    @abstractmethod
    def update_recurring_rule(
        self,
        rule_id: int,
        amount: Decimal,
        type: str,
        account_id: int,
        dest_account_id: Optional[int],
        category: str,
        description: str,
        frequency: str,
        day_of_month: Optional[int],
        day_of_week: Optional[int],
        month_of_year: Optional[int],
        start_date: date,
        end_date: Optional[date],
    ) -> None:
        """Replace the editable fields of a rule.

        The watermark and active flag are left unchanged.
        """
        pass

    @abstractmethod
    def deactivate_recurring_rule(self, rule_id: int) -> None:
        """Mark a rule inactive."""
        pass

    @abstractmethod
    def delete_recurring_rule(self, rule_id: int) -> None:
        """Delete a rule. Its generated transactions are kept."""
        pass

    @abstractmethod
    def apply_recurring_generation(
        self, rule: RecurringRule, dates: list[date], deactivate: bool
    ) -> int:
        """Persist one generation step for a rule as a single unit.

        Within one database transaction: advances the watermark to the last of
        ``dates`` (only if it still equals ``rule.last_generated``), marks the
        rule inactive when ``deactivate`` is set, and inserts one recurring
        instance per date that has none yet.

        Args:
            rule: Rule as read by the generator (its watermark is the expected value)
            dates: Ascending occurrence dates to materialize
            deactivate: Whether the rule's end date has passed

        Returns:
            Number of transactions inserted

        Raises:
            StaleRuleError: If the rule's watermark no longer matches
        """
        pass
