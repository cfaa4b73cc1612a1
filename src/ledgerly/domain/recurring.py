"""Recurring rule domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal
import structlog

from ledgerly.database.base import Database
from ledgerly.domain.entities import (
    DEFAULT_ACCOUNT_ID,
    RecurringRule as RecurringRuleEntity,
    Transaction as TransactionEntity,
)
from ledgerly.domain.errors import NotFoundError, rule_not_found
from ledgerly.domain.validation import require_accounts, validate_payload, validate_schedule


logger = structlog.get_logger(__name__)


def validate_rule_input(
    amount: Decimal,
    type: str,
    frequency: str,
    start_date: Optional[date],
    account_id: int,
    dest_account_id: Optional[int] = None,
    category: str = "",
    day_of_month: Optional[int] = None,
    day_of_week: Optional[int] = None,
    month_of_year: Optional[int] = None,
    end_date: Optional[date] = None,
) -> None:
    """Validate all fields of a recurring rule.

    Raises:
        ValidationError: On the first invalid field
    """
    validate_payload(amount, type, account_id, dest_account_id, category)
    validate_schedule(frequency, start_date, end_date, day_of_month, day_of_week, month_of_year)


class RecurringRuleService:
    """Service for managing recurring rules.

    Generation itself lives in ``ledgerly.domain.generator``; this service only
    creates, edits and retires rules. It never writes a rule's watermark.
    """

    def __init__(self, db: Database):
        """Initialize recurring rule service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_rule(
        self,
        amount: Decimal,
        type: str,
        frequency: str,
        start_date: date,
        account_id: Optional[int] = None,
        dest_account_id: Optional[int] = None,
        category: str = "",
        description: str = "",
        day_of_month: Optional[int] = None,
        day_of_week: Optional[int] = None,
        month_of_year: Optional[int] = None,
        end_date: Optional[date] = None,
    ) -> int:
        """Create a recurring rule.

        Args:
            amount: Positive amount copied to every generated transaction
            type: income, expense or transfer
            frequency: weekly, biweekly, monthly or yearly
            start_date: First date the rule may fire
            account_id: Source account ID (defaults to the main account)
            dest_account_id: Destination account ID, transfers only
            category: Category name, required unless transfer
            description: Optional description
            day_of_month: 1-31, monthly/yearly only (clamped in short months)
            day_of_week: 0 (Sunday) to 6 (Saturday), weekly/biweekly only
            month_of_year: 1-12, yearly only
            end_date: Optional last date the rule may fire (inclusive)

        Returns:
            Rule ID

        Raises:
            ValidationError: If the input is invalid or an account doesn't exist
        """
        if account_id is None:
            account_id = DEFAULT_ACCOUNT_ID

        validate_rule_input(
            amount=amount,
            type=type,
            frequency=frequency,
            start_date=start_date,
            account_id=account_id,
            dest_account_id=dest_account_id,
            category=category,
            day_of_month=day_of_month,
            day_of_week=day_of_week,
            month_of_year=month_of_year,
            end_date=end_date,
        )
        require_accounts(self.db, account_id, dest_account_id)

        rule_id = self.db.create_recurring_rule(
            amount=amount,
            type=type,
            account_id=account_id,
            dest_account_id=dest_account_id,
            category=category.strip(),
            description=description,
            frequency=frequency,
            day_of_month=day_of_month,
            day_of_week=day_of_week,
            month_of_year=month_of_year,
            start_date=start_date,
            end_date=end_date,
        )
        logger.info("recurring_rule_created", rule_id=rule_id, frequency=frequency)
        return rule_id

    def update_rule(
        self,
        rule_id: int,
        amount: Decimal,
        type: str,
        frequency: str,
        start_date: date,
        account_id: Optional[int] = None,
        dest_account_id: Optional[int] = None,
        category: str = "",
        description: str = "",
        day_of_month: Optional[int] = None,
        day_of_week: Optional[int] = None,
        month_of_year: Optional[int] = None,
        end_date: Optional[date] = None,
    ) -> None:
        """Replace the editable fields of a rule.

        Takes the same arguments as create_rule. The watermark and the active
        flag are kept, so already generated dates are never produced again.

        Raises:
            NotFoundError: If the rule doesn't exist
            ValidationError: If the input is invalid or an account doesn't exist
        """
        self.require_rule(rule_id)

        if account_id is None:
            account_id = DEFAULT_ACCOUNT_ID

        validate_rule_input(
            amount=amount,
            type=type,
            frequency=frequency,
            start_date=start_date,
            account_id=account_id,
            dest_account_id=dest_account_id,
            category=category,
            day_of_month=day_of_month,
            day_of_week=day_of_week,
            month_of_year=month_of_year,
            end_date=end_date,
        )
        require_accounts(self.db, account_id, dest_account_id)

        self.db.update_recurring_rule(
            rule_id=rule_id,
            amount=amount,
            type=type,
            account_id=account_id,
            dest_account_id=dest_account_id,
            category=category.strip(),
            description=description,
            frequency=frequency,
            day_of_month=day_of_month,
            day_of_week=day_of_week,
            month_of_year=month_of_year,
            start_date=start_date,
            end_date=end_date,
        )
        logger.info("recurring_rule_updated", rule_id=rule_id)

    def get_rule(self, rule_id: int) -> Optional[RecurringRuleEntity]:
        """Get rule by ID, or None if not found."""
        return self.db.get_recurring_rule(rule_id)

    def require_rule(self, rule_id: int) -> RecurringRuleEntity:
        """Get rule by ID.

        Raises:
            NotFoundError: If the rule doesn't exist
        """
        rule = self.db.get_recurring_rule(rule_id)
        if rule is None:
            raise NotFoundError(rule_not_found(rule_id))
        return rule

    def list_rules(self, active_only: bool = False) -> list[RecurringRuleEntity]:
        """List rules, newest first."""
        return self.db.list_recurring_rules(active_only=active_only)

    def deactivate_rule(self, rule_id: int) -> None:
        """Stop a rule from generating further transactions.

        Raises:
            NotFoundError: If the rule doesn't exist
        """
        self.require_rule(rule_id)
        self.db.deactivate_recurring_rule(rule_id)
        logger.info("recurring_rule_deactivated", rule_id=rule_id)

    def delete_rule(self, rule_id: int) -> None:
        """Delete a rule. Transactions it already generated are kept.

        Raises:
            NotFoundError: If the rule doesn't exist
        """
        self.require_rule(rule_id)
        self.db.delete_recurring_rule(rule_id)
        logger.info("recurring_rule_deleted", rule_id=rule_id)

    def list_instances(self, rule_id: int) -> list[TransactionEntity]:
        """List the transactions generated from a rule, newest first.

        Works for deleted rules too, since instances only hold the rule's ID.
        """
        return self.db.list_transactions(recurring_rule_id=rule_id, recurring_only=True)
