"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from decimal import Decimal

from ledgerly.domain import entities as domain
from ledgerly.database.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
    RecurringRule as ORMRecurringRule,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        type=orm_account.type,
        currency=orm_account.currency,
        created_at=orm_account.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        amount=Decimal(orm_transaction.amount),
        type=orm_transaction.type,
        account_id=orm_transaction.account_id,
        dest_account_id=orm_transaction.dest_account_id,
        category=orm_transaction.category or "",
        description=orm_transaction.description or "",
        date=orm_transaction.date,
        is_recurring_instance=bool(orm_transaction.is_recurring_instance),
        recurring_rule_id=orm_transaction.recurring_rule_id,
        created_at=orm_transaction.created_at,
    )


def recurring_rule_to_domain(orm_rule: ORMRecurringRule) -> domain.RecurringRule:
    """Convert SQLAlchemy RecurringRule model to domain RecurringRule entity."""
    return domain.RecurringRule(
        id=orm_rule.id,
        amount=Decimal(orm_rule.amount),
        type=orm_rule.type,
        account_id=orm_rule.account_id,
        dest_account_id=orm_rule.dest_account_id,
        category=orm_rule.category or "",
        description=orm_rule.description or "",
        frequency=orm_rule.frequency,
        day_of_month=orm_rule.day_of_month,
        day_of_week=orm_rule.day_of_week,
        month_of_year=orm_rule.month_of_year,
        start_date=orm_rule.start_date,
        end_date=orm_rule.end_date,
        last_generated=orm_rule.last_generated,
        is_active=bool(orm_rule.is_active),
        created_at=orm_rule.created_at,
    )
