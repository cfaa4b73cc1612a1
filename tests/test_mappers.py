"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from ledgerly.database.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
    RecurringRule as ORMRecurringRule,
)
from ledgerly.database.mappers import (
    account_to_domain,
    transaction_to_domain,
    recurring_rule_to_domain,
)
from ledgerly.domain.entities import Account, RecurringRule, Transaction


class TestAccountMapper:
    """Tests for Account mapper."""

    def test_account_to_domain(self):
        """Test converting ORM Account to domain Account."""
        orm_account = ORMAccount(
            id=1, name="Main Account", type="checking", currency="EUR", created_at=datetime.now(UTC)
        )

        account = account_to_domain(orm_account)

        assert isinstance(account, Account)
        assert account.name == "Main Account"
        assert account.type == "checking"


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        """Test converting ORM Transaction to domain Transaction."""
        orm_txn = ORMTransaction(
            id=7,
            amount=Decimal("9.99"),
            type="expense",
            account_id=1,
            dest_account_id=None,
            category=None,
            description=None,
            date=date(2024, 6, 15),
            is_recurring_instance=True,
            recurring_rule_id=2,
            created_at=datetime.now(UTC),
        )

        txn = transaction_to_domain(orm_txn)

        assert isinstance(txn, Transaction)
        assert txn.category == ""
        assert txn.description == ""
        assert txn.is_recurring_instance is True
        assert txn.recurring_rule_id == 2


class TestRecurringRuleMapper:
    """Tests for RecurringRule mapper."""

    def test_recurring_rule_to_domain(self):
        """Test converting ORM RecurringRule to domain RecurringRule."""
        orm_rule = ORMRecurringRule(
            id=3,
            amount=Decimal("500.00"),
            type="transfer",
            account_id=1,
            dest_account_id=2,
            category="",
            description="Savings",
            frequency="yearly",
            day_of_month=31,
            day_of_week=None,
            month_of_year=3,
            start_date=date(2024, 1, 1),
            end_date=None,
            last_generated=date(2024, 3, 31),
            is_active=True,
            created_at=datetime.now(UTC),
        )

        rule = recurring_rule_to_domain(orm_rule)

        assert isinstance(rule, RecurringRule)
        assert rule.amount == Decimal("500.00")
        assert rule.dest_account_id == 2
        assert rule.month_of_year == 3
        assert rule.last_generated == date(2024, 3, 31)
        assert rule.is_active is True
