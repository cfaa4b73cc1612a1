"""Tests for domain entities."""

import pytest
from dataclasses import FrozenInstanceError, replace
from datetime import datetime, date, UTC
from decimal import Decimal

from ledgerly.domain.entities import Account, RecurringRule, Transaction


class TestAccount:
    """Tests for Account entity."""

    def test_create_account(self):
        """Test creating an Account entity."""
        account = Account(id=1, name="Main Account", type="checking", currency="EUR", created_at=datetime.now(UTC))
        assert account.id == 1
        assert account.name == "Main Account"
        assert account.currency == "EUR"

    def test_account_immutability(self):
        """Test that Account entities are immutable."""
        account = Account(id=1, name="Main Account", type="checking", currency="EUR", created_at=datetime.now(UTC))
        with pytest.raises(FrozenInstanceError):
            account.name = "New Name"

    def test_account_equality(self):
        """Test Account entity equality."""
        created_at = datetime.now(UTC)
        account1 = Account(id=1, name="Test", type="cash", currency="EUR", created_at=created_at)
        account2 = Account(id=1, name="Test", type="cash", currency="EUR", created_at=created_at)
        account3 = Account(id=2, name="Test", type="cash", currency="EUR", created_at=created_at)

        assert account1 == account2
        assert account1 != account3


class TestTransaction:
    """Tests for Transaction entity."""

    def test_create_generated_transaction(self):
        """Test creating a Transaction produced by a rule."""
        txn = Transaction(
            id=1,
            amount=Decimal("9.99"),
            type="expense",
            account_id=1,
            dest_account_id=None,
            category="subscriptions",
            description="Streaming",
            date=date(2024, 6, 15),
            is_recurring_instance=True,
            recurring_rule_id=3,
            created_at=datetime.now(UTC),
        )
        assert txn.is_recurring_instance is True
        assert txn.recurring_rule_id == 3

    def test_transaction_immutability(self):
        txn = Transaction(
            id=1,
            amount=Decimal("9.99"),
            type="expense",
            account_id=1,
            dest_account_id=None,
            category="subscriptions",
            description="",
            date=date(2024, 6, 15),
            is_recurring_instance=False,
            recurring_rule_id=None,
            created_at=None,
        )
        with pytest.raises(FrozenInstanceError):
            txn.recurring_rule_id = 5


class TestRecurringRule:
    """Tests for RecurringRule entity."""

    def test_replace_returns_new_rule(self):
        """Test that a rule is copied, not mutated, when advancing its watermark."""
        rule = RecurringRule(
            id=1,
            amount=Decimal("9.99"),
            type="expense",
            account_id=1,
            dest_account_id=None,
            category="subscriptions",
            description="",
            frequency="monthly",
            day_of_month=15,
            day_of_week=None,
            month_of_year=None,
            start_date=date(2024, 1, 1),
            end_date=None,
            last_generated=None,
            is_active=True,
            created_at=datetime.now(UTC),
        )
        advanced = replace(rule, last_generated=date(2024, 1, 15))

        assert rule.last_generated is None
        assert advanced.last_generated == date(2024, 1, 15)
        assert advanced.id == rule.id
