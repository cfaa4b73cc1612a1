"""Shared pytest fixtures for ledgerly tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from ledgerly.database.factories import create_sqlite_database
from ledgerly.domain.account import AccountService
from ledgerly.domain.clock import FixedClock
from ledgerly.domain.generator import RecurringGenerator
from ledgerly.domain.recurring import RecurringRuleService
from ledgerly.domain.transaction import TransactionService
from ledgerly.utils.log_config import configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Point logging at the current stderr so CLI runs don't leave a closed stream behind."""
    configure_logging("WARNING")


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def rule_service(temp_db):
    """Create a RecurringRuleService with a temporary database."""
    return RecurringRuleService(temp_db)


@pytest.fixture
def today():
    """Fixed 'today' used by generator tests."""
    return date(2024, 6, 20)


@pytest.fixture
def generator(temp_db, today):
    """Create a RecurringGenerator whose clock is pinned to ``today``."""
    return RecurringGenerator(temp_db, clock=FixedClock(today))


@pytest.fixture
def savings_account(account_service):
    """Create a savings account next to the default main account."""
    account_id = account_service.create_account(name="Savings", account_type="savings")
    return account_service.get_account(account_id)


@pytest.fixture
def make_rule(rule_service):
    """Factory creating a monthly expense rule with overridable fields."""

    def _make_rule(**overrides):
        fields = {
            "amount": Decimal("9.99"),
            "type": "expense",
            "frequency": "monthly",
            "start_date": date(2024, 1, 1),
            "category": "subscriptions",
            "description": "Streaming",
            "day_of_month": 15,
        }
        fields.update(overrides)
        return rule_service.create_rule(**fields)

    return _make_rule


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
