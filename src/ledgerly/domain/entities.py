"""Domain model entities for ledgerly.

These are pure data classes representing business concepts, independent of
database schema. The ORM layer converts to and from them in
``ledgerly.database.mappers``.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from typing import Optional


TRANSACTION_TYPES = ("income", "expense", "transfer")
FREQUENCIES = ("weekly", "biweekly", "monthly", "yearly")
ACCOUNT_TYPES = ("checking", "savings", "cash", "investment")

# Account created by schema initialization; used when no account is given.
DEFAULT_ACCOUNT_ID = 1


@dataclass(frozen=True)
class Account:
    """Account domain entity."""

    id: int
    name: str
    type: str
    currency: str
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Ledger transaction domain entity.

    Amounts are always positive; the direction comes from ``type``.
    Rows produced by the recurring generator carry ``is_recurring_instance``
    and a ``recurring_rule_id`` back-reference, which is a lookup key only.
    """

    id: int
    amount: Decimal
    type: str
    account_id: int
    dest_account_id: Optional[int]
    category: str
    description: str
    date: date
    is_recurring_instance: bool
    recurring_rule_id: Optional[int]
    created_at: datetime


@dataclass(frozen=True)
class RecurringRule:
    """Recurring transaction rule domain entity.

    ``last_generated`` is the watermark: the latest occurrence date already
    materialized for this rule, or None if the rule never produced anything.
    ``day_of_week`` counts from Sunday (0) to Saturday (6).
    """

    id: int
    amount: Decimal
    type: str
    account_id: int
    dest_account_id: Optional[int]
    category: str
    description: str
    frequency: str
    day_of_month: Optional[int]
    day_of_week: Optional[int]
    month_of_year: Optional[int]
    start_date: date
    end_date: Optional[date]
    last_generated: Optional[date]
    is_active: bool
    created_at: datetime
