"""Input validation shared by transactions and recurring rules."""

from datetime import date
from decimal import Decimal
from typing import Optional

from ledgerly.database.base import Database
from ledgerly.domain.entities import FREQUENCIES, TRANSACTION_TYPES
from ledgerly.domain.errors import ValidationError, account_not_found


def validate_payload(
    amount: Decimal,
    type: str,
    account_id: int,
    dest_account_id: Optional[int],
    category: str,
) -> None:
    """Validate the money-movement fields of a transaction or rule.

    Raises:
        ValidationError: On the first invalid field
    """
    if amount is None or amount <= 0:
        raise ValidationError("amount must be greater than 0")
    if type not in TRANSACTION_TYPES:
        raise ValidationError("type must be 'income', 'expense', or 'transfer'")

    if type == "transfer":
        if dest_account_id is None:
            raise ValidationError("dest_account_id is required for transfers")
        if dest_account_id == account_id:
            raise ValidationError("dest_account_id must differ from account_id")
    else:
        if not category or not category.strip():
            raise ValidationError("category is required")
        if dest_account_id is not None:
            raise ValidationError("dest_account_id is only allowed for transfers")


def validate_schedule(
    frequency: str,
    start_date: Optional[date],
    end_date: Optional[date],
    day_of_month: Optional[int],
    day_of_week: Optional[int],
    month_of_year: Optional[int],
) -> None:
    """Validate the schedule fields of a recurring rule.

    Monthly and yearly rules use day_of_month (yearly also month_of_year);
    weekly and biweekly rules use day_of_week, counted from Sunday (0).
    Fields that do not belong to the frequency are rejected.

    Raises:
        ValidationError: On the first invalid field
    """
    if frequency not in FREQUENCIES:
        raise ValidationError("frequency must be 'weekly', 'biweekly', 'monthly', or 'yearly'")
    if start_date is None:
        raise ValidationError("start_date is required")
    if end_date is not None and end_date < start_date:
        raise ValidationError("end_date must not be before start_date")

    if frequency in ("monthly", "yearly"):
        if day_of_month is None:
            raise ValidationError("day_of_month is required for monthly/yearly frequency")
        if not 1 <= day_of_month <= 31:
            raise ValidationError("day_of_month must be between 1 and 31")
        if day_of_week is not None:
            raise ValidationError("day_of_week is only allowed for weekly/biweekly frequency")
    else:
        if day_of_week is None:
            raise ValidationError("day_of_week is required for weekly/biweekly frequency")
        if not 0 <= day_of_week <= 6:
            raise ValidationError("day_of_week must be between 0 and 6")
        if day_of_month is not None:
            raise ValidationError("day_of_month is only allowed for monthly/yearly frequency")

    if frequency == "yearly":
        if month_of_year is None:
            raise ValidationError("month_of_year is required for yearly frequency")
        if not 1 <= month_of_year <= 12:
            raise ValidationError("month_of_year must be between 1 and 12")
    elif month_of_year is not None:
        raise ValidationError("month_of_year is only allowed for yearly frequency")


def require_accounts(db: Database, account_id: int, dest_account_id: Optional[int]) -> None:
    """Check that the referenced accounts exist.

    Raises:
        ValidationError: If an account is missing
    """
    if not db.account_exists(account_id):
        raise ValidationError(account_not_found(account_id))
    if dest_account_id is not None and not db.account_exists(dest_account_id):
        raise ValidationError(account_not_found(dest_account_id))
