"""Occurrence calculation for recurring rules.

Everything in this module is a pure function of its arguments: no database
access and no implicit clock, so the same inputs always produce the same
ordered list of dates.
"""

import calendar
from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from ledgerly.domain.entities import RecurringRule


WEEKLY_STEP_DAYS = {"weekly": 7, "biweekly": 14}


def clamp_day(year: int, month: int, day: int) -> date:
    """Return ``day`` in the given month, clamped to the month's last day.

    Examples:
        clamp_day(2024, 2, 31) -> 2024-02-29
        clamp_day(2023, 4, 31) -> 2023-04-30
    """
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def sunday_based_weekday(value: date) -> int:
    """Return the weekday of ``value`` counting Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7


def search_start(rule: RecurringRule, after: Optional[date]) -> date:
    """Return the first date eligible for an occurrence.

    Args:
        rule: Recurring rule
        after: Exclusive lower bound (normally the rule's watermark), or None

    Returns:
        ``rule.start_date`` when ``after`` is None, otherwise the later of
        ``rule.start_date`` and the day after ``after``
    """
    if after is None:
        return rule.start_date
    return max(rule.start_date, after + timedelta(days=1))


def occurrences(rule: RecurringRule, after: Optional[date], through: date) -> list[date]:
    """Compute the dates on which a rule fires.

    Args:
        rule: Recurring rule
        after: Exclusive lower bound, or None to start at ``rule.start_date``
        through: Inclusive upper bound (further limited by ``rule.end_date``)

    Returns:
        Ascending list of occurrence dates in ``(after, min(through, end_date)]``
    """
    start = search_start(rule, after)
    upper = through if rule.end_date is None else min(through, rule.end_date)
    if start > upper:
        return []

    if rule.frequency == "monthly":
        return _monthly(rule, start, upper)
    if rule.frequency == "yearly":
        return _yearly(rule, start, upper)
    if rule.frequency in WEEKLY_STEP_DAYS:
        return _weekly(rule, start, upper, WEEKLY_STEP_DAYS[rule.frequency])
    raise ValueError(f"Unknown frequency '{rule.frequency}'")


def pending_occurrences(rule: RecurringRule, today: date) -> list[date]:
    """Return the occurrences not yet reflected in the rule's watermark."""
    return occurrences(rule, rule.last_generated, today)


def _monthly(rule: RecurringRule, start: date, upper: date) -> list[date]:
    dates = []
    month = start.replace(day=1)
    while month <= upper:
        candidate = clamp_day(month.year, month.month, rule.day_of_month)
        if start <= candidate <= upper:
            dates.append(candidate)
        month += relativedelta(months=1)
    return dates


def _yearly(rule: RecurringRule, start: date, upper: date) -> list[date]:
    dates = []
    for year in range(start.year, upper.year + 1):
        candidate = clamp_day(year, rule.month_of_year, rule.day_of_month)
        if start <= candidate <= upper:
            dates.append(candidate)
    return dates


def _weekly(rule: RecurringRule, start: date, upper: date, step_days: int) -> list[date]:
    # The cadence is anchored on the rule's first matching weekday, so a later
    # search start never shifts the biweekly phase.
    offset = (rule.day_of_week - sunday_based_weekday(rule.start_date)) % 7
    anchor = rule.start_date + timedelta(days=offset)

    current = anchor
    if start > anchor:
        steps = -(-(start - anchor).days // step_days)
        current = anchor + timedelta(days=steps * step_days)

    dates = []
    while current <= upper:
        dates.append(current)
        current += timedelta(days=step_days)
    return dates
