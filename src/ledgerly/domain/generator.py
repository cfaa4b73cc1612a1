"""Recurring transaction generator.

Materializes ledger entries for every active recurring rule up to "today".
Each rule is handled as one unit by the database (inserts, watermark advance
and deactivation commit together), so calling ``generate`` again, whether
after success, after a failure or from a concurrent caller, never creates a
second transaction for the same rule and date.
"""

from datetime import date
from typing import Optional
import structlog

from ledgerly.database.base import Database
from ledgerly.domain.clock import Clock, SystemClock
from ledgerly.domain.entities import RecurringRule
from ledgerly.domain.errors import StaleRuleError
from ledgerly.domain.occurrences import pending_occurrences


logger = structlog.get_logger(__name__)


class RecurringGenerator:
    """Generate pending transactions from recurring rules."""

    def __init__(self, db: Database, clock: Optional[Clock] = None):
        """Initialize generator.

        Args:
            db: Database instance
            clock: Source of today's date (defaults to the system clock)
        """
        self.db = db
        self.clock = clock or SystemClock()
        self._logger = logger.bind(component="recurring_generator")

    def generate(self, today: Optional[date] = None) -> int:
        """Generate all pending occurrences up to and including ``today``.

        Args:
            today: Date to generate through; defaults to the clock's date

        Returns:
            Number of transactions created by this call

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If persistence fails. Rules handled
                before the failure stay committed; the failing rule is rolled
                back entirely.
        """
        if today is None:
            today = self.clock.today()

        rules = self.db.list_due_recurring_rules(today)
        self._logger.debug("generation_started", today=today.isoformat(), due_rules=len(rules))

        total = 0
        for rule in rules:
            try:
                total += self.generate_rule(rule, today)
            except StaleRuleError:
                # Another run advanced this rule first and generated its dates.
                self._logger.warning("recurring_rule_skipped_stale", rule_id=rule.id)
            except Exception:
                self._logger.exception("generation_aborted", rule_id=rule.id, generated=total)
                raise

        self._logger.info("generation_finished", today=today.isoformat(), generated=total)
        return total

    def generate_rule(self, rule: RecurringRule, today: date) -> int:
        """Generate pending occurrences for a single rule.

        Returns:
            Number of transactions created

        Raises:
            StaleRuleError: If the rule's watermark moved since it was read
        """
        dates = pending_occurrences(rule, today)
        deactivate = rule.end_date is not None and rule.end_date < today

        if not dates and not deactivate:
            return 0

        created = self.db.apply_recurring_generation(rule, dates, deactivate)
        self._logger.debug(
            "recurring_rule_generated",
            rule_id=rule.id,
            occurrences=len(dates),
            created=created,
            watermark=dates[-1].isoformat() if dates else None,
            deactivated=deactivate,
        )
        return created
