"""Tests for logging configuration and the clock."""

import logging
from datetime import date

import pytest

from ledgerly.domain.clock import FixedClock, SystemClock
from ledgerly.utils.log_config import configure_logging


def test_configure_logging_sets_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty")


def test_generator_events_are_logged(temp_db, generator, make_rule, caplog):
    """Test that a generation run reports its total."""
    make_rule()
    with caplog.at_level(logging.INFO):
        generator.generate()
    assert "generation_finished" in caplog.text


def test_fixed_clock():
    assert FixedClock(date(2024, 2, 29)).today() == date(2024, 2, 29)


def test_system_clock():
    assert SystemClock().today() == date.today()
