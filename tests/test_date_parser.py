"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta
from ledgerly.utils.date_parser import parse_date, parse_optional_date


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    result = parse_date("today")
    assert result == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    result = parse_date("yesterday")
    assert result == date.today() - timedelta(days=1)


def test_parse_tomorrow():
    """Test parsing 'tomorrow'."""
    result = parse_date("tomorrow")
    assert result == date.today() + timedelta(days=1)


def test_parse_relative_with_reference_date():
    """Test relative words against an explicit reference date."""
    reference = date(2024, 3, 1)
    assert parse_date("yesterday", today=reference) == date(2024, 2, 29)
    assert parse_date(" Today ", today=reference) == reference


def test_parse_standard_formats():
    """Test parsing various standard date formats."""
    # These should all work via dateutil parser
    assert parse_date("January 15, 2024") == date(2024, 1, 15)
    assert parse_date("15/01/2024") == date(2024, 1, 15)


def test_parse_invalid():
    """Test parsing an unparseable date."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_parse_optional_date():
    """Test that missing values pass through as None."""
    assert parse_optional_date(None) is None
    assert parse_optional_date("  ") is None
    assert parse_optional_date("2024-02-29") == date(2024, 2, 29)
