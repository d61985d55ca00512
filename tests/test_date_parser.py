"""Tests for date parser."""

import pytest
from datetime import date, timedelta
from bankaccount.utils.date_parser import parse_date


def test_parse_iso_date():
    """Test parsing ISO dates."""
    assert parse_date("2012-01-10") == date(2012, 1, 10)


def test_parse_day_first_date():
    """Test DD/MM/YYYY is read day first."""
    assert parse_date("10/01/2012") == date(2012, 1, 10)
    assert parse_date("14/01/2012") == date(2012, 1, 14)


def test_parse_written_date():
    """Test parsing dates with month names."""
    assert parse_date("10 January 2012") == date(2012, 1, 10)


def test_parse_strips_whitespace():
    """Test surrounding whitespace is ignored."""
    assert parse_date("  2012-01-10 ") == date(2012, 1, 10)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()


def test_parse_relative_against_reference():
    """Test relative dates use the given reference date."""
    reference = date(2024, 3, 1)
    assert parse_date("today", today=reference) == reference
    assert parse_date("Yesterday", today=reference) == date(2024, 2, 29)
    assert parse_date("tomorrow", today=reference) == reference + timedelta(days=1)


def test_parse_invalid_date():
    """Test invalid date strings raise ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_parse_year_first_with_slashes():
    """Test a leading four-digit year is read as year, month, day."""
    assert parse_date("2012/01/10") == date(2012, 1, 10)
    assert parse_date("2012.01.14") == date(2012, 1, 14)


def test_parse_year_first_invalid_month():
    """Test a year-first date with an impossible month is rejected."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("2012/14/01")
