"""Tests for operation parser."""

import pytest
from datetime import date

from bankaccount.utils.operation_parser import Operation, parse_operation


def test_parse_deposit_with_date():
    """Test parsing a dated deposit."""
    assert parse_operation("deposit 1000 2012-01-10") == Operation(
        kind="deposit", amount=1000, date=date(2012, 1, 10)
    )


def test_parse_withdraw_with_day_first_date():
    """Test parsing a withdrawal with a DD/MM/YYYY date."""
    operation = parse_operation("withdraw 500 14/01/2012")
    assert operation.kind == "withdraw"
    assert operation.amount == 500
    assert operation.date == date(2012, 1, 14)


def test_parse_without_date():
    """Test the date is None when omitted."""
    assert parse_operation("Deposit 250").date is None


def test_parse_date_with_spaces():
    """Test dates that contain spaces."""
    assert parse_operation("deposit 10 10 January 2012").date == date(2012, 1, 10)


def test_parse_relative_date():
    """Test relative dates use the reference date."""
    operation = parse_operation("deposit 10 yesterday", today=date(2024, 1, 1))
    assert operation.date == date(2023, 12, 31)


def test_parse_keeps_negative_amount():
    """Test sign is preserved so the account can reject it."""
    assert parse_operation("deposit -5").amount == -5


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Invalid operation"),
        ("deposit", "Invalid operation"),
        ("transfer 100", "Unknown operation"),
        ("deposit ten", "Could not parse amount"),
        ("withdraw 10 someday", "Could not parse date"),
    ],
)
def test_parse_invalid_operation(text, message):
    """Test malformed operations raise ValueError."""
    with pytest.raises(ValueError, match=message):
        parse_operation(text)
