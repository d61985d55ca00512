"""Parsing of account operations given on the command line."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from bankaccount.utils.amount_parser import parse_amount
from bankaccount.utils.date_parser import parse_date

OPERATION_KINDS = ("deposit", "withdraw")


@dataclass(frozen=True)
class Operation:
    """A deposit or withdrawal to replay on an account."""

    kind: str
    amount: int
    date: Optional[date]


def parse_operation(text: str, today: Optional[date] = None) -> Operation:
    """Parse an operation string.

    Format is "<deposit|withdraw> <amount> [<date>]", e.g. "deposit 1000 2012-01-10".
    The date may contain spaces ("10 January 2012").

    Args:
        text: Operation string
        today: Reference date for relative dates

    Returns:
        Parsed operation (date is None when omitted)

    Raises:
        ValueError: If the operation cannot be parsed
    """
    parts = text.split(maxsplit=2)
    if len(parts) < 2:
        raise ValueError(
            f"Invalid operation '{text}': expected '<deposit|withdraw> <amount> [<date>]'"
        )

    kind = parts[0].lower()
    if kind not in OPERATION_KINDS:
        raise ValueError(
            f"Unknown operation '{parts[0]}'. Supported operations: {', '.join(OPERATION_KINDS)}"
        )

    amount = parse_amount(parts[1])
    txn_date = parse_date(parts[2], today=today) if len(parts) == 3 else None
    return Operation(kind=kind, amount=amount, date=txn_date)
