"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO dates: "2012-01-10"
    - Day-first dates: "10/01/2012", "10 January 2012"
    - Year-first dates: "2012/01/10", "2012.01.10"
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string
        today: Reference date for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # ISO first: dayfirst would swap month and day in "2012-01-10"
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    # A leading four-digit year means year, month, day ("2012/01/10")
    year_first = re.match(r"\d{4}\D", date_str) is not None

    try:
        dt = date_parser.parse(date_str, dayfirst=not year_first, yearfirst=year_first)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
