"""Amount parsing utilities."""

import re


def parse_amount(amount_str: str) -> int:
    """Parse an amount string into a whole-number integer.

    Handles various formats:
    - "1000"
    - "$1000"
    - "-500"
    - "1,000"

    Sign is preserved; rejecting non-positive amounts is the account's job.

    Args:
        amount_str: Amount string

    Returns:
        Integer amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency symbols
    cleaned = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas
    cleaned = cleaned.replace(",", "").strip()

    if not re.fullmatch(r"[+-]?\d+", cleaned):
        raise ValueError(f"Could not parse amount '{amount_str}': expected a whole number")
    return int(cleaned)
