"""Domain model entities for bankaccount.

These are pure data classes. A transaction is recorded once by the account
that owns it and is never edited afterwards.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Transaction:
    """A single balance-changing event on an account."""

    date: date
    amount: int
    resulting_balance: int

    @property
    def formatted_date(self) -> str:
        """Return the date as DD/MM/YYYY."""
        return f"{self.date.day:02d}/{self.date.month:02d}/{self.date.year:04d}"
