"""Statement formatting."""

from typing import Sequence

from bankaccount.domain.entities import Transaction

STATEMENT_HEADER = "Date       || Amount || Balance"
SEPARATOR = " || "


def format_transaction(transaction: Transaction) -> str:
    """Format one transaction as a statement line."""
    return SEPARATOR.join(
        [
            transaction.formatted_date,
            str(transaction.amount),
            str(transaction.resulting_balance),
        ]
    )


def render_statement(transactions: Sequence[Transaction]) -> list[str]:
    """Render a statement, most recent transaction first.

    Order follows the sequence as given (reversed), not the transaction dates.

    Args:
        transactions: Transactions in the order they were recorded

    Returns:
        Header line followed by one line per transaction
    """
    lines = [STATEMENT_HEADER]
    lines.extend(format_transaction(txn) for txn in reversed(transactions))
    return lines
