"""Account domain model."""

import logging
from datetime import date
from typing import Callable, Optional

from bankaccount.domain.entities import Transaction
from bankaccount.domain.errors import InsufficientFundsError, InvalidAmountError
from bankaccount.domain.statement import render_statement

logger = logging.getLogger(__name__)

LineSink = Callable[[str], object]
Clock = Callable[[], date]


class Account:
    """A single bank account with a running balance and a transaction log."""

    def __init__(self, printer: Optional[LineSink] = None, clock: Optional[Clock] = None):
        """Initialize an empty account.

        Args:
            printer: Line sink used by print_statement (defaults to print)
            clock: Returns today's date for operations given without one
                (defaults to date.today)
        """
        self._balance = 0
        self._transactions: list[Transaction] = []
        self._printer = printer if printer is not None else print
        self._clock = clock if clock is not None else date.today

    def deposit(self, amount: int, txn_date: Optional[date] = None) -> None:
        """Deposit money into the account.

        Args:
            amount: Amount to deposit, must be positive
            txn_date: Transaction date (defaults to today)

        Raises:
            InvalidAmountError: If amount is not a positive whole number
        """
        self._validate_amount(amount)
        txn_date = txn_date if txn_date is not None else self._clock()

        self._balance += amount
        self._transactions.append(Transaction(txn_date, amount, self._balance))
        logger.debug("Deposited %d on %s, balance %d", amount, txn_date, self._balance)

    def withdraw(self, amount: int, txn_date: Optional[date] = None) -> None:
        """Withdraw money from the account.

        Args:
            amount: Amount to withdraw, must be positive and not exceed the balance
            txn_date: Transaction date (defaults to today)

        Raises:
            InvalidAmountError: If amount is not a positive whole number
            InsufficientFundsError: If amount exceeds the current balance
        """
        self._validate_amount(amount)
        if amount > self._balance:
            logger.info("Rejected withdrawal of %d, balance %d", amount, self._balance)
            raise InsufficientFundsError(amount, self._balance)
        txn_date = txn_date if txn_date is not None else self._clock()

        self._balance -= amount
        self._transactions.append(Transaction(txn_date, -amount, self._balance))
        logger.debug("Withdrew %d on %s, balance %d", amount, txn_date, self._balance)

    def statement_lines(self) -> list[str]:
        """Return the statement lines, header first and newest transaction next."""
        return render_statement(self._transactions)

    def print_statement(self, printer: Optional[LineSink] = None) -> None:
        """Write the statement to a line sink.

        Args:
            printer: Sink for this call only (defaults to the account's sink)
        """
        write = printer if printer is not None else self._printer
        for line in self.statement_lines():
            write(line)

    def get_balance(self) -> int:
        return self._balance

    def get_transactions(self) -> list[Transaction]:
        """Return a copy of the transaction log in recording order."""
        return list(self._transactions)

    def _validate_amount(self, amount: int) -> None:
        if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
            logger.info("Rejected amount %r", amount)
            raise InvalidAmountError(amount)
