"""Utility functions for bankaccount."""

from bankaccount.utils.date_parser import parse_date
from bankaccount.utils.amount_parser import parse_amount
from bankaccount.utils.operation_parser import Operation, parse_operation

__all__ = ["parse_date", "parse_amount", "Operation", "parse_operation"]
