"""Domain layer for bankaccount."""

from bankaccount.domain.account import Account
from bankaccount.domain.entities import Transaction
from bankaccount.domain.errors import (
    DomainError,
    InsufficientFundsError,
    InvalidAmountError,
)

__all__ = [
    "Account",
    "Transaction",
    "DomainError",
    "InvalidAmountError",
    "InsufficientFundsError",
]
