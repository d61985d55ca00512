"""Account errors and the messages they carry."""


class DomainError(ValueError):
    """Base class for rejected account operations.

    Derives from ValueError so a caller catching ValueError also sees
    rejected deposits and withdrawals.
    """


class InvalidAmountError(DomainError):
    """Deposit or withdrawal amount is not a positive whole number."""

    def __init__(self, amount: object):
        self.amount = amount
        super().__init__(invalid_amount(amount))


class InsufficientFundsError(DomainError):
    """Withdrawal exceeds the available balance."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(insufficient_funds(requested, available))


def invalid_amount(amount: object) -> str:
    """Return message for a rejected amount."""
    if not isinstance(amount, int) or isinstance(amount, bool):
        return f"Amount must be a whole number. Received: {amount!r}"
    return f"Amount must be positive. Received: {amount}"


def insufficient_funds(requested: int, available: int) -> str:
    """Return message when a withdrawal exceeds the balance."""
    return f"Insufficient funds. Requested: {requested}, Available: {available}"
