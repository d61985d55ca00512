"""Shared pytest fixtures for bankaccount tests."""

from datetime import date

import pytest

from bankaccount.domain.account import Account

FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture
def today():
    """Return the date the account clock reports."""
    return FIXED_TODAY


@pytest.fixture
def lines():
    """Collect lines written to an account's statement sink."""
    return []


@pytest.fixture
def account(lines):
    """Create an empty account writing to the lines fixture with a fixed clock."""
    return Account(printer=lines.append, clock=lambda: FIXED_TODAY)


@pytest.fixture
def funded_account(account):
    """Create an account holding a single deposit of 500."""
    account.deposit(500, date(2012, 1, 9))
    return account


@pytest.fixture
def scenario_account(account):
    """Create an account with the reference deposit/deposit/withdraw scenario applied."""
    account.deposit(1000, date(2012, 1, 10))
    account.deposit(2000, date(2012, 1, 13))
    account.withdraw(500, date(2012, 1, 14))
    return account


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
