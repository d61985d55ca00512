"""Demonstration scenario command."""

from datetime import date

import click

from bankaccount.domain.account import Account

DEMO_TITLE = "=== Banking Service ==="


@click.command("demo")
def run_demo():
    """Run the reference scenario and print its statement.

    Deposits 1000 on 10/01/2012 and 2000 on 13/01/2012, then withdraws 500
    on 14/01/2012.
    """
    click.echo(DEMO_TITLE)
    click.echo()

    account = Account(printer=click.echo)
    account.deposit(1000, date(2012, 1, 10))
    account.deposit(2000, date(2012, 1, 13))
    account.withdraw(500, date(2012, 1, 14))

    account.print_statement()


def register_commands(cli):
    """Register demo command with main CLI."""
    cli.add_command(run_demo)
