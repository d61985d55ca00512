"""Statement command."""

import click

from bankaccount.cli.error_handling import handle_domain_error
from bankaccount.domain.account import Account
from bankaccount.domain.errors import DomainError
from bankaccount.utils.operation_parser import parse_operation


@click.command("statement")
@click.option(
    "--op",
    "-o",
    "operations",
    multiple=True,
    help="Operation '<deposit|withdraw> <amount> [<date>]' (repeatable, applied in order)",
)
@click.option("--balance", is_flag=True, help="Print the final balance after the statement")
@click.pass_context
def print_statement(ctx, operations: tuple[str, ...], balance: bool):
    """Replay operations on a new account and print its statement.

    Examples:
        bankaccount statement -o "deposit 1000 2012-01-10" -o "withdraw 500 14/01/2012"
        bankaccount --today 2024-05-01 statement -o "deposit 250"
    """
    clock = ctx.obj["clock"]
    account = Account(printer=click.echo, clock=clock)

    # Parse everything before touching the account
    try:
        parsed = [parse_operation(text, today=clock()) for text in operations]
    except ValueError as e:
        handle_domain_error(ctx, e)

    for operation in parsed:
        apply = account.deposit if operation.kind == "deposit" else account.withdraw
        try:
            apply(operation.amount, operation.date)
        except DomainError as e:
            handle_domain_error(ctx, e)

    account.print_statement()
    if balance:
        click.echo(f"Balance: {account.get_balance()}")


def register_commands(cli):
    """Register statement command with main CLI."""
    cli.add_command(print_statement)
