"""CLI error reporting."""

import click

from bankaccount.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Echo a rejected operation or unparseable input to stderr and exit with status 1.

    Nothing is written to stdout, so a failed replay never prints a partial statement.
    """
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
