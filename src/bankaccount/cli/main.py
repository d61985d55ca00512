"""Main CLI entry point."""

from datetime import date

import click

from bankaccount.cli.commands import demo, statement
from bankaccount.logging_config import (
    LOG_LEVELS,
    get_logger,
    setup_logging,
    teardown_logging,
)
from bankaccount.utils.date_parser import parse_date


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log level (overrides BANKACCOUNT_LOG_LEVEL environment variable)",
    envvar="BANKACCOUNT_LOG_LEVEL",
)
@click.option(
    "--today",
    help="Date used for operations given without one "
    "(overrides BANKACCOUNT_TODAY environment variable)",
    envvar="BANKACCOUNT_TODAY",
)
@click.pass_context
def cli(ctx, log_level: str, today: str | None):
    """bankaccount - Deposits, withdrawals and account statements."""
    ctx.ensure_object(dict)

    previous_level = get_logger().level
    handler = setup_logging(log_level)
    ctx.call_on_close(lambda: teardown_logging(handler, previous_level))

    clock = date.today
    if today:
        try:
            fixed = parse_date(today)
        except ValueError as e:
            click.echo(f"Error: Invalid --today date: {e}", err=True)
            ctx.exit(1)

        def clock() -> date:
            return fixed

    ctx.obj["clock"] = clock


# Register all commands
demo.register_commands(cli)
statement.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
