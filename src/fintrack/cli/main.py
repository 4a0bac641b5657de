"""Main CLI entry point."""

import click

from fintrack.database.factories import create_memory_store
from fintrack.session import FinanceSession
from fintrack.utils.log_setup import configure_logging

# Import and register all commands at module level
from fintrack.cli.commands import shell

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FINTRACK_LOG_LEVEL",
    help="Log level (overrides FINTRACK_LOG_LEVEL environment variable)",
)
@click.option(
    "--sql-echo",
    is_flag=True,
    envvar="FINTRACK_SQL_ECHO",
    help="Echo SQL statements of the in-memory ledger store",
)
@click.pass_context
def cli(ctx, log_level: str, sql_echo: bool):
    """Fintrack - Personal finance tracker.

    Log transactions, recurring transactions, assets and liabilities, and see
    category totals, monthly recurring projections and net worth. Nothing is
    saved: the ledger lives for one session.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Open the session only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        session = FinanceSession(create_memory_store(echo=sql_echo))
        ctx.obj["session"] = session
        ctx.call_on_close(session.close)


# Register all commands
shell.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
