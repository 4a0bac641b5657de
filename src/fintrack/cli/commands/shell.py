"""Interactive ledger shell."""

import click

from fintrack.cli import forms, views
from fintrack.cli.error_handling import report_error
from fintrack.domain.errors import ValidationError
from fintrack.session import FinanceSession
from fintrack.utils.ids import RecordIdGenerator

ACTIONS = {
    "add": "Add a transaction",
    "recurring": "Add a recurring transaction",
    "asset": "Add an asset",
    "liability": "Add a liability",
    "summary": "Show income and expense summary",
    "monthly": "Show monthly recurring totals",
    "networth": "Show net worth",
    "list": "List transactions",
    "help": "Show this menu",
    "quit": "Leave the shell (the ledger is discarded)",
}


def _show_menu() -> None:
    click.echo("\nActions:")
    for name, text in ACTIONS.items():
        click.echo(f"  {name:<10} {text}")


def _run_action(action: str, session: FinanceSession, new_id: RecordIdGenerator) -> None:
    if action == "add":
        session.add_transaction(forms.prompt_transaction(new_id))
        click.echo("Transaction added")
    elif action == "recurring":
        session.add_recurring_transaction(forms.prompt_recurring_transaction(new_id))
        click.echo("Recurring transaction added")
    elif action == "asset":
        session.add_asset(forms.prompt_asset(new_id))
        click.echo("Asset added")
    elif action == "liability":
        session.add_liability(forms.prompt_liability(new_id))
        click.echo("Liability added")
    elif action == "summary":
        views.render_summary(session.get_summary())
    elif action == "monthly":
        views.render_recurring(
            session.get_recurring_summary(), session.list_recurring_transactions()
        )
    elif action == "networth":
        views.render_net_worth(
            session.get_net_worth(), session.list_assets(), session.list_liabilities()
        )
    elif action == "list":
        views.render_transactions(session.list_transactions())
    elif action == "help":
        _show_menu()


@click.command("shell")
@click.pass_context
def shell(ctx):
    """Start an interactive ledger session.

    Everything recorded lives in memory and is gone when the shell exits.

    Examples:
        fintrack shell
        fintrack --log-level DEBUG shell
    """
    session: FinanceSession = ctx.obj["session"]
    new_id = RecordIdGenerator()

    click.echo("Financial Tracker")
    _show_menu()

    while True:
        try:
            action = click.prompt(
                "\nAction", type=click.Choice(list(ACTIONS)), show_choices=False
            )
        except click.Abort:
            # End of input behaves like quit
            click.echo()
            break

        if action == "quit":
            break

        try:
            _run_action(action, session, new_id)
        except ValidationError as e:
            report_error(e)
        except click.Abort:
            click.echo("\nCancelled")

    click.echo("Goodbye")


def register_commands(cli):
    """Register shell command with main CLI."""
    cli.add_command(shell)
