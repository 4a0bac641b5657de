"""CLI error handling helpers."""

import click

from fintrack.domain.errors import DomainError


def report_error(error: DomainError | ValueError) -> None:
    """Render a domain error without leaving the session."""
    click.echo(f"Error: {error}", err=True)
