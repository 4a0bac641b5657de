"""Logging configuration for the fintrack command line."""

import click
from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


def _stderr_sink(message) -> None:
    # Resolve stderr on every write so a swapped stream (tests, pagers) is honored
    click.echo(message, err=True, nl=False)


def configure_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a stderr sink at ``level``.

    Library modules only emit records; the command line decides where they go.
    """
    logger.remove()
    logger.add(_stderr_sink, level=level.upper(), format=LOG_FORMAT, colorize=False)
