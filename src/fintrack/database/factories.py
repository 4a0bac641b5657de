"""Store factory functions for creating ledger store instances."""

import os
from typing import Optional

from fintrack.database.sqlalchemy_db import SQLAlchemyLedgerStore

TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def create_memory_store(echo: Optional[bool] = None) -> SQLAlchemyLedgerStore:
    """Create an in-memory ledger store.

    Args:
        echo: Log SQL statements. If None, checks the FINTRACK_SQL_ECHO
            environment variable, then defaults to False

    Returns:
        SQLAlchemyLedgerStore with a private in-memory SQLite database
    """
    if echo is None:
        echo = os.environ.get("FINTRACK_SQL_ECHO", "").strip().lower() in TRUE_VALUES

    return SQLAlchemyLedgerStore(echo=echo)
