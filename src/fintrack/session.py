"""Finance session: the explicit context object for one ledger.

A session owns one ledger store for its whole lifetime. Nothing is shared
between sessions and closing a session discards everything recorded in it.
"""

from typing import Optional

from loguru import logger

from fintrack.database.base import LedgerStore
from fintrack.database.factories import create_memory_store
from fintrack.domain.entities import (
    Asset,
    Liability,
    NetWorthReport,
    RecurringSummary,
    RecurringTransaction,
    Summary,
    Transaction,
)
from fintrack.domain.ledger import LedgerService
from fintrack.domain.summary import SummaryService


class FinanceSession:
    """Ledger plus derived views for a single session."""

    def __init__(self, store: Optional[LedgerStore] = None):
        """Open a session.

        Args:
            store: Ledger store to use. If None, a fresh in-memory store is
                created, connected and initialized
        """
        if store is None:
            store = create_memory_store()
        store.connect()
        store.initialize_schema()

        self.store = store
        self.ledger = LedgerService(store)
        self.summaries = SummaryService(store)
        self.closed = False
        logger.debug("Opened finance session")

    def close(self) -> None:
        """Close the session and discard its ledger."""
        if self.closed:
            return
        self.store.disconnect()
        self.closed = True
        logger.debug("Closed finance session")

    def __enter__(self) -> "FinanceSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def add_transaction(self, transaction: Transaction) -> None:
        """Record a one-off transaction. Raises ValidationError."""
        self.ledger.add_transaction(transaction)

    def add_recurring_transaction(self, recurring: RecurringTransaction) -> None:
        """Record a recurring transaction. Raises ValidationError."""
        self.ledger.add_recurring_transaction(recurring)

    def add_asset(self, asset: Asset) -> None:
        """Record an asset. Raises ValidationError."""
        self.ledger.add_asset(asset)

    def add_liability(self, liability: Liability) -> None:
        """Record a liability. Raises ValidationError."""
        self.ledger.add_liability(liability)

    def get_summary(self) -> Summary:
        return self.summaries.get_summary()

    def get_recurring_summary(self) -> RecurringSummary:
        return self.summaries.get_recurring_summary()

    def get_net_worth(self) -> NetWorthReport:
        return self.summaries.get_net_worth()

    def list_transactions(self) -> tuple[Transaction, ...]:
        return self.ledger.list_transactions()

    def list_recurring_transactions(self) -> tuple[RecurringTransaction, ...]:
        return self.ledger.list_recurring_transactions()

    def list_assets(self) -> tuple[Asset, ...]:
        return self.ledger.list_assets()

    def list_liabilities(self) -> tuple[Liability, ...]:
        return self.ledger.list_liabilities()


def open_session(store: Optional[LedgerStore] = None) -> FinanceSession:
    """Create a new finance session.

    Use as a context manager to close it automatically::

        with open_session() as session:
            session.add_transaction(...)
    """
    return FinanceSession(store)
