"""Abstract ledger storage interface."""

from abc import ABC, abstractmethod

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import (
    Asset,
    LedgerCollection,
    Liability,
    RecurringTransaction,
    Transaction,
)


class LedgerStore(ABC):
    """Abstract append-only storage for the four ledger collections.

    Implementations preserve insertion order in every ``list_*`` method and
    return tuples, so callers always work on a snapshot. An insert either
    fully succeeds or leaves the collection unchanged.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store, discarding in-memory state."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def record_exists(self, collection: LedgerCollection, record_id: str) -> bool:
        """Check if a record with the given id exists in a collection."""
        pass

    @abstractmethod
    def count_records(self, collection: LedgerCollection) -> int:
        """Number of records in a collection."""
        pass

    # Transaction operations
    @abstractmethod
    def insert_transaction(self, transaction: Transaction) -> None:
        """Append a transaction."""
        pass

    @abstractmethod
    def list_transactions(self) -> tuple[Transaction, ...]:
        """List transactions in insertion order."""
        pass

    # Recurring transaction operations
    @abstractmethod
    def insert_recurring_transaction(self, recurring: RecurringTransaction) -> None:
        """Append a recurring transaction."""
        pass

    @abstractmethod
    def list_recurring_transactions(self) -> tuple[RecurringTransaction, ...]:
        """List recurring transactions in insertion order."""
        pass

    # Asset operations
    @abstractmethod
    def insert_asset(self, asset: Asset) -> None:
        """Append an asset."""
        pass

    @abstractmethod
    def list_assets(self) -> tuple[Asset, ...]:
        """List assets in insertion order."""
        pass

    # Liability operations
    @abstractmethod
    def insert_liability(self, liability: Liability) -> None:
        """Append a liability."""
        pass

    @abstractmethod
    def list_liabilities(self) -> tuple[Liability, ...]:
        """List liabilities in insertion order."""
        pass
