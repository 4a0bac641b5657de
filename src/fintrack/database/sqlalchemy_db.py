"""SQLAlchemy ledger store backed by an in-memory SQLite database."""

from typing import Any, Callable, Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.database.base import LedgerStore
from fintrack.database.models import (
    Asset,
    Base,
    Liability,
    RecurringTransaction,
    Transaction,
    create_memory_engine,
    create_session_factory,
)
from fintrack.database.mappers import (
    asset_to_domain,
    asset_to_orm,
    liability_to_domain,
    liability_to_orm,
    recurring_transaction_to_domain,
    recurring_transaction_to_orm,
    transaction_to_domain,
    transaction_to_orm,
)
from fintrack.domain.entities import (
    Asset as DomainAsset,
    LedgerCollection,
    Liability as DomainLiability,
    RecurringTransaction as DomainRecurringTransaction,
    Transaction as DomainTransaction,
)
from fintrack.domain.errors import ValidationError, duplicate_record_id

ORM_MODELS: dict[LedgerCollection, Any] = {
    LedgerCollection.TRANSACTIONS: Transaction,
    LedgerCollection.RECURRING_TRANSACTIONS: RecurringTransaction,
    LedgerCollection.ASSETS: Asset,
    LedgerCollection.LIABILITIES: Liability,
}


class SQLAlchemyLedgerStore(LedgerStore):
    """SQLAlchemy-based implementation of the LedgerStore interface.

    The database lives only in memory; disposing the engine on disconnect
    throws the whole ledger away.
    """

    def __init__(self, echo: bool = False):
        """Initialize the store.

        Args:
            echo: If True, log every SQL statement through SQLAlchemy
        """
        self.engine = create_memory_engine(echo=echo)
        self.session_factory = create_session_factory(self.engine)
        self._session: Optional[Session] = None
        self._closed = False

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._closed:
            raise RuntimeError("Ledger store is disconnected")
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this only opens the session
        self._get_session()

    def disconnect(self) -> None:
        """Disconnect from the database and drop its contents."""
        if self._session is not None:
            self._session.close()
            self._session = None
        if not self._closed:
            self.engine.dispose()
            self._closed = True

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        Base.metadata.create_all(self.engine)

    def record_exists(self, collection: LedgerCollection, record_id: str) -> bool:
        """Check if a record with the given id exists in a collection."""
        session = self._get_session()
        model = ORM_MODELS[LedgerCollection(collection)]
        return (
            session.query(model).filter(model.record_id == record_id).first()
            is not None
        )

    def count_records(self, collection: LedgerCollection) -> int:
        """Number of records in a collection."""
        session = self._get_session()
        return session.query(ORM_MODELS[LedgerCollection(collection)]).count()

    def _insert(self, collection: LedgerCollection, row: Any) -> None:
        """Add one row as a single unit of work, rolling back on failure."""
        session = self._get_session()
        record_id = row.record_id
        session.add(row)
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            raise ValidationError(duplicate_record_id(record_id, collection.value)) from e
        except SQLAlchemyError:
            session.rollback()
            raise
        logger.debug("Stored {} row {} (seq {})", collection.value, record_id, row.seq)

    def _list(self, collection: LedgerCollection, to_domain: Callable) -> tuple:
        session = self._get_session()
        model = ORM_MODELS[collection]
        rows = session.query(model).order_by(model.seq).all()
        return tuple(to_domain(row) for row in rows)

    # Transaction operations
    def insert_transaction(self, transaction: DomainTransaction) -> None:
        """Append a transaction."""
        self._insert(LedgerCollection.TRANSACTIONS, transaction_to_orm(transaction))

    def list_transactions(self) -> tuple[DomainTransaction, ...]:
        """List transactions in insertion order."""
        return self._list(LedgerCollection.TRANSACTIONS, transaction_to_domain)

    # Recurring transaction operations
    def insert_recurring_transaction(
        self, recurring: DomainRecurringTransaction
    ) -> None:
        """Append a recurring transaction."""
        self._insert(
            LedgerCollection.RECURRING_TRANSACTIONS,
            recurring_transaction_to_orm(recurring),
        )

    def list_recurring_transactions(self) -> tuple[DomainRecurringTransaction, ...]:
        """List recurring transactions in insertion order."""
        return self._list(
            LedgerCollection.RECURRING_TRANSACTIONS, recurring_transaction_to_domain
        )

    # Asset operations
    def insert_asset(self, asset: DomainAsset) -> None:
        """Append an asset."""
        self._insert(LedgerCollection.ASSETS, asset_to_orm(asset))

    def list_assets(self) -> tuple[DomainAsset, ...]:
        """List assets in insertion order."""
        return self._list(LedgerCollection.ASSETS, asset_to_domain)

    # Liability operations
    def insert_liability(self, liability: DomainLiability) -> None:
        """Append a liability."""
        self._insert(LedgerCollection.LIABILITIES, liability_to_orm(liability))

    def list_liabilities(self) -> tuple[DomainLiability, ...]:
        """List liabilities in insertion order."""
        return self._list(LedgerCollection.LIABILITIES, liability_to_domain)
