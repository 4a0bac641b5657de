"""Ledger domain service: the validated append boundary."""

from __future__ import annotations

from dataclasses import fields
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

from loguru import logger

from fintrack.domain.entities import (
    RECORD_TYPES,
    Asset,
    AssetType,
    LedgerCollection,
    LedgerRecord,
    Liability,
    LiabilityType,
    RecurringInterval,
    RecurringTransaction,
    Transaction,
    TransactionType,
)
from fintrack.domain.errors import (
    ValidationError,
    duplicate_record_id,
    invalid_choice,
    missing_field,
    negative_amount,
    wrong_record_kind,
)

if TYPE_CHECKING:
    # Imported for annotations only; database.base imports the domain package
    from fintrack.database.base import LedgerStore

# Fields that may be empty strings; every other field is required
OPTIONAL_TEXT_FIELDS = {"description"}

ENUM_FIELDS: dict[str, dict[type, type[Enum]]] = {
    "type": {
        Transaction: TransactionType,
        RecurringTransaction: TransactionType,
        Asset: AssetType,
        Liability: LiabilityType,
    },
    "interval": {RecurringTransaction: RecurringInterval},
}

MONEY_FIELDS = {"amount", "value"}
DATE_FIELDS = {"date", "start_date"}


class LedgerService:
    """Service for appending records to the ledger collections."""

    def __init__(self, store: LedgerStore):
        """Initialize ledger service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def append(self, collection: LedgerCollection, record: LedgerRecord) -> None:
        """Validate a record and append it to the named collection.

        Args:
            collection: Which of the four collections to append to
            record: Fully populated record of the matching kind

        Raises:
            ValidationError: If the record is of the wrong kind, misses a
                required field, has a negative amount, an unknown enum
                value, or an id already present in the collection
        """
        try:
            collection = LedgerCollection(collection)
        except ValueError:
            raise ValidationError(
                invalid_choice(
                    "collection", collection, [c.value for c in LedgerCollection]
                )
            )

        try:
            self.validate(collection, record)
            if self.store.record_exists(collection, record.id):
                raise ValidationError(duplicate_record_id(record.id, collection.value))
        except ValidationError as e:
            logger.warning("Rejected append to {}: {}", collection.value, e)
            raise

        if collection == LedgerCollection.TRANSACTIONS:
            self.store.insert_transaction(record)
        elif collection == LedgerCollection.RECURRING_TRANSACTIONS:
            self.store.insert_recurring_transaction(record)
        elif collection == LedgerCollection.ASSETS:
            self.store.insert_asset(record)
        else:
            self.store.insert_liability(record)

        logger.debug("Appended {} to {}", record.id, collection.value)

    def validate(self, collection: LedgerCollection, record: Any) -> None:
        """Check a record against the rules of its collection.

        Raises:
            ValidationError: On the first rule the record breaks
        """
        expected = RECORD_TYPES[collection]
        if not isinstance(record, expected):
            raise ValidationError(
                wrong_record_kind(
                    expected.__name__, type(record).__name__, collection.value
                )
            )

        for field in fields(record):
            value = getattr(record, field.name)
            name = field.name

            if value is None:
                if name in OPTIONAL_TEXT_FIELDS:
                    continue
                raise ValidationError(missing_field(name, collection.value))

            if name in ENUM_FIELDS:
                enum_type = ENUM_FIELDS[name][expected]
                try:
                    enum_type(value)
                except ValueError:
                    raise ValidationError(
                        invalid_choice(name, value, [m.value for m in enum_type])
                    )
            elif name in MONEY_FIELDS:
                self._validate_money(name, value)
            elif name in DATE_FIELDS:
                if not isinstance(value, datetime):
                    raise ValidationError(
                        f"Field '{name}' must be a datetime (got {type(value).__name__})"
                    )
            elif name == "is_active":
                if not isinstance(value, bool):
                    raise ValidationError("Field 'is_active' must be a boolean")
            elif isinstance(value, str):
                if name not in OPTIONAL_TEXT_FIELDS and not value.strip():
                    raise ValidationError(missing_field(name, collection.value))
            else:
                raise ValidationError(
                    f"Field '{name}' must be a string (got {type(value).__name__})"
                )

    def _validate_money(self, name: str, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
            raise ValidationError(
                f"Field '{name}' must be a decimal amount (got {type(value).__name__})"
            )
        if isinstance(value, Decimal) and not value.is_finite():
            raise ValidationError(f"Field '{name}' must be a finite amount")
        if value < 0:
            raise ValidationError(negative_amount(name, value))

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a one-off transaction."""
        self.append(LedgerCollection.TRANSACTIONS, transaction)

    def add_recurring_transaction(self, recurring: RecurringTransaction) -> None:
        """Append a recurring transaction."""
        self.append(LedgerCollection.RECURRING_TRANSACTIONS, recurring)

    def add_asset(self, asset: Asset) -> None:
        """Append an asset."""
        self.append(LedgerCollection.ASSETS, asset)

    def add_liability(self, liability: Liability) -> None:
        """Append a liability."""
        self.append(LedgerCollection.LIABILITIES, liability)

    def list_transactions(self) -> tuple[Transaction, ...]:
        """List transactions in insertion order."""
        return self.store.list_transactions()

    def list_recurring_transactions(self) -> tuple[RecurringTransaction, ...]:
        """List recurring transactions in insertion order."""
        return self.store.list_recurring_transactions()

    def list_assets(self) -> tuple[Asset, ...]:
        """List assets in insertion order."""
        return self.store.list_assets()

    def list_liabilities(self) -> tuple[Liability, ...]:
        """List liabilities in insertion order."""
        return self.store.list_liabilities()
