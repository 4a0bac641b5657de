"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay free of
storage concerns such as the insertion sequence column.
"""

from fintrack.domain import entities as domain
from fintrack.database.models import (
    Asset as ORMAsset,
    Liability as ORMLiability,
    RecurringTransaction as ORMRecurringTransaction,
    Transaction as ORMTransaction,
)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.record_id,
        type=domain.TransactionType(orm_transaction.type),
        amount=orm_transaction.amount,
        category=orm_transaction.category,
        description=orm_transaction.description,
        date=orm_transaction.date,
    )


def transaction_to_orm(transaction: domain.Transaction) -> ORMTransaction:
    """Convert domain Transaction entity to a new SQLAlchemy row."""
    return ORMTransaction(
        record_id=transaction.id,
        type=domain.TransactionType(transaction.type).value,
        amount=transaction.amount,
        category=transaction.category,
        description=transaction.description or "",
        date=transaction.date,
    )


def recurring_transaction_to_domain(
    orm_recurring: ORMRecurringTransaction,
) -> domain.RecurringTransaction:
    """Convert SQLAlchemy RecurringTransaction model to domain entity."""
    return domain.RecurringTransaction(
        id=orm_recurring.record_id,
        type=domain.TransactionType(orm_recurring.type),
        amount=orm_recurring.amount,
        category=orm_recurring.category,
        description=orm_recurring.description,
        interval=domain.RecurringInterval(orm_recurring.interval),
        start_date=orm_recurring.start_date,
        is_active=orm_recurring.is_active,
    )


def recurring_transaction_to_orm(
    recurring: domain.RecurringTransaction,
) -> ORMRecurringTransaction:
    """Convert domain RecurringTransaction entity to a new SQLAlchemy row."""
    return ORMRecurringTransaction(
        record_id=recurring.id,
        type=domain.TransactionType(recurring.type).value,
        amount=recurring.amount,
        category=recurring.category,
        description=recurring.description or "",
        interval=domain.RecurringInterval(recurring.interval).value,
        start_date=recurring.start_date,
        is_active=recurring.is_active,
    )


def asset_to_domain(orm_asset: ORMAsset) -> domain.Asset:
    """Convert SQLAlchemy Asset model to domain Asset entity."""
    return domain.Asset(
        id=orm_asset.record_id,
        name=orm_asset.name,
        value=orm_asset.value,
        type=domain.AssetType(orm_asset.type),
    )


def asset_to_orm(asset: domain.Asset) -> ORMAsset:
    """Convert domain Asset entity to a new SQLAlchemy row."""
    return ORMAsset(
        record_id=asset.id,
        name=asset.name,
        value=asset.value,
        type=domain.AssetType(asset.type).value,
    )


def liability_to_domain(orm_liability: ORMLiability) -> domain.Liability:
    """Convert SQLAlchemy Liability model to domain Liability entity."""
    return domain.Liability(
        id=orm_liability.record_id,
        name=orm_liability.name,
        amount=orm_liability.amount,
        type=domain.LiabilityType(orm_liability.type),
    )


def liability_to_orm(liability: domain.Liability) -> ORMLiability:
    """Convert domain Liability entity to a new SQLAlchemy row."""
    return ORMLiability(
        record_id=liability.id,
        name=liability.name,
        amount=liability.amount,
        type=domain.LiabilityType(liability.type).value,
    )
