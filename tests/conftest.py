"""Shared pytest fixtures for fintrack tests."""

from datetime import datetime
from decimal import Decimal
from itertools import count

import pytest

from fintrack.database.factories import create_memory_store
from fintrack.domain.entities import (
    Asset,
    AssetType,
    Liability,
    LiabilityType,
    RecurringInterval,
    RecurringTransaction,
    Transaction,
    TransactionType,
)
from fintrack.domain.ledger import LedgerService
from fintrack.domain.summary import SummaryService
from fintrack.session import FinanceSession


@pytest.fixture
def store():
    """Create a connected in-memory ledger store for testing."""
    store = create_memory_store(echo=False)
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()


@pytest.fixture
def ledger_service(store):
    """Create a LedgerService over the test store."""
    return LedgerService(store)


@pytest.fixture
def summary_service(store):
    """Create a SummaryService over the test store."""
    return SummaryService(store)


@pytest.fixture
def session():
    """Create a FinanceSession and close it after the test."""
    session = FinanceSession()
    yield session
    session.close()


@pytest.fixture
def ids():
    """Return a callable producing distinct record ids."""
    counter = count(1)
    return lambda: f"rec-{next(counter)}"


@pytest.fixture
def make_transaction(ids):
    """Build Transaction records with sensible defaults."""

    def _make(amount="10.00", type=TransactionType.EXPENSE, category="Food", **kwargs):
        return Transaction(
            id=kwargs.pop("id", None) or ids(),
            type=type,
            amount=Decimal(amount),
            category=category,
            description=kwargs.pop("description", ""),
            date=kwargs.pop("date", datetime(2024, 1, 15, 12, 30)),
        )

    return _make


@pytest.fixture
def make_recurring(ids):
    """Build RecurringTransaction records with sensible defaults."""

    def _make(
        amount="100",
        type=TransactionType.EXPENSE,
        interval=RecurringInterval.MONTHLY,
        is_active=True,
        **kwargs,
    ):
        return RecurringTransaction(
            id=kwargs.pop("id", None) or ids(),
            type=type,
            amount=Decimal(amount),
            category=kwargs.pop("category", "Rent"),
            description=kwargs.pop("description", ""),
            interval=interval,
            start_date=kwargs.pop("start_date", datetime(2024, 1, 1)),
            is_active=is_active,
        )

    return _make


@pytest.fixture
def make_asset(ids):
    """Build Asset records with sensible defaults."""

    def _make(value="1000", type=AssetType.CASH, name="Checking", **kwargs):
        return Asset(
            id=kwargs.pop("id", None) or ids(), name=name, value=Decimal(value), type=type
        )

    return _make


@pytest.fixture
def make_liability(ids):
    """Build Liability records with sensible defaults."""

    def _make(amount="500", type=LiabilityType.CREDIT_CARD, name="Visa", **kwargs):
        return Liability(
            id=kwargs.pop("id", None) or ids(),
            name=name,
            amount=Decimal(amount),
            type=type,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
