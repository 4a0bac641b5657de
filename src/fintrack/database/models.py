"""SQLAlchemy models for the in-memory ledger database."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, Column, Integer, String, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class DecimalText(TypeDecorator):
    """Store Decimal values as text so they round-trip exactly on SQLite."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Optional[Decimal], dialect) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return Decimal(value)


class IsoDateTime(TypeDecorator):
    """Store datetimes as ISO-8601 text, keeping any timezone offset."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[str]:
        if value is None:
            return None
        return value.isoformat()

    def process_result_value(self, value: Optional[str], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return datetime.fromisoformat(value)


class Transaction(Base):
    """One-off transaction model."""

    __tablename__ = "transactions"

    # seq preserves insertion order; record_id is the caller's opaque id
    seq = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String, unique=True, nullable=False)
    type = Column(String, nullable=False)
    amount = Column(DecimalText, nullable=False)
    category = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    date = Column(IsoDateTime, nullable=False)


class RecurringTransaction(Base):
    """Recurring transaction model."""

    __tablename__ = "recurring_transactions"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String, unique=True, nullable=False)
    type = Column(String, nullable=False)
    amount = Column(DecimalText, nullable=False)
    category = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    interval = Column(String, nullable=False)
    start_date = Column(IsoDateTime, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class Asset(Base):
    """Asset model."""

    __tablename__ = "assets"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    value = Column(DecimalText, nullable=False)
    type = Column(String, nullable=False)


class Liability(Base):
    """Liability model."""

    __tablename__ = "liabilities"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    amount = Column(DecimalText, nullable=False)
    type = Column(String, nullable=False)


def create_memory_engine(echo: bool = False) -> Engine:
    """Create an engine bound to a private in-memory SQLite database.

    StaticPool keeps the single connection alive, so every session of this
    engine sees the same database until the engine is disposed.
    """
    return create_engine(
        "sqlite://",
        echo=echo,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    return sessionmaker(bind=engine)
