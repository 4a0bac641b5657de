"""Storage layer for fintrack application."""

from fintrack.database.base import LedgerStore
from fintrack.database.factories import create_memory_store

__all__ = ["LedgerStore", "create_memory_store"]
