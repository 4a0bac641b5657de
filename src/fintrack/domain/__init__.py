"""Domain layer for fintrack application."""

from fintrack.domain.ledger import LedgerService
from fintrack.domain.summary import SummaryService

__all__ = [
    "LedgerService",
    "SummaryService",
]
