"""Summary domain service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fintrack.domain.aggregation import (
    category_totals,
    monthly_recurring_total,
    net_balance,
    net_worth,
    total_of,
)
from fintrack.domain.entities import (
    NetWorthReport,
    RecurringSummary,
    Summary,
    TransactionType,
)

if TYPE_CHECKING:
    from fintrack.database.base import LedgerStore


class SummaryService:
    """Service for building derived views over the current ledger.

    Every call reads a fresh snapshot from the store and recomputes from
    scratch; nothing is cached between calls.
    """

    def __init__(self, store: LedgerStore):
        """Initialize summary service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def get_summary(self) -> Summary:
        """Build income/expense totals by category for one-off transactions."""
        transactions = self.store.list_transactions()
        return Summary(
            income_by_category=tuple(
                category_totals(transactions, TransactionType.INCOME)
            ),
            expense_by_category=tuple(
                category_totals(transactions, TransactionType.EXPENSE)
            ),
            total_income=total_of(transactions, TransactionType.INCOME),
            total_expense=total_of(transactions, TransactionType.EXPENSE),
            net_balance=net_balance(transactions),
        )

    def get_recurring_summary(self) -> RecurringSummary:
        """Build monthly-equivalent recurring income and expenses."""
        recurring = self.store.list_recurring_transactions()
        return RecurringSummary(
            monthly_income=monthly_recurring_total(recurring, TransactionType.INCOME),
            monthly_expense=monthly_recurring_total(
                recurring, TransactionType.EXPENSE
            ),
        )

    def get_net_worth(self) -> NetWorthReport:
        """Build net worth from all assets and liabilities."""
        return net_worth(self.store.list_assets(), self.store.list_liabilities())
