"""Domain model entities for fintrack.

These are pure data classes representing ledger records and the views derived
from them, independent of the storage schema. Records are immutable once
created; the ledger only ever appends them.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a cash flow."""

    EXPENSE = "expense"
    INCOME = "income"


class RecurringInterval(str, Enum):
    """How often a recurring transaction repeats."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class AssetType(str, Enum):
    """Kinds of assets tracked for net worth."""

    CASH = "cash"
    INVESTMENT = "investment"
    PROPERTY = "property"
    VEHICLE = "vehicle"
    OTHER = "other"


class LiabilityType(str, Enum):
    """Kinds of liabilities tracked for net worth."""

    CREDIT_CARD = "credit_card"
    LOAN = "loan"
    MORTGAGE = "mortgage"
    OTHER = "other"


class LedgerCollection(str, Enum):
    """The four independent append-only collections of a ledger."""

    TRANSACTIONS = "transactions"
    RECURRING_TRANSACTIONS = "recurring_transactions"
    ASSETS = "assets"
    LIABILITIES = "liabilities"


@dataclass(frozen=True)
class Transaction:
    """One-off income or expense."""

    id: str
    type: TransactionType
    amount: Decimal
    category: str
    description: str
    date: datetime


@dataclass(frozen=True)
class RecurringTransaction:
    """Template for a periodic cash flow."""

    id: str
    type: TransactionType
    amount: Decimal
    category: str
    description: str
    interval: RecurringInterval
    start_date: datetime
    is_active: bool = True


@dataclass(frozen=True)
class Asset:
    """Asset domain entity."""

    id: str
    name: str
    value: Decimal
    type: AssetType


@dataclass(frozen=True)
class Liability:
    """Liability domain entity."""

    id: str
    name: str
    amount: Decimal
    type: LiabilityType


@dataclass(frozen=True)
class CategoryTotal:
    """Summed amount for one category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class Summary:
    """Income and expense totals over one-off transactions."""

    income_by_category: tuple[CategoryTotal, ...]
    expense_by_category: tuple[CategoryTotal, ...]
    total_income: Decimal
    total_expense: Decimal
    net_balance: Decimal

    @property
    def is_healthy(self) -> bool:
        return self.net_balance >= 0


@dataclass(frozen=True)
class RecurringSummary:
    """Monthly-equivalent recurring cash flow."""

    monthly_income: Decimal
    monthly_expense: Decimal

    @property
    def monthly_net(self) -> Decimal:
        return self.monthly_income - self.monthly_expense


@dataclass(frozen=True)
class NetWorthReport:
    """Assets, liabilities and their difference."""

    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal


LedgerRecord = Transaction | RecurringTransaction | Asset | Liability

RECORD_TYPES: dict[LedgerCollection, type] = {
    LedgerCollection.TRANSACTIONS: Transaction,
    LedgerCollection.RECURRING_TRANSACTIONS: RecurringTransaction,
    LedgerCollection.ASSETS: Asset,
    LedgerCollection.LIABILITIES: Liability,
}
