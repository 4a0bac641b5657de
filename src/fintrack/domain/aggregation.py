"""Pure aggregation functions over ledger snapshots.

Every function here is a full recomputation over the sequence it is given:
no caching, no hidden state, and no errors for empty input. Amounts stay
exact ``Decimal`` values; rounding is left to whoever renders them.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Iterable, Sequence

from fintrack.domain.entities import (
    Asset,
    CategoryTotal,
    Liability,
    NetWorthReport,
    RecurringInterval,
    RecurringTransaction,
    Transaction,
    TransactionType,
)

ZERO = Decimal("0")

# Fixed approximation of calendar density: 4 weeks a month, 12 months a year.
MONTHLY_FACTORS: dict[RecurringInterval, Fraction] = {
    RecurringInterval.WEEKLY: Fraction(4),
    RecurringInterval.MONTHLY: Fraction(1),
    RecurringInterval.QUARTERLY: Fraction(1, 3),
    RecurringInterval.YEARLY: Fraction(1, 12),
}


def _of_type(
    transactions: Iterable[Transaction], txn_type: TransactionType
) -> list[Transaction]:
    return [txn for txn in transactions if txn.type == txn_type]


def category_totals(
    transactions: Sequence[Transaction], txn_type: TransactionType
) -> list[CategoryTotal]:
    """Sum amounts per category for one transaction type.

    Categories are compared by exact string equality. The result holds one
    entry per distinct category, in the order categories were first seen.

    Args:
        transactions: Transactions to aggregate
        txn_type: Only transactions of this type are included

    Returns:
        List of CategoryTotal entries (empty if nothing matches)
    """
    totals: dict[str, Decimal] = {}
    for txn in _of_type(transactions, txn_type):
        totals[txn.category] = totals.get(txn.category, ZERO) + txn.amount

    return [
        CategoryTotal(category=category, amount=amount)
        for category, amount in totals.items()
    ]


def sorted_category_totals(totals: Iterable[CategoryTotal]) -> list[CategoryTotal]:
    """Order category totals by amount (highest first), then by name."""
    return sorted(totals, key=lambda item: (-item.amount, item.category))


def total_of(
    transactions: Sequence[Transaction], txn_type: TransactionType
) -> Decimal:
    """Sum all amounts of one transaction type."""
    return sum((txn.amount for txn in _of_type(transactions, txn_type)), ZERO)


def net_balance(transactions: Sequence[Transaction]) -> Decimal:
    """Total income minus total expenses."""
    return total_of(transactions, TransactionType.INCOME) - total_of(
        transactions, TransactionType.EXPENSE
    )


def _to_decimal(value: Fraction) -> Decimal:
    if value.denominator == 1:
        return Decimal(value.numerator)
    return Decimal(value.numerator) / Decimal(value.denominator)


def _monthly_fraction(record: RecurringTransaction) -> Fraction:
    return Fraction(record.amount) * MONTHLY_FACTORS[RecurringInterval(record.interval)]


def monthly_equivalent(record: RecurringTransaction) -> Decimal:
    """Rescale a recurring amount to its monthly equivalent."""
    return _to_decimal(_monthly_fraction(record))


def monthly_recurring_total(
    recurring: Sequence[RecurringTransaction], txn_type: TransactionType
) -> Decimal:
    """Monthly-equivalent total of active recurring transactions of one type.

    Inactive entries contribute nothing. ``start_date`` does not affect
    inclusion: a recurrence starting in the future still counts.

    Args:
        recurring: Recurring transactions to aggregate
        txn_type: Only entries of this type are included

    Returns:
        Sum of monthly equivalents
    """
    total = Fraction(0)
    for record in recurring:
        if record.type != txn_type or not record.is_active:
            continue
        total += _monthly_fraction(record)
    return _to_decimal(total)


def net_worth(
    assets: Sequence[Asset], liabilities: Sequence[Liability]
) -> NetWorthReport:
    """Total asset value minus total liability amount.

    Asset and liability types carry no weight; every entry counts at face value.
    """
    total_assets = sum((asset.value for asset in assets), ZERO)
    total_liabilities = sum((liability.amount for liability in liabilities), ZERO)
    return NetWorthReport(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
    )
