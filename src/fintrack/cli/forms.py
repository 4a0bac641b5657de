"""Interactive forms that build ledger records from prompted input.

Form state lives only inside these functions; the ledger only ever sees the
finished record.
"""

from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import click

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
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date

EXPENSE_CATEGORIES = ["Food", "Transport", "Housing", "Entertainment", "Utilities", "Other"]
INCOME_CATEGORIES = ["Salary", "Freelance", "Investments", "Other"]

RECURRING_EXPENSE_CATEGORIES = [
    "Rent",
    "Utilities",
    "Subscriptions",
    "Insurance",
    "Loan Payment",
    "Other",
]
RECURRING_INCOME_CATEGORIES = ["Salary", "Rental Income", "Investment Income", "Other"]


def _amount(value: str) -> Decimal:
    """Prompt value processor for non-negative money amounts."""
    try:
        amount = parse_amount(value)
    except ValueError as e:
        raise click.BadParameter(str(e))
    if amount < 0:
        raise click.BadParameter("Amount must not be negative")
    return amount


def _date(value: str) -> datetime:
    try:
        return parse_date(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _choice(enum_type) -> click.Choice:
    return click.Choice([member.value for member in enum_type])


def _prompt_type() -> TransactionType:
    return TransactionType(
        click.prompt("Type", type=_choice(TransactionType), default="expense")
    )


def _categories_for(txn_type: TransactionType, expense: list[str], income: list[str]) -> list[str]:
    return expense if txn_type == TransactionType.EXPENSE else income


def prompt_transaction(
    new_id: Callable[[], str], now: Optional[datetime] = None
) -> Transaction:
    """Ask for a one-off transaction dated ``now`` (default: current time)."""
    txn_type = _prompt_type()
    amount = click.prompt("Amount", value_proc=_amount)
    category = click.prompt(
        "Category",
        type=click.Choice(
            _categories_for(txn_type, EXPENSE_CATEGORIES, INCOME_CATEGORIES)
        ),
    )
    description = click.prompt("Description", default="", show_default=False)

    return Transaction(
        id=new_id(),
        type=txn_type,
        amount=amount,
        category=category,
        description=description,
        date=now or datetime.now(),
    )


def prompt_recurring_transaction(new_id: Callable[[], str]) -> RecurringTransaction:
    """Ask for a recurring transaction. New entries always start active."""
    txn_type = _prompt_type()
    amount = click.prompt("Amount", value_proc=_amount)
    category = click.prompt(
        "Category",
        type=click.Choice(
            _categories_for(
                txn_type, RECURRING_EXPENSE_CATEGORIES, RECURRING_INCOME_CATEGORIES
            )
        ),
    )
    interval = click.prompt(
        "Interval", type=_choice(RecurringInterval), default="monthly"
    )
    start_date = click.prompt(
        "Start date (YYYY-MM-DD or 'today', 'next month', ...)", value_proc=_date
    )
    description = click.prompt("Description", default="", show_default=False)

    return RecurringTransaction(
        id=new_id(),
        type=txn_type,
        amount=amount,
        category=category,
        description=description,
        interval=RecurringInterval(interval),
        start_date=start_date,
        is_active=True,
    )


def prompt_asset(new_id: Callable[[], str]) -> Asset:
    name = click.prompt("Asset name")
    value = click.prompt("Value", value_proc=_amount)
    asset_type = click.prompt("Type", type=_choice(AssetType), default="cash")
    return Asset(id=new_id(), name=name, value=value, type=AssetType(asset_type))


def prompt_liability(new_id: Callable[[], str]) -> Liability:
    name = click.prompt("Liability name")
    amount = click.prompt("Amount", value_proc=_amount)
    liability_type = click.prompt(
        "Type", type=_choice(LiabilityType), default="credit_card"
    )
    return Liability(
        id=new_id(), name=name, amount=amount, type=LiabilityType(liability_type)
    )
