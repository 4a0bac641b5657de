"""Terminal rendering of ledger listings and derived views.

This is the only place where amounts are rounded: the domain hands over exact
Decimals and they are formatted to two places here.
"""

from decimal import Decimal
from typing import Sequence

import click

from fintrack.domain.aggregation import monthly_equivalent, sorted_category_totals
from fintrack.domain.entities import (
    Asset,
    CategoryTotal,
    Liability,
    NetWorthReport,
    RecurringSummary,
    RecurringTransaction,
    Summary,
    Transaction,
)
from fintrack.utils.date_parser import format_display_date

HEALTHY_MESSAGE = "You're in good financial health!"
UNHEALTHY_MESSAGE = "Consider reducing expenses"


def format_money(amount: Decimal) -> str:
    """Format an amount for display, e.g. ``$1,234.50``."""
    return f"${amount:,.2f}"


def format_type_label(value: str) -> str:
    """Turn an enum value into a label: ``credit_card`` -> ``Credit Card``."""
    return " ".join(word.capitalize() for word in value.split("_"))


def _render_breakdown(title: str, totals: Sequence[CategoryTotal], total: Decimal) -> None:
    click.echo(title)
    if not totals:
        click.echo("  Nothing recorded yet")
        return
    for item in sorted_category_totals(totals):
        share = item.amount / total * 100 if total else Decimal("0")
        click.echo(f"  {item.category:<30} {format_money(item.amount):>15} {share:>6.1f}%")


def render_summary(summary: Summary) -> None:
    """Show income and expense breakdowns with the net balance."""
    click.echo("\nFinancial Summary")
    click.echo("=" * 56)
    _render_breakdown("Income Breakdown", summary.income_by_category, summary.total_income)
    click.echo(f"Total Income: {format_money(summary.total_income)}")
    click.echo()
    _render_breakdown(
        "Expense Breakdown", summary.expense_by_category, summary.total_expense
    )
    click.echo(f"Total Expenses: {format_money(summary.total_expense)}")
    click.echo("-" * 56)
    click.echo(f"Net Balance: {format_money(summary.net_balance)}")
    click.echo(HEALTHY_MESSAGE if summary.is_healthy else UNHEALTHY_MESSAGE)


def render_transactions(transactions: Sequence[Transaction]) -> None:
    """Show one-off transactions in insertion order."""
    if not transactions:
        click.echo("No transactions yet")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 90)
    click.echo(
        f"{'Date':<14} {'Type':<8} {'Category':<16} {'Description':<30} {'Amount':>14}"
    )
    click.echo("-" * 90)
    for txn in transactions:
        description = (txn.description or "-")[:30]
        click.echo(
            f"{format_display_date(txn.date):<14} {txn.type.value:<8} {txn.category:<16} "
            f"{description:<30} {format_money(txn.amount):>14}"
        )


def render_recurring(
    summary: RecurringSummary, recurring: Sequence[RecurringTransaction]
) -> None:
    """Show monthly recurring totals and the recurring entries."""
    click.echo("\nRecurring Transactions")
    click.echo("=" * 56)
    click.echo(f"Monthly Recurring Income: {format_money(summary.monthly_income)}")
    click.echo(f"Monthly Recurring Expenses: {format_money(summary.monthly_expense)}")
    click.echo()

    if not recurring:
        click.echo("No recurring transactions yet")
        return

    for record in recurring:
        label = record.description or record.category
        status = "Active" if record.is_active else "Inactive"
        click.echo(
            f"  {label:<24} {record.type.value:<8} {format_money(record.amount):>12} "
            f"{format_type_label(record.interval.value):<10} "
            f"{format_display_date(record.start_date):<14} {status}"
        )
        if record.is_active:
            click.echo(f"    = {format_money(monthly_equivalent(record))} per month")


def render_net_worth(
    report: NetWorthReport, assets: Sequence[Asset], liabilities: Sequence[Liability]
) -> None:
    """Show net worth totals with the assets and liabilities behind them."""
    click.echo("\nNet Worth")
    click.echo("=" * 56)
    click.echo(f"Total Assets: {format_money(report.total_assets)}")
    click.echo(f"Total Liabilities: {format_money(report.total_liabilities)}")
    click.echo(f"Net Worth: {format_money(report.net_worth)}")

    click.echo("\nAssets")
    if not assets:
        click.echo("  No assets added yet")
    for asset in assets:
        click.echo(
            f"  {asset.name:<30} {format_type_label(asset.type.value):<12} "
            f"{format_money(asset.value):>15}"
        )

    click.echo("\nLiabilities")
    if not liabilities:
        click.echo("  No liabilities added yet")
    for liability in liabilities:
        click.echo(
            f"  {liability.name:<30} {format_type_label(liability.type.value):<12} "
            f"{format_money(liability.amount):>15}"
        )
