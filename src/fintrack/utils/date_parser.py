"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> datetime:
    """Parse a date string into a datetime at midnight.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow",
      "next week", "next month", "next year"

    Args:
        date_str: Date string in various formats

    Returns:
        Naive datetime at the start of the parsed day

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        # Monday of next week, first of next month, January 1 of next year
        "next week": today + timedelta(days=(7 - today.weekday())),
        "next month": (today + relativedelta(months=1)).replace(day=1),
        "next year": today.replace(month=1, day=1) + relativedelta(years=1),
    }

    if date_str in relative_dates:
        return datetime.combine(relative_dates[date_str], time.min)

    try:
        dt = date_parser.parse(date_str)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
    return datetime.combine(dt.date(), time.min)


def format_display_date(value: datetime) -> str:
    """Format a date the way ledger listings show it, e.g. "Jan 5, 2024"."""
    return f"{value:%b} {value.day}, {value.year}"
