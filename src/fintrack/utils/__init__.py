"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date, format_display_date
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.ids import RecordIdGenerator

__all__ = ["parse_date", "format_display_date", "parse_amount", "RecordIdGenerator"]
