"""Argument type converters shared by CLI commands."""

import argparse
from decimal import Decimal

from models.date import Date
from models.transaction import to_amount


def parse_date(value: str) -> Date:
    """Parse a date in YYYY/MM/DD format.

    Only the shape is checked; 2025/02/31 is accepted.
    """
    parts = value.split("/")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"Invalid date '{value}', expected YYYY/MM/DD"
        )
    try:
        year, month, day = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date '{value}', expected YYYY/MM/DD"
        ) from None
    return Date(year=year, month=month, day=day)


def parse_month(value: str) -> Date:
    """Parse a month in YYYY/MM format into the first day of that month."""
    parts = value.split("/")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Invalid month '{value}', expected YYYY/MM")
    try:
        year, month = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid month '{value}', expected YYYY/MM"
        ) from None
    if month < 1 or month > 12:
        raise argparse.ArgumentTypeError("Month must be between 1 and 12")
    return Date(year=year, month=month, day=1)


def parse_amount(value: str) -> Decimal:
    try:
        return to_amount(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
