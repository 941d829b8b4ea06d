"""Month key helpers.

Month keys are "YYYY-MM" strings. Because they are zero padded they compare
lexicographically in calendar order, and a day-level date "YYYY-MM-DD"
belongs to a month when it starts with the month key.
"""

from collections.abc import Iterator
from datetime import date

from src.domain.errors import ValidationError


def parse_month(value: str) -> tuple[int, int]:
    """Split a month key into year and month numbers.

    Args:
        value: Month key in "YYYY-MM" form.

    Returns:
        tuple[int, int]: Year and month (1-12).

    Raises:
        ValidationError: If the key is malformed.
    """
    if (
        not isinstance(value, str)
        or len(value) != 7
        or value[4] != "-"
        or not value[:4].isdigit()
        or not value[5:].isdigit()
    ):
        raise ValidationError(f"Invalid month key '{value}'. Expected YYYY-MM.")
    year, month = int(value[:4]), int(value[5:])
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month number in '{value}'.")
    return year, month


def format_month(year: int, month: int) -> str:
    """Return the month key for a year and month number."""
    return f"{year:04d}-{month:02d}"


def next_month(month: str) -> str:
    """Return the month key following ``month``."""
    year, number = parse_month(month)
    if number == 12:
        return format_month(year + 1, 1)
    return format_month(year, number + 1)


def previous_month(month: str) -> str:
    """Return the month key preceding ``month``."""
    year, number = parse_month(month)
    if number == 1:
        return format_month(year - 1, 12)
    return format_month(year, number - 1)


def iter_months(start: str, end: str) -> Iterator[str]:
    """Yield month keys from ``start`` through ``end`` inclusive."""
    parse_month(end)
    current = start
    while current <= end:
        yield current
        current = next_month(current)


def month_of(day: str) -> str:
    """Return the month key of a day-level date string."""
    return day[:7]


def is_date_in_month(day: str, month: str) -> bool:
    """Return True when ``day`` falls in ``[month, next_month(month))``."""
    return month <= day < next_month(month)


def month_from_date(value: date) -> str:
    """Return the month key of a calendar date."""
    return format_month(value.year, value.month)


__all__ = [
    "parse_month",
    "format_month",
    "next_month",
    "previous_month",
    "iter_months",
    "month_of",
    "is_date_in_month",
    "month_from_date",
]
