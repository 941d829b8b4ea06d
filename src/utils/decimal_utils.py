"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through their string form so 0.1 stays 0.1 rather than the
    nearest binary fraction.

    Args:
        value: Raw numeric value from SQL rows, JSON payloads or callers.

    Returns:
        Decimal: Normalized numeric value, 0 for None.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


__all__ = ["coerce_decimal"]
