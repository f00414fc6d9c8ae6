"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms or the AI parser.

    Returns:
        Decimal: Normalized numeric value, 0 for missing or unparseable input.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def format_amount(value: Decimal) -> str:
    """Return the plain decimal string of an amount (``100``, ``128.5``)."""
    if value == value.to_integral_value():
        return format(value.to_integral_value(), "f")
    return format(value.normalize(), "f")


def percent_change(current: Decimal, previous: Decimal) -> Decimal:
    """Return the change from previous to current in percent.

    Args:
        current: Value of the current period.
        previous: Value of the previous period.

    Returns:
        Decimal: Percent change, 0 when there is no positive baseline.
    """
    if previous <= 0:
        return Decimal("0")
    return (current - previous) / previous * Decimal("100")


__all__ = ["coerce_decimal", "format_amount", "percent_change"]
