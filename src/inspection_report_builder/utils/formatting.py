"""Text formatting helpers shared by the report templates."""

import math
from datetime import date


def format_currency(amount: float | int | None) -> str:
    """
    Format an amount as US dollars, e.g. ``$1,234.50``.

    Non-numeric and NaN amounts render as ``$0``.
    """
    if amount is None or isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return "$0"
    if math.isnan(amount):
        return "$0"
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_number(value: float | int | None) -> str:
    """Render a quantity without a trailing ``.0`` for whole numbers."""
    if value is None:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_long_date(value: date | None = None) -> str:
    """Format a date like ``October 19, 2026`` (defaults to today)."""
    value = value or date.today()
    return f"{value:%B} {value.day}, {value.year}"
