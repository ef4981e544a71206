"""ui.utils.format

Money and duration formatting for the loan simulator.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def _round_half_up(x: float | int, places: int = 0) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(x)).quantize(quantum, rounding=ROUND_HALF_UP)


def format_currency(amount: float | int) -> str:
    """US dollars without cents: 1234.5 -> "$1,235", -500 -> "-$500"."""
    rounded = _round_half_up(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_money(amount: float | int) -> str:
    """Plain two-decimal amount for CSV cells: 1234.5 -> "1234.50"."""
    return f"{_round_half_up(amount, 2):.2f}"


def format_months(months: int) -> str:
    """Months as years + remainder: 6 -> "6 months", 25 -> "2 years, 1 months"."""
    if months <= 0:
        return "0 months"
    years, remainder = divmod(months, 12)
    if years == 0:
        return f"{remainder} months"
    if remainder == 0:
        return f"{years} years"
    return f"{years} years, {remainder} months"
