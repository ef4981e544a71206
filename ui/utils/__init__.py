"""ui.utils

Formatting helpers shared by the pages and the CSV export.
"""

from .format import format_currency, format_money, format_months

__all__ = ["format_currency", "format_money", "format_months"]
