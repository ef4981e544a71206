"""ui.components.stat

Stats card for headline numbers (home page figures, simulator summary).

A `trend` string is optional. Its first character decides the styling:
`+` is positive (navy, trending-up), `-` is negative (red, trending-down),
anything else renders as neutral grey text without an icon.
"""

from __future__ import annotations

from typing import Literal, Optional

from fasthtml.common import Div, FT, P, Span

from ..core import cn
from ..daisy import CardRoot
from ..icons import Icon


TrendDirection = Literal["up", "down", "neutral"]


def trend_direction(trend: Optional[str]) -> TrendDirection:
    if trend and trend.startswith("+"):
        return "up"
    if trend and trend.startswith("-"):
        return "down"
    return "neutral"


_TREND_STYLE = {
    "up": ("text-primary", "trending-up"),
    "down": ("text-error-600", "trending-down"),
    "neutral": ("text-gray-600", None),
}


def StatsCard(
    icon: str,
    value: str,
    label: str,
    *,
    trend: Optional[str] = None,
    cls: str = "",
    **kw,
) -> FT:
    """
    Stats card with an icon tile, a big value and a label.

    Args:
        icon: Icon name (see `ui.icons.ICON_NAMES`)
        value: Main value, already formatted (e.g. "$1,235")
        label: Caption under the value
        trend: Optional change text such as "+12%" or "-3 months"
        cls: Additional CSS classes
        **kw: Passed to the card root (useful for HTMX attrs)

    Example:
        StatsCard("dollar-sign", "$120B+", "Aid awarded each year", trend="+4%")
    """
    direction = trend_direction(trend)
    color, trend_icon = _TREND_STYLE[direction]

    trend_el = None
    if trend:
        trend_el = Span(
            Icon(trend_icon, "w-4 h-4") if trend_icon else None,
            trend,
            cls=cn("text-sm font-medium flex items-center gap-1", color),
            data_slot="stats-trend",
            data_trend=direction,
        )

    return CardRoot(
        Div(
            Div(Icon(icon, "w-6 h-6 text-primary-600"), cls="w-12 h-12 bg-primary-100 rounded-lg flex items-center justify-center"),
            trend_el,
            cls="flex items-start justify-between mb-4",
        ),
        Div(
            P(value, cls="text-3xl font-bold text-primary-darker"),
            P(label, cls="text-sm text-gray-600"),
            cls="space-y-1",
        ),
        cls=cn("p-6 bg-white border border-gray-200 hover:shadow-medium transition-shadow", cls),
        data_slot="stats-card",
        **kw,
    )


__all__ = ["StatsCard", "TrendDirection", "trend_direction"]
