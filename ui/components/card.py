"""ui.components.card

Feature card for marketing grids: an icon tile, a title and a short
description. The tile colour comes from a fixed palette and scales up while
the card is hovered (CSS `group-hover`, no client state).
"""

from __future__ import annotations

from typing import Literal

from fasthtml.common import *

from ui.core import cn
from ui.icons import Icon
from ui.variants import Variants


FeatureIcon = Literal["shield-check", "lightbulb", "calculator", "file-text", "school", "headphones"]
FeatureColor = Literal["primary", "secondary", "success", "warning"]

FEATURE_ICONS: tuple[str, ...] = ("shield-check", "lightbulb", "calculator", "file-text", "school", "headphones")


feature_tile_variants = Variants(
    base="w-14 h-14 rounded-xl flex items-center justify-center mb-6 group-hover:scale-110 transition-transform",
    variants={
        "color": {
            "primary": "bg-primary-100 text-primary-600",
            "secondary": "bg-secondary-100 text-secondary-600",
            "success": "bg-primary-lighter text-primary",
            "warning": "bg-warning-100 text-warning-600",
        },
    },
    defaults={"color": "primary"},
)


def FeatureCard(
    icon: FeatureIcon,
    title: str,
    description: str,
    *,
    color: FeatureColor = "primary",
    cls: str = "",
    **kw,
):
    if icon not in FEATURE_ICONS:
        raise ValueError(f"{icon!r} is not a feature icon; expected one of {FEATURE_ICONS}")

    return Div(
        Div(Icon(icon, "w-7 h-7"), cls=feature_tile_variants(color=color), data_slot="feature-icon"),
        H3(title, cls="text-xl font-semibold text-primary-darker mb-3"),
        P(description, cls="text-gray-600 leading-relaxed"),
        cls=cn("card-hover p-8 group", cls),
        data_slot="feature-card",
        data_color=color,
        **kw,
    )


__all__ = ["FeatureCard", "FeatureColor", "FeatureIcon", "FEATURE_ICONS", "feature_tile_variants"]
