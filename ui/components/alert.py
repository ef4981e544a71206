"""ui.components.alert

Alert component for feedback messages, built on a DaisyUI `card` surface.

Each variant selects a fixed (surface, icon, icon colour) tuple:
- info    -> light navy surface, info icon
- success -> light navy surface, check icon (FAFSA does not use green)
- warning -> gold surface, alert-circle icon
- error   -> red surface, x-circle icon
"""

from __future__ import annotations

from typing import Literal, Optional

from fasthtml.common import Div, H4

from ui.core import cn
from ui.daisy import CardRoot
from ui.icons import Icon
from ui.variants import Variants


AlertVariant = Literal["info", "success", "warning", "error"]


alert_variants = Variants(
    base="border p-4",
    variants={
        "variant": {
            "info": "bg-primary-50 border-primary-200 text-primary-900",
            "success": "bg-primary-50 border-primary-light text-primary-darker",
            "warning": "bg-warning-50 border-warning-200 text-warning-900",
            "error": "bg-error-50 border-error-200 text-error-900",
        },
    },
    defaults={"variant": "info"},
)

ALERT_ICONS: dict[str, tuple[str, str]] = {
    "info": ("info", "text-primary-600"),
    "success": ("check-circle", "text-primary"),
    "warning": ("alert-circle", "text-warning-600"),
    "error": ("x-circle", "text-error-600"),
}


def Alert(
    *c,
    variant: AlertVariant = "info",
    title: Optional[str] = None,
    icon: bool = True,
    cls: str = "",
    **kw,
):
    """Alert with optional title and icon; children render as body text."""

    icon_name, icon_color = ALERT_ICONS[alert_variants.selection(variant=variant)["variant"]]

    return CardRoot(
        Div(
            Icon(icon_name, cn("w-5 h-5 flex-shrink-0 mt-0.5", icon_color)) if icon else None,
            Div(
                H4(title, cls="font-semibold mb-1") if title else None,
                Div(*c, cls="text-sm"),
                cls="flex-1",
            ),
            cls="flex gap-3",
        ),
        cls=alert_variants(variant=variant, cls=cls),
        data_slot="alert",
        data_variant=variant,
        role="alert",
        **kw,
    )


__all__ = ["Alert", "AlertVariant", "alert_variants"]
