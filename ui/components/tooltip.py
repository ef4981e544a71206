"""ui.components.tooltip

Tooltip with explicit open/closed state.

The wrapper owns an Alpine.js `open` flag that pointer *and* keyboard focus
drive (mouseenter/mouseleave, focusin/focusout, Escape closes), so the panel
is reachable without a mouse. The server renders the initial state
(`open=False` by default) as `data-state` and an inline `display: none`.

Positions: top (default), bottom, left, right. Each selects one placement set
for the panel and one for its arrow.
"""

from __future__ import annotations

import hashlib
from typing import Any, Literal

from fasthtml.common import Span, to_xml

from ui.core import cn
from ui.icons import Icon
from ui.variants import Variants


TooltipPosition = Literal["top", "bottom", "left", "right"]

# Anchor side + gap; pairwise disjoint across positions.
TOOLTIP_PLACEMENTS: dict[str, str] = {
    "top": "bottom-full mb-2",
    "bottom": "top-full mt-2",
    "left": "right-full mr-2",
    "right": "left-full ml-2",
}

_CENTERING = {
    "top": "left-1/2 -translate-x-1/2",
    "bottom": "left-1/2 -translate-x-1/2",
    "left": "top-1/2 -translate-y-1/2",
    "right": "top-1/2 -translate-y-1/2",
}

tooltip_variants = Variants(
    base=(
        "absolute z-[9999] px-3 py-2 text-sm font-medium text-white bg-gray-900 rounded-lg shadow-lg "
        "w-max max-w-xs whitespace-normal pointer-events-none"
    ),
    variants={"position": {p: f"{TOOLTIP_PLACEMENTS[p]} {_CENTERING[p]}" for p in TOOLTIP_PLACEMENTS}},
    defaults={"position": "top"},
)

tooltip_arrow_variants = Variants(
    base="absolute w-2 h-2 bg-gray-900 rotate-45",
    variants={
        "position": {
            "top": "bottom-[-4px] left-1/2 -translate-x-1/2",
            "bottom": "top-[-4px] left-1/2 -translate-x-1/2",
            "left": "right-[-4px] top-1/2 -translate-y-1/2",
            "right": "left-[-4px] top-1/2 -translate-y-1/2",
        },
    },
    defaults={"position": "top"},
)


# Pointer and keyboard focus both drive `open`.
_STATE_HANDLERS = {
    "x-on:mouseenter": "open = true",
    "x-on:mouseleave": "open = false",
    "x-on:focusin": "open = true",
    "x-on:focusout": "open = false",
    "x-on:keydown.escape": "open = false",
    "x-bind:data-state": "open ? 'open' : 'closed'",
}


def _content_id(*c) -> str:
    """Panel id derived from the markup, so a re-export renders identical pages."""
    return "tooltip-" + hashlib.sha256(to_xml(Span(*c)).encode("utf-8")).hexdigest()[:8]


def Tooltip(
    *trigger,
    content: Any,
    position: TooltipPosition = "top",
    open: bool = False,
    id: str | None = None,
    cls: str = "",
    **kw,
):
    """Trigger content plus a positioned panel.

    Args:
        content: Panel content (text or components).
        position: Panel side relative to the trigger.
        open: Initial state rendered by the server.
        id: Panel id, hashed from trigger and content if omitted. The trigger
            points at it with `aria-describedby`.
    """

    id = id or _content_id(*trigger, content)

    panel = Span(
        content,
        Span(cls=tooltip_arrow_variants(position=position), data_slot="tooltip-arrow"),
        id=id,
        role="tooltip",
        cls=tooltip_variants(position=position),
        style=None if open else "display: none;",
        data_slot="tooltip-content",
        x_show="open",
        **{"x-transition.opacity.duration.200ms": ""},
    )

    return Span(
        *trigger,
        panel,
        cls=cn("relative inline-block", cls),
        aria_describedby=id,
        data_slot="tooltip",
        data_position=position,
        data_state="open" if open else "closed",
        x_data=f"{{ open: {'true' if open else 'false'} }}",
        **_STATE_HANDLERS,
        **kw,
    )


def HelpTooltip(content: Any, *, position: TooltipPosition = "top", label: str = "More information", **kw):
    """Help icon that reveals `content` on hover or keyboard focus."""

    trigger = Span(
        Icon("help-circle", "w-4 h-4 text-gray-400 hover:text-primary-600 cursor-help transition-colors"),
        tabindex="0",
        role="button",
        aria_label=label,
        cls="inline-flex rounded-full focus:outline-none focus:ring-2 focus:ring-primary",
        data_slot="help-tooltip-trigger",
    )
    return Tooltip(trigger, content=content, position=position, **kw)


__all__ = [
    "Tooltip",
    "HelpTooltip",
    "TooltipPosition",
    "TOOLTIP_PLACEMENTS",
    "tooltip_variants",
    "tooltip_arrow_variants",
]
