"""ui.components.button

Button component: `variant` x `size` x `full_width`.

`button_classes()` is the single source of button styling. `Button` renders a
native `<button>` with it; anything else that must look like a button (most
often a navigation link) calls `button_classes()` directly or uses
`LinkButton`, so a button is never nested inside an anchor.
"""

from __future__ import annotations

from typing import Literal, Optional

from fasthtml.common import A
import fasthtml.components as fh

from ui.daisy import Loading
from ui.variants import Variants


ButtonVariant = Literal[
    "primary",
    "secondary",
    "ghost",
    "danger",
    "success",
    "accent",
    "outline",  # light outline for dark backgrounds
]

ButtonSize = Literal["sm", "md", "lg", "xl"]


button_variants = Variants(
    base=(
        "inline-flex items-center justify-center gap-2 rounded font-bold transition-colors duration-200 "
        "focus:outline-none focus:ring-2 focus:ring-offset-2 disabled:opacity-50 disabled:cursor-not-allowed"
    ),
    variants={
        "variant": {
            "primary": "bg-primary text-white hover:bg-primary-dark focus:ring-primary shadow-sm",
            "secondary": "bg-transparent text-primary border-2 border-primary hover:bg-primary-lighter focus:ring-primary",
            "ghost": "text-primary hover:bg-primary-lighter focus:ring-primary",
            "danger": "bg-error text-white hover:bg-error-dark focus:ring-error",
            "success": "bg-primary text-white hover:bg-primary-dark focus:ring-primary",
            "accent": "bg-accent-cool text-primary-darker hover:bg-accent-cool-light focus:ring-accent-cool",
            "outline": "bg-transparent text-white border-2 border-white hover:bg-white hover:text-primary-darker focus:ring-white",
        },
        "size": {
            "sm": "h-9 px-4 text-sm",
            "md": "h-11 px-5 text-base",
            "lg": "h-12 px-6 text-lg",
            "xl": "h-14 px-8 text-lg",
        },
        "full_width": {
            True: "w-full",
            False: "",
        },
    },
    defaults={"variant": "primary", "size": "md", "full_width": False},
)


def button_classes(
    variant: Optional[ButtonVariant] = None,
    size: Optional[ButtonSize] = None,
    full_width: Optional[bool] = None,
    cls: str = "",
) -> str:
    """Button styling as a class string, for any element.

        A("Start", href="/start", cls=button_classes("accent", "lg"))
    """

    return button_variants(variant=variant, size=size, full_width=full_width, cls=cls)


def _spinner():
    # Keep the spinner small and aligned.
    return Loading(cls="-spinner -xs", aria_hidden="true")


def Button(
    *c,
    variant: ButtonVariant = "primary",
    size: ButtonSize = "md",
    full_width: bool = False,
    loading: bool = False,
    disabled: bool = False,
    cls: str = "",
    **kw,
):
    """Native button.

    `loading` disables the button, marks it busy and prepends a spinner.
    """

    attrs = {
        "data_variant": variant,
        "data_size": size,
        "data_slot": "button",
        "disabled": disabled or loading,
    }

    content = c
    if loading:
        content = (_spinner(), *c)
        attrs["aria_busy"] = "true"

    return fh.Button(*content, cls=button_classes(variant, size, full_width, cls), **attrs, **kw)


def LinkButton(
    *c,
    href: str | None = None,
    variant: ButtonVariant = "primary",
    size: ButtonSize = "md",
    full_width: bool = False,
    disabled: bool = False,
    cls: str = "",
    **kw,
):
    """Anchor styled as a button."""

    attrs = {
        "data_variant": variant,
        "data_size": size,
        "data_slot": "link-button",
        "href": href,
    }

    extra = ""
    if disabled:
        extra = "opacity-50 pointer-events-none"
        attrs["aria_disabled"] = "true"
        attrs["tabindex"] = "-1"

    return A(*c, cls=button_classes(variant, size, full_width, f"{extra} {cls}".strip()), **attrs, **kw)


__all__ = ["Button", "LinkButton", "ButtonVariant", "ButtonSize", "button_classes", "button_variants"]
