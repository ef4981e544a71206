"""ui.variants

Variant -> class-name resolution for components.

A `Variants` schema declares a base class string, a set of axes
(`variant`, `size`, `full_width`, ...) mapping each allowed value to a class
fragment, and a default per axis. Calling the schema picks exactly one value
per axis and returns one class string:

    button_variants = Variants(
        base="inline-flex items-center",
        variants={
            "variant": {"primary": "bg-primary text-white", "ghost": "text-primary"},
            "size": {"sm": "h-9 px-4", "md": "h-11 px-5"},
        },
        defaults={"variant": "primary", "size": "md"},
    )

    button_variants(size="sm", cls="mt-2")
    # -> "inline-flex items-center bg-primary text-white h-9 px-4 mt-2"

Axis values are meant to be typed with `typing.Literal` aliases (see
`ui.components.button.ButtonVariant`), so a type checker rejects an
out-of-range value. At runtime the same mistake raises `VariantError`
instead of silently dropping the fragment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping

from ui.core import cn


class VariantError(ValueError):
    """Raised for an unknown axis or a value outside an axis' allowed set."""


@dataclass(frozen=True)
class Variants:
    base: str
    variants: Mapping[str, Mapping[Hashable, str]]
    defaults: Mapping[str, Hashable] = field(default_factory=dict)

    def __post_init__(self):
        for axis, options in self.variants.items():
            if axis not in self.defaults:
                raise VariantError(f"axis {axis!r} has no default")
            if self.defaults[axis] not in options:
                raise VariantError(
                    f"default {self.defaults[axis]!r} for axis {axis!r} is not one of {tuple(options)}"
                )
        unknown = set(self.defaults) - set(self.variants)
        if unknown:
            raise VariantError(f"defaults given for unknown axes: {sorted(unknown)}")

    def options(self, axis: str) -> tuple:
        """Allowed values of `axis`, in declaration order."""
        if axis not in self.variants:
            raise VariantError(f"unknown axis {axis!r}; expected one of {tuple(self.variants)}")
        return tuple(self.variants[axis])

    def selection(self, **selected: Any) -> dict[str, Hashable]:
        """Resolve the active value of every axis (defaults fill `None`)."""
        unknown = set(selected) - set(self.variants)
        if unknown:
            raise VariantError(f"unknown axes {sorted(unknown)}; expected one of {tuple(self.variants)}")

        active: dict[str, Hashable] = {}
        for axis, options in self.variants.items():
            value = selected.get(axis)
            if value is None:
                value = self.defaults[axis]
            if value not in options:
                raise VariantError(f"{value!r} is not a valid {axis!r}; expected one of {tuple(options)}")
            active[axis] = value
        return active

    def __call__(self, cls: str = "", **selected: Any) -> str:
        active = self.selection(**selected)
        fragments = [self.variants[axis][value] for axis, value in active.items()]
        return cn(self.base, *fragments, cls)
