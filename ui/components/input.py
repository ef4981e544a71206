"""ui.components.input

Text input and select controls.

Both controls share one look (`field.control_variants`):
- 2px border, square-ish corners, white surface
- primary-coloured border + ring on focus
- error state: red border, tinted background, red focus ring

Anything not listed in the signature (`type`, `min`, `step`, `disabled`,
`autocomplete`, `hx_*`, ...) is passed through to the native element.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional, Sequence, Union

from fasthtml.common import Div, Option
import fasthtml.components as fh

from ..core import cn
from ..icons import Icon
from .field import Field, control_id, control_variants, described_by, field_state


class SelectOption(NamedTuple):
    value: str
    label: str


OptionLike = Union[SelectOption, tuple]


def _adornment(content: Any, side: str):
    return Div(
        content,
        cls=f"absolute {side}-3 top-1/2 -translate-y-1/2 text-gray-400 pointer-events-none",
        data_slot=f"input-{side}-icon",
    )


def Input(
    *,
    name: str | None = None,
    id: str | None = None,
    type: str = "text",
    value: Any = None,
    placeholder: str | None = None,
    label: Optional[str] = None,
    error: Optional[str] = None,
    helper_text: Optional[str] = None,
    required: bool = False,
    left_icon: Any = None,
    right_icon: Any = None,
    cls: str = "",
    **kw,
):
    """Text input with label, error and helper text.

    Args:
        label:       Label text rendered above the input.
        error:       Error message; switches the input to its error state.
        helper_text: Hint shown below the input when there is no error.
        required:    Adds a CSS required marker to the label (no validation).
        left_icon / right_icon: Adornments inside the input (e.g. "$", "%").
        cls:         Extra classes for the `<input>`; override variant classes.
    """

    id = control_id(id, name)

    control = fh.Input(
        type=type,
        name=name,
        id=id,
        value=value,
        placeholder=placeholder,
        cls=control_variants(
            state=field_state(error),
            cls=cn("pl-10" if left_icon else "", "pr-10" if right_icon else "", cls),
        ),
        data_slot="input",
        **described_by(id, error, helper_text),
        **kw,
    )

    return Field(
        Div(
            _adornment(left_icon, "left") if left_icon else None,
            control,
            _adornment(right_icon, "right") if right_icon else None,
            cls="relative",
        ),
        id=id,
        label=label,
        error=error,
        helper_text=helper_text,
        required=required,
    )


def Select(
    *,
    options: Sequence[OptionLike] = (),
    name: str | None = None,
    id: str | None = None,
    value: Any = None,
    placeholder: str | None = None,
    label: Optional[str] = None,
    error: Optional[str] = None,
    helper_text: Optional[str] = None,
    required: bool = False,
    cls: str = "",
    **kw,
):
    """Native select with label, error, helper text and a chevron.

    `options` render in the given order. A `placeholder` renders as a
    disabled first option with an empty value, selected while `value` is
    empty.
    """

    id = control_id(id, name)
    opts = [o if isinstance(o, SelectOption) else SelectOption(*o) for o in options]
    selected = None if value is None else str(value)

    children = []
    if placeholder:
        children.append(Option(placeholder, value="", disabled=True, selected=not selected))
    children.extend(
        Option(o.label, value=o.value, selected=str(o.value) == selected) for o in opts
    )

    control = fh.Select(
        *children,
        name=name,
        id=id,
        cls=control_variants(state=field_state(error), cls=cn("appearance-none pr-10", cls)),
        data_slot="select",
        **described_by(id, error, helper_text),
        **kw,
    )

    return Field(
        Div(
            control,
            Icon("chevron-down", "absolute right-3 top-1/2 -translate-y-1/2 w-5 h-5 text-gray-500 pointer-events-none"),
            cls="relative",
        ),
        id=id,
        label=label,
        error=error,
        helper_text=helper_text,
        required=required,
    )


__all__ = ["Input", "Select", "SelectOption"]
