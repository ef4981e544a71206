"""ui.components.checkbox

Checkbox and radio controls with label + description.

Both wrap the DaisyUI primitives (small, primary-coloured) and lay out the
label/description to the right of the box. The error/helper contract is the
same as for text controls (see `ui.components.field`); in the error state the
box switches to the DaisyUI error colour.
"""

from __future__ import annotations

from typing import Optional

from fasthtml.common import Div, Label, P

from ..core import cn
from ..daisy import Checkbox as DaisyCheckbox, Radio as DaisyRadio
from .field import REQUIRED_MARKER, FieldMessage, control_id, described_by, field_state


def _choice(
    primitive,
    *,
    id: str | None,
    label: Optional[str],
    description: Optional[str],
    error: Optional[str],
    helper_text: Optional[str],
    required: bool,
    cls: str,
    slot: str,
    **kw,
):
    box = primitive(
        id=id,
        cls=cn("-sm", "-error" if error else "-primary", "mt-0.5 cursor-pointer", cls),
        **described_by(id, error, helper_text),
        **kw,
    )

    text = None
    if label or description:
        text = Div(
            Label(
                label,
                fr=id,
                cls=cn("text-sm font-medium text-primary-darker cursor-pointer", REQUIRED_MARKER if required else ""),
                data_slot=f"{slot}-label",
            ) if label else None,
            P(description, cls="text-sm text-gray-600 mt-0.5", data_slot=f"{slot}-description") if description else None,
            cls="flex-1",
        )

    return Div(
        Div(box, text, cls="flex items-start gap-3"),
        FieldMessage(id, error, helper_text),
        data_slot="field",
        data_state=field_state(error),
    )


def Checkbox(
    *,
    name: str | None = None,
    id: str | None = None,
    label: Optional[str] = None,
    description: Optional[str] = None,
    checked: bool = False,
    value: str = "true",
    error: Optional[str] = None,
    helper_text: Optional[str] = None,
    required: bool = False,
    cls: str = "",
    **kw,
):
    """Checkbox with optional label and description."""

    return _choice(
        DaisyCheckbox,
        id=control_id(id, name),
        name=name,
        value=value,
        checked=checked,
        label=label,
        description=description,
        error=error,
        helper_text=helper_text,
        required=required,
        cls=cls,
        slot="checkbox",
        **kw,
    )


def Radio(
    label: str,
    *,
    name: str | None = None,
    id: str | None = None,
    value: str | None = None,
    description: Optional[str] = None,
    checked: bool = False,
    error: Optional[str] = None,
    helper_text: Optional[str] = None,
    required: bool = False,
    cls: str = "",
    **kw,
):
    """Radio button with a required label.

    Radios in one group share `name`, so the id defaults to `{name}-{value}`.
    """

    if id is None and name and value is not None:
        id = f"{name}-{value}"

    return _choice(
        DaisyRadio,
        id=id,
        name=name,
        value=value,
        checked=checked,
        label=label,
        description=description,
        error=error,
        helper_text=helper_text,
        required=required,
        cls=cls,
        slot="radio",
        **kw,
    )


__all__ = ["Checkbox", "Radio"]
