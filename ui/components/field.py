"""ui.components.field

Label / error / helper-text scaffolding shared by every form control.

Each control (Input, Select, Textarea, Checkbox, Radio) renders the same way:

    <div data-slot="field" data-state="neutral|error">
      <label for="{id}">Label</label>       (optional, CSS required marker)
      <control id="{id}" aria-describedby="{id}-error|{id}-helper" ...>
      <p id="{id}-error" role="alert">icon message</p>   (when error)
      <p id="{id}-helper">helper</p>                     (when no error)
    </div>

Key ideas:
- `data-slot` / `data-state` attributes for styling, testing and debugging.
- `error` and `helper_text` never render together; `error` wins.
- `required` only adds a CSS marker to the label. Controls do not validate.
"""

from __future__ import annotations

from typing import Literal, Optional

from fasthtml.common import *

from ..core import cn
from ..icons import Icon
from ..variants import Variants


FieldState = Literal["neutral", "error"]

REQUIRED_MARKER = "after:content-['_*'] after:text-secondary-dark"
ERROR_TEXT = "text-secondary-dark"

control_variants = Variants(
    base="w-full border-2 px-3 py-2 text-base rounded-sm bg-white transition-colors",
    variants={
        "state": {
            "neutral": "border-gray-400 focus:border-primary focus:ring-2 focus:ring-primary/20",
            "error": "border-secondary-dark bg-red-50 focus:border-secondary-dark focus:ring-2 focus:ring-secondary-dark/20",
        },
    },
    defaults={"state": "neutral"},
)


def field_state(error: Optional[str]) -> FieldState:
    return "error" if error else "neutral"


def control_id(id: str | None, name: str | None) -> str | None:
    """The id a control renders with: the caller's, else its `name`."""
    return id or name


def described_by(id: str | None, error: Optional[str], helper_text: Optional[str]) -> dict:
    """ARIA attributes tying a control to its error/helper line."""
    attrs: dict = {}
    if error:
        attrs["aria_invalid"] = "true"
    if id and error:
        attrs["aria_describedby"] = f"{id}-error"
    elif id and helper_text:
        attrs["aria_describedby"] = f"{id}-helper"
    return attrs


def FieldLabel(*c, fr: str | None = None, required: bool = False, cls: str = "", **kw):
    return Label(
        *c,
        fr=fr,
        cls=cn("block text-gray-900 font-bold mb-1", REQUIRED_MARKER if required else "", cls),
        data_slot="field-label",
        **kw,
    )


def FieldError(message: str, *, id: str | None = None, cls: str = "", **kw):
    return P(
        Icon("alert-triangle", "w-4 h-4 flex-shrink-0"),
        message,
        id=id,
        role="alert",
        cls=cn(f"mt-1.5 text-sm {ERROR_TEXT} font-semibold flex items-center gap-1.5", cls),
        data_slot="field-error",
        **kw,
    )


def FieldHelper(text: str, *, id: str | None = None, cls: str = "", **kw):
    return P(
        text,
        id=id,
        cls=cn("mt-1.5 text-sm text-gray-600", cls),
        data_slot="field-helper",
        **kw,
    )


def FieldMessage(id: str | None, error: Optional[str], helper_text: Optional[str]):
    """Error line if `error`, else helper line if `helper_text`, else None."""
    if error:
        return FieldError(error, id=f"{id}-error" if id else None)
    if helper_text:
        return FieldHelper(helper_text, id=f"{id}-helper" if id else None)
    return None


def Field(
    control,
    *,
    id: str | None = None,
    label: Optional[str] = None,
    error: Optional[str] = None,
    helper_text: Optional[str] = None,
    required: bool = False,
    cls: str = "",
    **kw,
):
    """Wrap a control with its label and message line.

    Usage:
        Field(
            Textarea(...),
            id="notes",
            label="Notes",
            helper_text="Optional",
        )
    """

    return Div(
        FieldLabel(label, fr=id, required=required) if label else None,
        control,
        FieldMessage(id, error, helper_text),
        cls=cn("w-full", cls),
        data_slot="field",
        data_state=field_state(error),
        **kw,
    )


__all__ = [
    "Field",
    "FieldError",
    "FieldHelper",
    "FieldLabel",
    "FieldMessage",
    "FieldState",
    "control_id",
    "control_variants",
    "described_by",
    "field_state",
]
