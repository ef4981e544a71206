"""ui.components.textarea

Multi-line text control sharing the Input look, with a minimum height and
vertical resize.
"""

from __future__ import annotations

from typing import Optional

import fasthtml.components as fh

from ..core import cn
from .field import Field, control_id, control_variants, described_by, field_state


def Textarea(
    *c,
    name: str | None = None,
    id: str | None = None,
    placeholder: str | None = None,
    rows: int | None = None,
    label: Optional[str] = None,
    error: Optional[str] = None,
    helper_text: Optional[str] = None,
    required: bool = False,
    cls: str = "",
    **kw,
):
    id = control_id(id, name)

    return Field(
        fh.Textarea(
            *c,
            name=name,
            id=id,
            placeholder=placeholder,
            rows=rows,
            cls=control_variants(state=field_state(error), cls=cn("min-h-[120px] resize-y", cls)),
            data_slot="textarea",
            **described_by(id, error, helper_text),
            **kw,
        ),
        id=id,
        label=label,
        error=error,
        helper_text=helper_text,
        required=required,
    )


__all__ = ["Textarea"]
