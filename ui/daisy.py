"""ui.daisy

The DaisyUI primitives the FAFSA kit builds on. Everything else is plain
Tailwind utilities resolved through `ui.variants`.

- `CardRoot`: surface for `Alert` and `StatsCard`
- `Loading`: spinner inside a busy `Button`
- `Checkbox` / `Radio`: native inputs behind `ui.components.checkbox`

`cls='-sm -primary'` expands to `checkbox-sm checkbox-primary` (see
`ui.core.mk_compfn`). Page code should import `ui.components` instead.
"""

from __future__ import annotations

from .core import mk_compfn

mk_compfn("card", tag="Div", name="CardRoot", slot="card")
mk_compfn("loading", tag="Span", name="Loading", slot="loading")

# Form inputs; `type` is fixed, everything else passes through.
mk_compfn("checkbox", tag="Input", name="Checkbox", type="checkbox", slot="checkbox")
mk_compfn("radio", tag="Input", name="Radio", type="radio", slot="radio")


__all__ = ["CardRoot", "Loading", "Checkbox", "Radio"]
