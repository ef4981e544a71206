"""ui

FastHTML + DaisyUI UI kit for the FAFSA Application Assistant.

Components follow the same conventions throughout: a `Variants` schema per
styled axis (`variant`, `size`, ...), caller `cls` merged last with `cn`, and
`data-slot` / `data-state` attributes on every root element.

Suggested usage:

    from ui import *

Structure:
- `ui.core`: class merging, headers, `daisy_app`
- `ui.variants`: variant -> class resolution
- `ui.components`: building blocks (Button, Input, Alert, Tooltip, ...)
- `ui.app`: site compositions (Header, PageShell, HomePage, LoanSimulatorPage)
- `ui.daisy`: low-level DaisyUI primitives (escape hatch)
"""

from .core import (
    DEFAULT_THEME,
    daisy_app,
    daisy_hdrs,
    theme_css,
    ui_hdrs,
    cn,
    cls_join,
)
from .variants import Variants, VariantError
from .icons import Icon, ICON_NAMES

# Components
from .components import (
    Button,
    LinkButton,
    ButtonVariant,
    ButtonSize,
    button_classes,
    Field,
    Input,
    Select,
    SelectOption,
    Textarea,
    Checkbox,
    Radio,
    Alert,
    Tooltip,
    HelpTooltip,
    FeatureCard,
    StatsCard,
)

# Escape hatch: low-level primitives (not star-exported by default)
from . import daisy

__version__ = "0.1.0"

__all__ = [
    # Core
    "DEFAULT_THEME",
    "daisy_app",
    "daisy_hdrs",
    "ui_hdrs",
    "theme_css",
    "cn",
    "cls_join",
    "Variants",
    "VariantError",
    "Icon",
    "ICON_NAMES",

    # Components
    "Button",
    "LinkButton",
    "ButtonVariant",
    "ButtonSize",
    "button_classes",
    "Field",
    "Input",
    "Select",
    "SelectOption",
    "Textarea",
    "Checkbox",
    "Radio",
    "Alert",
    "Tooltip",
    "HelpTooltip",
    "FeatureCard",
    "StatsCard",

    # Escape hatch module
    "daisy",
]
