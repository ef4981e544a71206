"""ui.components

Presentational components for the FAFSA Assistant, built on Tailwind utilities
and a few DaisyUI primitives.

Import from here if you want building blocks:

    from ui.components import Button, Input, Alert

Most code uses the top-level re-exports:

    from ui import Button, Input, Alert
"""

from .button import Button, LinkButton, ButtonVariant, ButtonSize, button_classes, button_variants
from .field import Field, FieldError, FieldHelper, FieldLabel, FieldState, control_variants
from .input import Input, Select, SelectOption
from .textarea import Textarea
from .checkbox import Checkbox, Radio
from .alert import Alert, AlertVariant, alert_variants
from .tooltip import Tooltip, HelpTooltip, TooltipPosition, TOOLTIP_PLACEMENTS
from .card import FeatureCard, FeatureColor, FeatureIcon
from .stat import StatsCard

__all__ = [
    # Buttons
    "Button",
    "LinkButton",
    "ButtonVariant",
    "ButtonSize",
    "button_classes",
    "button_variants",
    # Forms
    "Field",
    "FieldError",
    "FieldHelper",
    "FieldLabel",
    "FieldState",
    "control_variants",
    "Input",
    "Select",
    "SelectOption",
    "Textarea",
    "Checkbox",
    "Radio",
    # Feedback
    "Alert",
    "AlertVariant",
    "alert_variants",
    "Tooltip",
    "HelpTooltip",
    "TooltipPosition",
    "TOOLTIP_PLACEMENTS",
    # Display
    "FeatureCard",
    "FeatureColor",
    "FeatureIcon",
    "StatsCard",
]
