from __future__ import annotations

import pytest
from fasthtml.common import to_xml

from ui.components.alert import ALERT_ICONS, Alert
from ui.variants import VariantError


@pytest.mark.parametrize(
    "variant,surface",
    [
        ("info", "bg-primary-50"),
        ("success", "bg-primary-50"),
        ("warning", "bg-warning-50"),
        ("error", "bg-error-50"),
    ],
)
def test_variant_selects_surface_and_icon(variant: str, surface: str) -> None:
    html = to_xml(Alert("Body", variant=variant))
    icon, color = ALERT_ICONS[variant]

    assert surface in html
    assert f'data-icon="{icon}"' in html
    assert color in html
    assert 'role="alert"' in html
    assert f'data-variant="{variant}"' in html


def test_title_and_body() -> None:
    html = to_xml(Alert("Estimates only.", title="Disclaimer", variant="warning"))

    assert "<h4" in html
    assert "Disclaimer" in html
    assert "Estimates only." in html


def test_icon_can_be_hidden() -> None:
    html = to_xml(Alert("No icon", icon=False))

    assert "<svg" not in html
    assert "No icon" in html


def test_unknown_variant_raises() -> None:
    with pytest.raises(VariantError):
        Alert("x", variant="critical")
