from __future__ import annotations

import itertools
import re

import pytest
from fasthtml.common import to_xml

from ui.components.button import Button, LinkButton, button_classes, button_variants
from ui.variants import VariantError


VARIANTS = button_variants.options("variant")
SIZES = button_variants.options("size")
DISABLED_ATTR = re.compile(r"\sdisabled(\s|=|$)")


@pytest.mark.parametrize(
    "variant,size,full_width",
    list(itertools.product(VARIANTS, SIZES, (True, False))),
)
def test_every_combination_keeps_its_fragments(variant: str, size: str, full_width: bool) -> None:
    classes = set(button_classes(variant, size, full_width).split())

    assert set(button_variants.variants["variant"][variant].split()) <= classes
    assert set(button_variants.variants["size"][size].split()) <= classes
    assert ("w-full" in classes) is full_width
    assert "inline-flex" in classes


def test_defaults_are_primary_md() -> None:
    assert button_classes() == button_classes("primary", "md", False)


def test_danger_large_button() -> None:
    html = to_xml(Button("Delete", variant="danger", size="lg"))

    assert html.startswith("<button")
    assert "Delete" in html
    assert 'data-variant="danger"' in html
    assert 'data-size="lg"' in html
    assert "bg-error text-white hover:bg-error-dark focus:ring-error h-12 px-6 text-lg" in html
    assert not DISABLED_ATTR.search(html.split(">", 1)[0])


def test_caller_cls_overrides_size() -> None:
    classes = button_classes("primary", "md", cls="h-20").split()

    assert "h-20" in classes
    assert "h-11" not in classes


def test_loading_button_is_busy_and_disabled() -> None:
    html = to_xml(Button("Saving", loading=True))

    assert 'aria-busy="true"' in html
    assert "loading loading-spinner loading-xs" in html
    assert DISABLED_ATTR.search(html.split(">", 1)[0])


def test_link_button_renders_anchor_with_button_classes() -> None:
    html = to_xml(LinkButton("Start", href="/start", variant="accent", size="lg"))

    assert html.startswith("<a")
    assert 'href="/start"' in html
    assert "bg-accent-cool" in html
    assert 'data-slot="link-button"' in html
    assert "<button" not in html


def test_disabled_link_button_leaves_tab_order() -> None:
    html = to_xml(LinkButton("Start", href="/start", disabled=True))

    assert 'aria-disabled="true"' in html
    assert 'tabindex="-1"' in html
    assert "pointer-events-none" in html


def test_unknown_variant_raises() -> None:
    with pytest.raises(VariantError):
        button_classes("huge")
    with pytest.raises(VariantError):
        Button("x", size="xxl")
