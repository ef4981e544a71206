"""ui.app.navbar

Site header: the official-website banner and the navy navigation bar.

Internal links go through `url`, which maps an app path to its public URL
(base path and trailing slash under the GitHub Pages build).
"""

from __future__ import annotations

from typing import Callable

from fasthtml.common import *
import fasthtml.components as fh

from ui.core import cn


STUDENT_AID_URL = "https://studentaid.gov"

# (label, href, internal)
NAV_LINKS: list[tuple[str, str, bool]] = [
    ("Home", "/", True),
    ("Loan Simulator", "/manage-loans/loan-simulator", True),
    ("Apply for Aid", f"{STUDENT_AID_URL}/h/apply-for-aid/fafsa", False),
    ("Manage Loans", f"{STUDENT_AID_URL}/h/manage-loans", False),
]

_LINK_CLS = "px-4 py-2 text-white font-semibold hover:bg-primary-700 rounded transition-colors"


def same_path(path: str, page: bool = True) -> str:
    return path


def _nav_link(label: str, href: str, internal: bool, url: Callable[[str], str], active: str | None, cls: str):
    attrs = {} if internal else {"target": "_blank", "rel": "noopener noreferrer"}
    return A(
        label,
        href=url(href) if internal else href,
        cls=cn(cls, "bg-primary-700" if internal and href == active else ""),
        aria_current="page" if internal and href == active else None,
        data_slot="nav-link",
        **attrs,
    )


def GovBanner():
    return Div(
        Div(
            Span("An official website of the United States government", cls="text-xs text-gray-600"),
            cls="max-w-7xl mx-auto px-4 py-1 flex items-center gap-2",
        ),
        cls="bg-gray-50 border-b border-gray-200",
        data_slot="gov-banner",
    )


def Header(*, url: Callable[[str], str] = same_path, active: str | None = None):
    """Banner + navbar with a mobile menu toggled by Alpine.

    Args:
        url: App path -> public URL.
        active: App path of the current page, highlighted in the nav.
    """

    brand = A(
        Div(Span("FSA", cls="text-primary-800 font-bold text-lg"), cls="w-10 h-10 bg-white rounded flex items-center justify-center"),
        Div(
            Span("Federal Student Aid", cls="text-white font-bold text-lg leading-tight"),
            Span("FAFSA Application Assistant", cls="text-primary-200 text-xs"),
            cls="hidden sm:flex flex-col",
        ),
        href=url("/"),
        cls="flex items-center gap-3",
        data_slot="brand",
    )

    desktop = Div(
        *[_nav_link(*link, url=url, active=active, cls=_LINK_CLS) for link in NAV_LINKS],
        cls="hidden lg:flex items-center gap-1",
    )

    toggle = Button(
        Span("Menu", cls="sr-only"),
        NotStr(
            '<svg xmlns="http://www.w3.org/2000/svg" class="w-6 h-6" viewBox="0 0 24 24" fill="none" '
            'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
            '<line x1="4" x2="20" y1="6" y2="6"/><line x1="4" x2="20" y1="12" y2="12"/>'
            '<line x1="4" x2="20" y1="18" y2="18"/></svg>'
        ),
        type="button",
        cls="lg:hidden p-2 text-white hover:bg-primary-700 rounded transition-colors",
        aria_controls="mobile-menu",
        **{"x-on:click": "menu = !menu", "x-bind:aria-expanded": "menu"},
    )

    mobile = Div(
        *[_nav_link(*link, url=url, active=active, cls=f"block {_LINK_CLS}") for link in NAV_LINKS],
        id="mobile-menu",
        cls="lg:hidden pb-4 space-y-1",
        style="display: none;",
        x_show="menu",
    )

    return Div(
        GovBanner(),
        fh.Header(
            Nav(
                Div(brand, desktop, toggle, cls="flex items-center justify-between h-16"),
                mobile,
                cls="max-w-7xl mx-auto px-4",
            ),
            cls="bg-primary-800",
            x_data="{ menu: false }",
        ),
        data_slot="site-header",
    )


__all__ = ["Header", "GovBanner", "NAV_LINKS", "same_path"]
