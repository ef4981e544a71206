"""ui.app.layout

Page shell for the site: header, `<main>`, footer.
"""

from __future__ import annotations

from datetime import date
from typing import Callable

from fasthtml.common import A, Div, Footer as FooterEl, H3, Li, Main, P, Title, Ul

from ui.app.navbar import STUDENT_AID_URL, Header, same_path

SITE_NAME = "FAFSA Application Assistant"

# column title -> [(label, href, internal)]
FOOTER_COLUMNS: dict[str, list[tuple[str, str, bool]]] = {
    "Apply for Aid": [
        ("FAFSA Form", f"{STUDENT_AID_URL}/h/apply-for-aid/fafsa", False),
        ("FAFSA Deadlines", f"{STUDENT_AID_URL}/apply-for-aid/fafsa/fafsa-deadlines", False),
    ],
    "Understand Aid": [
        ("Types of Aid", f"{STUDENT_AID_URL}/understand-aid/types", False),
        ("Grants", f"{STUDENT_AID_URL}/understand-aid/types/grants", False),
        ("Loans", f"{STUDENT_AID_URL}/understand-aid/types/loans", False),
    ],
    "Manage Loans": [
        ("Loan Simulator", "/manage-loans/loan-simulator", True),
        ("Repayment", f"{STUDENT_AID_URL}/manage-loans/repayment", False),
        ("Forgiveness", f"{STUDENT_AID_URL}/manage-loans/forgiveness-cancellation", False),
    ],
    "Resources": [
        ("Home", "/", True),
        ("Help Center", f"{STUDENT_AID_URL}/help-center", False),
    ],
}


def _footer_link(label: str, href: str, internal: bool, url: Callable[[str], str]):
    attrs = {} if internal else {"target": "_blank", "rel": "noopener noreferrer"}
    return Li(
        A(
            label,
            href=url(href) if internal else href,
            cls="text-gray-300 hover:text-white text-sm transition-colors",
            **attrs,
        )
    )


def Footer(*, url: Callable[[str], str] = same_path, year: int | None = None):
    columns = [
        Div(
            H3(title, cls="text-sm font-bold text-white uppercase tracking-wide mb-4"),
            Ul(*[_footer_link(*link, url=url) for link in links], cls="space-y-2"),
        )
        for title, links in FOOTER_COLUMNS.items()
    ]

    return FooterEl(
        Div(
            Div(*columns, cls="grid grid-cols-2 md:grid-cols-4 gap-8"),
            cls="max-w-7xl mx-auto px-4 py-10",
        ),
        Div(
            P(
                f"© {year or date.today().year} {SITE_NAME}. Not affiliated with the U.S. Department of Education.",
                cls="text-xs text-gray-400",
            ),
            cls="max-w-7xl mx-auto px-4 py-6 border-t border-gray-700",
        ),
        cls="bg-gray-900 text-white",
        data_slot="site-footer",
    )


def PageShell(title: str, *content, url: Callable[[str], str] = same_path, active: str | None = None):
    """Full page: `<title>` plus header, main content and footer."""
    return (
        Title(f"{title} | {SITE_NAME}" if title != SITE_NAME else title),
        Div(
            Header(url=url, active=active),
            Main(*content, id="content", cls="flex-1"),
            Footer(url=url),
            cls="min-h-screen flex flex-col bg-gray-50",
            data_slot="page-shell",
        ),
    )


__all__ = ["Footer", "PageShell", "FOOTER_COLUMNS", "SITE_NAME"]
