from __future__ import annotations

from typing import Callable

from fasthtml.common import Div, H1, H2, P, Section, Span

from ui.app.navbar import STUDENT_AID_URL, same_path
from ui.components import FeatureCard, LinkButton, StatsCard
from ui.icons import Icon


STATS = [
    ("dollar-sign", "$7,395", "Maximum Pell Grant (2025-26)", None),
    ("graduation-cap", "3 types", "Grants, work-study and loans", None),
    ("clock", "~30 min", "To complete the FAFSA with documents ready", None),
    ("check-circle", "100%", "Free to apply", None),
]

FEATURES = [
    ("shield-check", "Secure and private", "Nothing you enter is stored. Estimates are computed per request and kept nowhere.", "primary"),
    ("lightbulb", "Plain-language guidance", "Every question explained with examples, so you know what each answer means.", "warning"),
    ("calculator", "Loan simulator", "Compare Standard, Extended and income-driven plans side by side.", "success"),
    ("file-text", "Document checklist", "Know which tax returns and statements to gather before you start.", "secondary"),
    ("school", "School codes", "Send your results to up to 20 schools with their federal school codes.", "primary"),
    ("headphones", "Help when you need it", "Links to official StudentAid.gov help for anything we do not cover.", "success"),
]


def _hero(url: Callable[[str], str]):
    return Section(
        Div(
            Div(
                Span(cls="w-2 h-2 bg-accent-cool rounded-full animate-pulse"),
                Span("2026-27 FAFSA now available", cls="text-accent-cool font-semibold text-sm"),
                cls="inline-flex items-center gap-2 bg-accent-cool/20 border border-accent-cool/40 rounded-full px-4 py-1.5 mb-6",
            ),
            H1(
                "Free Application for Federal Student Aid",
                Span("(FAFSA®)", cls="block text-accent-cool mt-2"),
                cls="text-4xl sm:text-5xl font-bold mb-6 leading-tight text-white",
            ),
            P(
                "Complete your FAFSA to unlock grants, work-study and loans for college or career school, "
                "then plan how you will repay what you borrow.",
                cls="text-xl text-gray-300 mb-8 leading-relaxed max-w-3xl",
            ),
            Div(
                LinkButton(
                    "Start FAFSA Now",
                    Icon("arrow-right", "w-5 h-5"),
                    href=f"{STUDENT_AID_URL}/h/apply-for-aid/fafsa",
                    size="xl",
                    target="_blank",
                    rel="noopener noreferrer",
                ),
                LinkButton(
                    "Try the Loan Simulator",
                    href=url("/manage-loans/loan-simulator"),
                    variant="outline",
                    size="xl",
                ),
                cls="flex flex-col sm:flex-row gap-4",
            ),
            cls="max-w-7xl mx-auto px-4 py-16 lg:py-24",
        ),
        cls="bg-primary-darker",
        data_slot="hero",
    )


def HomePage(*, url: Callable[[str], str] = same_path):
    """Landing page content (without the page shell)."""

    stats = Section(
        Div(
            *[StatsCard(icon, value, label, trend=trend) for icon, value, label, trend in STATS],
            cls="max-w-7xl mx-auto px-4 grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-4 gap-6",
        ),
        cls="py-12",
        data_slot="home-stats",
    )

    features = Section(
        Div(
            Div(
                H2("Everything you need to apply and repay", cls="text-3xl font-bold text-primary-darker mb-4"),
                P(
                    "Tools and guidance that follow the official federal student aid process.",
                    cls="text-lg text-gray-600 max-w-3xl mx-auto",
                ),
                cls="text-center mb-12",
            ),
            Div(
                *[FeatureCard(icon, title, desc, color=color) for icon, title, desc, color in FEATURES],
                cls="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-8",
            ),
            cls="max-w-7xl mx-auto px-4",
        ),
        cls="py-16 bg-white",
        data_slot="home-features",
    )

    return Div(_hero(url), stats, features, data_slot="home-page")
