"""ui.app.loan_simulator

Student loan repayment simulator page.

Left column: the input form (loan, income and plan selection). Right column:
either an empty state or the comparison (summary stats, one card per plan,
CSV export and a disclaimer). Validation messages from `fafsa.loans` are
passed to the controls as `error` and summarised in an error Alert.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence
from urllib.parse import urlencode

from fasthtml.common import *

from fafsa.loans import (
    DEFAULT_PLANS,
    FILING_STATUSES,
    MAX_FAMILY_SIZE,
    PLANS,
    RepaymentResult,
    SimulatorInputs,
    ValidationError,
    best_options,
    field_errors,
)
from ui.app.navbar import STUDENT_AID_URL, same_path
from ui.components import (
    Alert,
    Button,
    Checkbox,
    HelpTooltip,
    Input,
    LinkButton,
    Select,
    StatsCard,
    Tooltip,
)
from ui.core import cn
from ui.icons import Icon
from ui.utils.format import format_currency, format_months

SIMULATOR_PATH = "/manage-loans/loan-simulator"
EXPORT_PATH = f"{SIMULATOR_PATH}/export"

FAMILY_SIZES = [(str(n), str(n)) for n in range(1, MAX_FAMILY_SIZE + 1)]


def _num(x: float | int) -> str:
    """Form value without a trailing `.0`."""
    return str(int(x)) if float(x).is_integer() else str(x)


def simulator_query(inputs: SimulatorInputs, plans: Sequence[str]) -> str:
    """Query string that reproduces `inputs` + `plans` (for the CSV link)."""
    params = [
        ("total_balance", _num(inputs.total_balance)),
        ("weighted_interest_rate", _num(inputs.weighted_interest_rate)),
        ("annual_income", _num(inputs.annual_income)),
        ("family_size", str(inputs.family_size)),
        ("filing_status", inputs.filing_status),
        ("spouse_income", _num(inputs.spouse_income)),
    ]
    params.extend(("plans", p) for p in plans)
    return urlencode(params)


def _family_size_options(size: int):
    """Allowed sizes, plus a rejected one so the form re-renders what was submitted."""
    if 1 <= size <= MAX_FAMILY_SIZE:
        return FAMILY_SIZES
    return [*FAMILY_SIZES, (str(size), str(size))]


def _section_title(text: str, *extra):
    return H3(text, *extra, cls="font-semibold text-gray-900 mb-4 text-sm uppercase tracking-wide flex items-center gap-2")


def SimulatorForm(
    inputs: SimulatorInputs,
    *,
    errors: Mapping[str, str],
    plans: Sequence[str],
    url: Callable[[str], str] = same_path,
):
    married = inputs.filing_status == "married-joint"

    loan = Div(
        _section_title("Loan Details"),
        Div(
            Input(
                name="total_balance",
                type="number",
                min="0",
                step="any",
                label="Total Loan Balance",
                value=_num(inputs.total_balance),
                placeholder="35000",
                left_icon="$",
                required=True,
                error=errors.get("total_balance"),
            ),
            Input(
                name="weighted_interest_rate",
                type="number",
                step="0.1",
                label="Weighted Interest Rate",
                value=_num(inputs.weighted_interest_rate),
                placeholder="5.5",
                right_icon="%",
                required=True,
                error=errors.get("weighted_interest_rate"),
                helper_text="Average rate across all your loans",
            ),
            cls="space-y-4",
        ),
    )

    income = Div(
        _section_title(
            "Income Details",
            HelpTooltip(
                "Income-driven plans use your adjusted gross income (AGI) from your latest tax return.",
                id="agi-help",
                position="right",
                label="About income",
            ),
        ),
        Div(
            Input(
                name="annual_income",
                type="number",
                min="0",
                step="any",
                label="Annual Income (AGI)",
                value=_num(inputs.annual_income),
                placeholder="50000",
                left_icon="$",
                error=errors.get("annual_income"),
            ),
            Select(
                name="family_size",
                label="Family Size",
                options=_family_size_options(inputs.family_size),
                value=inputs.family_size,
                error=errors.get("family_size"),
            ),
            Select(
                name="filing_status",
                label="Tax Filing Status",
                options=list(FILING_STATUSES.items()),
                value=inputs.filing_status,
                x_model="filing",
            ),
            Div(
                Input(
                    name="spouse_income",
                    type="number",
                    min="0",
                    step="any",
                    label="Spouse's Annual Income",
                    value=_num(inputs.spouse_income),
                    placeholder="0",
                    left_icon="$",
                    error=errors.get("spouse_income"),
                ),
                style=None if married else "display: none;",
                data_slot="spouse-income",
                x_show="filing === 'married-joint'",
            ),
            cls="space-y-4",
        ),
    )

    plan_boxes = Fieldset(
        Legend("Plans to Compare", cls="font-semibold text-gray-900 mb-4 text-sm uppercase tracking-wide"),
        Div(
            *[
                Checkbox(
                    name="plans",
                    id=f"plan-{key}",
                    value=key,
                    label=name,
                    checked=key in plans,
                )
                for key, name in PLANS.items()
            ],
            cls="space-y-3",
        ),
        P("Leave all unchecked to compare every plan.", cls="text-xs text-gray-500 mt-2"),
    )

    return Form(
        H2(Icon("calculator", "w-5 h-5 text-primary"), "Your Information", cls="text-xl font-bold text-gray-900 mb-6 flex items-center gap-2"),
        Div(loan, income, plan_boxes, cls="space-y-6"),
        Div(
            Button(Icon("calculator", "w-5 h-5"), "Calculate Payments", type="submit", full_width=True, size="lg"),
            LinkButton(
                Icon("clock", "w-4 h-4"),
                "Reset",
                href=url(SIMULATOR_PATH),
                variant="ghost",
                size="sm",
                full_width=True,
            ),
            cls="mt-6 space-y-2",
        ),
        method="post",
        action=url(SIMULATOR_PATH),
        hx_post=url(SIMULATOR_PATH),
        hx_target="#loan-simulator",
        hx_swap="outerHTML",
        cls="bg-white rounded-xl p-6 border border-gray-200",
        data_slot="simulator-form",
        x_data=f"{{ filing: '{inputs.filing_status}' }}",
    )


def _badge(text: str, cls: str):
    return Span(text, cls=cn("px-2 py-0.5 text-xs font-medium rounded", cls), data_slot="badge")


def _figure(label: str, value: str):
    return Div(P(label, cls="text-sm text-gray-500"), P(value, cls="font-semibold text-gray-900"))


def PlanCard(result: RepaymentResult, *, lowest_payment: bool = False, lowest_total: bool = False):
    badges = []
    if lowest_payment:
        badges.append(_badge("Lowest Payment", "bg-primary-100 text-primary-900"))
    if lowest_total:
        badges.append(_badge("Lowest Total", "bg-accent-cool-lighter text-primary-darker"))
    if not result.is_eligible:
        badges.append(_badge("May Not Qualify", "bg-gray-100 text-gray-600"))

    forgiveness = format_currency(result.forgiveness) if result.forgiveness > 0 else "None"
    if result.forgiveness_year:
        forgiveness_label = Tooltip(
            "Forgiveness",
            content=f"Remaining balance forgiven after {result.forgiveness_year} years of qualifying payments.",
            id=f"{result.key}-forgiveness-tip",
            position="top",
            cls="text-sm text-gray-500 underline decoration-dotted",
            tabindex="0",
        )
        forgiveness_cell = Div(forgiveness_label, P(forgiveness, cls="font-semibold text-gray-900"))
    else:
        forgiveness_cell = _figure("Forgiveness", forgiveness)

    return Article(
        Div(
            Div(H4(result.plan_name, cls="text-lg font-bold text-gray-900"), *badges, cls="flex flex-wrap items-center gap-2"),
            P(f"{format_currency(result.monthly_payment)}/mo", cls="text-2xl font-bold text-primary"),
            cls="flex flex-wrap items-start justify-between gap-4 mb-4",
        ),
        Div(
            _figure("Total Paid", format_currency(result.total_paid)),
            _figure("Total Interest", format_currency(result.total_interest)),
            _figure("Payoff Time", format_months(result.payoff_months)),
            forgiveness_cell,
            cls="grid grid-cols-2 md:grid-cols-4 gap-4 mb-4",
        ),
        Div(*[Span(n, cls="px-2 py-1 bg-gray-100 text-gray-700 text-xs rounded") for n in result.notes], cls="flex flex-wrap gap-2"),
        cls=cn(
            "bg-white rounded-xl p-6 border border-gray-200",
            "opacity-60" if not result.is_eligible else "",
            "ring-2 ring-primary" if lowest_payment else "",
        ),
        data_slot="plan-card",
        data_plan=result.key,
    )


def SimulatorResults(
    results: Sequence[RepaymentResult],
    *,
    inputs: SimulatorInputs,
    plans: Sequence[str],
    url: Callable[[str], str] = same_path,
):
    best = best_options(results)
    summary = []
    if best["lowest_payment"]:
        r = best["lowest_payment"]
        summary.append(StatsCard("trending-down", format_currency(r.monthly_payment), f"Lowest monthly payment: {r.plan_name}"))
    if best["lowest_total"]:
        r = best["lowest_total"]
        summary.append(StatsCard("dollar-sign", format_currency(r.total_paid), f"Lowest total cost: {r.plan_name}"))
    if best["fastest_payoff"]:
        r = best["fastest_payoff"]
        summary.append(StatsCard("clock", format_months(r.payoff_months), f"Fastest payoff: {r.plan_name}"))

    cards = [
        PlanCard(
            r,
            lowest_payment=r is best["lowest_payment"],
            lowest_total=r is best["lowest_total"],
        )
        for r in results
    ]

    return Div(
        Div(*summary, cls="grid grid-cols-1 md:grid-cols-3 gap-4", data_slot="simulator-summary"),
        Div(
            H3("Plan Comparison", cls="text-lg font-bold text-gray-900"),
            LinkButton(
                Icon("download", "w-4 h-4"),
                "Export CSV",
                href=f"{url(EXPORT_PATH, page=False)}?{simulator_query(inputs, plans)}",
                variant="secondary",
                size="sm",
                download=True,
            ),
            cls="flex items-center justify-between",
        ),
        Div(*cards, cls="space-y-4"),
        Alert(
            "These are estimates based on the information you provided. Actual payments may vary based on your "
            "loan details, servicer calculations and program requirements. For personalized figures use the ",
            A("official Loan Simulator", href=f"{STUDENT_AID_URL}/loan-simulator", target="_blank", rel="noopener noreferrer", cls="underline"),
            ".",
            variant="warning",
            title="Disclaimer",
        ),
        cls="space-y-6",
        data_slot="simulator-results",
    )


def _empty_state():
    return Div(
        Icon("calculator", "w-16 h-16 text-gray-300 mx-auto mb-4"),
        H3("Enter Your Information", cls="text-xl font-semibold text-gray-600 mb-2"),
        P('Fill out the form and click "Calculate Payments" to compare repayment plans.', cls="text-gray-500"),
        cls="bg-white rounded-xl p-12 text-center border border-gray-200",
        data_slot="simulator-empty",
    )


def LoanSimulatorPage(
    inputs: SimulatorInputs | None = None,
    *,
    errors: Sequence[ValidationError] = (),
    results: Sequence[RepaymentResult] | None = None,
    plans: Sequence[str] = DEFAULT_PLANS,
    url: Callable[[str], str] = same_path,
):
    """Simulator content (without the page shell).

    `results=None` renders the empty state; validation `errors` render the
    error summary and per-field messages.
    """

    inputs = inputs or SimulatorInputs()
    by_field = field_errors(errors)

    summary = None
    if errors:
        summary = Alert(
            Ul(*[Li(e.message) for e in errors], cls="list-disc pl-5 space-y-1"),
            variant="error",
            title="Please correct the following",
            cls="mb-6",
            id="simulator-errors",
        )

    if results is not None and not errors:
        right = SimulatorResults(results, inputs=inputs, plans=plans, url=url)
    else:
        right = _empty_state()

    return Div(
        Section(
            Div(
                Div(
                    Div(Icon("calculator", "w-8 h-8 text-accent-cool"), cls="p-3 bg-white/10 rounded-xl"),
                    Span("Loan Simulator", cls="text-accent-cool font-semibold"),
                    cls="flex items-center gap-3 mb-4",
                ),
                H1("Student Loan Repayment Calculator", cls="text-4xl md:text-5xl font-bold mb-6"),
                P(
                    "Compare repayment plans side by side to find the best option for your situation.",
                    cls="text-xl text-primary-100 max-w-3xl",
                ),
                cls="max-w-7xl mx-auto px-4",
            ),
            cls="bg-primary-darker text-white py-12",
        ),
        Section(
            Div(
                summary,
                Div(
                    Div(SimulatorForm(inputs, errors=by_field, plans=plans, url=url), cls="lg:col-span-1"),
                    Div(right, cls="lg:col-span-2"),
                    cls="grid lg:grid-cols-3 gap-8",
                ),
                cls="max-w-7xl mx-auto px-4",
            ),
            cls="py-12",
        ),
        id="loan-simulator",
        data_slot="loan-simulator-page",
        data_state="error" if errors else ("results" if results is not None else "empty"),
    )


__all__ = [
    "LoanSimulatorPage",
    "PlanCard",
    "SimulatorForm",
    "SimulatorResults",
    "SIMULATOR_PATH",
    "EXPORT_PATH",
    "simulator_query",
]
