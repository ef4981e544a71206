"""Federal student loan repayment estimates.

Amortisation for the fixed plans, the income-driven (IDR) payment formula and a
month-by-month simulation with optional forgiveness. Figures are estimates:
the graduated and extended plans use the same rough approximations as the
federal loan simulator's public calculator, not servicer schedules.

Rates are annual percentages (5.5 means 5.5%), money is in dollars.
"""

from __future__ import annotations

import csv
import io
import math
from dataclasses import dataclass, field
from typing import Iterable, Literal, Sequence

import logfire

from ui.utils.format import format_money

# 2024 Federal Poverty Guidelines (48 contiguous states)
POVERTY_GUIDELINES_2024: dict[int, int] = {
    1: 15060,
    2: 20440,
    3: 25820,
    4: 31200,
    5: 36580,
    6: 41960,
    7: 47340,
    8: 52720,
}
POVERTY_PER_ADDITIONAL = 5380

STANDARD_TERM_MONTHS = 120
MINIMUM_PAYMENT = 50.0
EXTENDED_MIN_BALANCE = 30000
MAX_FAMILY_SIZE = 20

FilingStatus = Literal["single", "married-joint", "married-separate"]
FILING_STATUSES: dict[str, str] = {
    "single": "Single",
    "married-joint": "Married Filing Jointly",
    "married-separate": "Married Filing Separately",
}

PlanKey = Literal["standard", "graduated", "extended", "save", "paye", "ibr", "icr"]
PLANS: dict[str, str] = {
    "standard": "Standard (10-Year)",
    "graduated": "Graduated (10-Year)",
    "extended": "Extended (25-Year)",
    "save": "SAVE Plan",
    "paye": "PAYE Plan",
    "ibr": "IBR Plan (New Borrower)",
    "icr": "ICR Plan",
}
DEFAULT_PLANS: tuple[str, ...] = ("standard", "save", "paye", "ibr")


@dataclass
class SimulatorInputs:
    total_balance: float = 35000
    weighted_interest_rate: float = 5.5
    annual_income: float = 50000
    family_size: int = 1
    filing_status: FilingStatus = "single"
    spouse_income: float = 0
    spouse_loan_balance: float = 0

    @property
    def combined_income(self) -> float:
        if self.filing_status == "married-joint":
            return self.annual_income + self.spouse_income
        return self.annual_income


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


@dataclass
class Simulation:
    total_paid: float = 0.0
    total_interest: float = 0.0
    payoff_months: int = 0
    forgiveness: float = 0.0


@dataclass
class RepaymentResult:
    key: str
    plan_name: str
    monthly_payment: float
    total_paid: float
    total_interest: float
    payoff_months: int
    forgiveness: float = 0.0
    forgiveness_year: int | None = None
    is_eligible: bool = True
    notes: list[str] = field(default_factory=list)


def poverty_line(family_size: int) -> int:
    if family_size <= 0:
        return POVERTY_GUIDELINES_2024[1]
    if family_size <= 8:
        return POVERTY_GUIDELINES_2024[family_size]
    return POVERTY_GUIDELINES_2024[8] + (family_size - 8) * POVERTY_PER_ADDITIONAL


def standard_payment(balance: float, annual_rate: float) -> float:
    """10-year amortised payment, P = L*c*(1+c)^n / ((1+c)^n - 1), at least $50."""
    if balance <= 0:
        return 0.0
    c = annual_rate / 100 / 12
    n = STANDARD_TERM_MONTHS
    if c == 0:
        return balance / n
    growth = (1 + c) ** n
    return max(MINIMUM_PAYMENT, balance * c * growth / (growth - 1))


def idr_payment(income: float, family_size: int, percentage: float, poverty_multiplier: float) -> float:
    """Monthly IDR payment: (income - poverty line * multiplier) * percentage / 12.

    SAVE uses 10% over 225% of poverty, PAYE/IBR 10% over 150%, ICR 20% over 100%.
    """
    if income < 0 or family_size < 1 or percentage <= 0:
        return 0.0
    discretionary = max(0.0, income - poverty_line(family_size) * poverty_multiplier)
    return max(0.0, discretionary * (percentage / 100) / 12)


def simulate_repayment(
    balance: float,
    annual_rate: float,
    monthly_payment: float,
    max_months: int,
    forgiveness_month: int | None = None,
) -> Simulation:
    """Run the loan month by month until payoff, `max_months` or forgiveness.

    Interest accrues before each payment. In the forgiveness month the remaining
    balance is forgiven and that month's interest is not counted.
    """
    if balance <= 0 or monthly_payment < 0:
        return Simulation()

    rate = annual_rate / 100 / 12
    sim = Simulation()
    while balance > 0 and sim.payoff_months < max_months:
        sim.payoff_months += 1
        interest = balance * rate

        if forgiveness_month and sim.payoff_months >= forgiveness_month:
            sim.forgiveness = balance
            return sim

        sim.total_interest += interest
        payment = min(monthly_payment, balance + interest)
        sim.total_paid += payment
        balance = balance + interest - payment
        if balance < 0.01:
            balance = 0
    return sim


def validate_inputs(inputs: SimulatorInputs) -> list[ValidationError]:
    errors: list[ValidationError] = []

    if inputs.total_balance <= 0:
        errors.append(ValidationError("total_balance", "Loan balance must be greater than $0"))
    elif inputs.total_balance > 1_000_000:
        errors.append(
            ValidationError("total_balance", "Please enter a realistic loan balance (under $1,000,000)")
        )

    if inputs.weighted_interest_rate <= 0:
        errors.append(ValidationError("weighted_interest_rate", "Interest rate must be greater than 0%"))
    elif inputs.weighted_interest_rate > 15:
        errors.append(
            ValidationError(
                "weighted_interest_rate", "Interest rate seems too high. Federal rates are typically 3-9%"
            )
        )

    if inputs.annual_income < 0:
        errors.append(ValidationError("annual_income", "Income cannot be negative"))
    elif inputs.annual_income > 10_000_000:
        errors.append(ValidationError("annual_income", "Please enter a realistic income amount"))

    if inputs.family_size < 1 or inputs.family_size > MAX_FAMILY_SIZE:
        errors.append(ValidationError("family_size", f"Family size must be between 1 and {MAX_FAMILY_SIZE}"))

    if inputs.filing_status == "married-joint" and inputs.spouse_income < 0:
        errors.append(ValidationError("spouse_income", "Spouse income cannot be negative"))

    if errors:
        logfire.info("loan simulator inputs rejected", fields=[e.field for e in errors])
    return errors


def field_errors(errors: Iterable[ValidationError]) -> dict[str, str]:
    """First message per field, for passing to form controls as `error`."""
    out: dict[str, str] = {}
    for e in errors:
        out.setdefault(e.field, e.message)
    return out


def _forgiven_note(forgiveness: float, years: int) -> str:
    if forgiveness > 0:
        return f"${round(forgiveness):,} forgiven after {years} years"
    return "Paid in full before forgiveness"


def _all_plans(inputs: SimulatorInputs) -> list[RepaymentResult]:
    balance = inputs.total_balance
    rate = inputs.weighted_interest_rate
    income = inputs.combined_income
    size = inputs.family_size
    standard = standard_payment(balance, rate)

    results: list[RepaymentResult] = []

    sim = simulate_repayment(balance, rate, standard, 120)
    results.append(
        RepaymentResult(
            "standard", PLANS["standard"], standard, sim.total_paid, sim.total_interest, sim.payoff_months,
            notes=["Fixed payments", "Lowest total interest", "Fastest payoff"],
        )
    )

    # Starts at half the standard payment; simulated at a rough average of 85%.
    sim = simulate_repayment(balance, rate, standard * 0.85, 120)
    results.append(
        RepaymentResult(
            "graduated", PLANS["graduated"], standard * 0.5, sim.total_paid * 1.1, sim.total_interest * 1.2, 120,
            notes=["Payments start low, increase every 2 years", "Good if expecting income growth"],
        )
    )

    if balance >= EXTENDED_MIN_BALANCE:
        extended = standard * 0.6
        sim = simulate_repayment(balance, rate, extended, 300)
        results.append(
            RepaymentResult(
                "extended", PLANS["extended"], extended, sim.total_paid, sim.total_interest, sim.payoff_months,
                notes=["Requires $30,000+ in loans", "Lower payments but more interest"],
            )
        )

    save = idr_payment(income, size, 10, 2.25)
    save_months = 240 if balance > 12000 else 120
    save_years = math.ceil(save_months / 12)
    sim = simulate_repayment(balance, rate, save, 300, save_months)
    results.append(
        RepaymentResult(
            "save", PLANS["save"], save, sim.total_paid, sim.total_interest, sim.payoff_months,
            forgiveness=sim.forgiveness,
            forgiveness_year=save_years if sim.forgiveness > 0 else None,
            notes=[
                "10% of discretionary income",
                "Largest income protection (225% poverty)",
                "Government covers unpaid interest",
                _forgiven_note(sim.forgiveness, save_years),
            ],
        )
    )

    paye = min(idr_payment(income, size, 10, 1.5), standard)
    sim = simulate_repayment(balance, rate, paye, 300, 240)
    paye_eligible = paye < standard
    results.append(
        RepaymentResult(
            "paye", PLANS["paye"], paye, sim.total_paid, sim.total_interest, sim.payoff_months,
            forgiveness=sim.forgiveness,
            forgiveness_year=20 if sim.forgiveness > 0 else None,
            is_eligible=paye_eligible,
            notes=[
                "10% of discretionary income (capped)",
                'Must be "new borrower" as of Oct 2007',
                _forgiven_note(sim.forgiveness, 20),
            ]
            if paye_eligible
            else ["May not qualify - payment exceeds Standard Plan"],
        )
    )

    # Assumes a new borrower (10%); pre-2014 borrowers pay 15%.
    ibr = min(idr_payment(income, size, 10, 1.5), standard)
    sim = simulate_repayment(balance, rate, ibr, 300, 240)
    results.append(
        RepaymentResult(
            "ibr", PLANS["ibr"], ibr, sim.total_paid, sim.total_interest, sim.payoff_months,
            forgiveness=sim.forgiveness,
            forgiveness_year=20 if sim.forgiveness > 0 else None,
            is_eligible=ibr < standard,
            notes=[
                "10% of discretionary income for new borrowers",
                "15% for borrowers before July 2014",
                _forgiven_note(sim.forgiveness, 20),
            ],
        )
    )

    icr = idr_payment(income, size, 20, 1.0)
    sim = simulate_repayment(balance, rate, icr, 300, 300)
    results.append(
        RepaymentResult(
            "icr", PLANS["icr"], icr, sim.total_paid, sim.total_interest, sim.payoff_months,
            forgiveness=sim.forgiveness,
            forgiveness_year=25 if sim.forgiveness > 0 else None,
            notes=[
                "20% of discretionary income",
                "Only IDR option for Parent PLUS (after consolidation)",
                "Highest payments among IDR plans",
            ],
        )
    )
    return results


def compare_plans(inputs: SimulatorInputs, plans: Sequence[str] | None = None) -> list[RepaymentResult]:
    """Estimate every repayment plan for `inputs`, keeping only `plans` if given.

    Unknown plan keys raise ValueError. Results come back in a fixed order:
    standard, graduated, extended (balance >= $30,000 only), save, paye, ibr, icr.
    """
    unknown = set(plans or ()) - set(PLANS)
    if unknown:
        raise ValueError(f"unknown plans {sorted(unknown)}; expected keys from {tuple(PLANS)}")

    with logfire.span("compare repayment plans", balance=inputs.total_balance, plans=list(plans or ())):
        results = _all_plans(inputs)
        if plans:
            results = [r for r in results if r.key in plans]
        return results


def best_options(results: Sequence[RepaymentResult]) -> dict[str, RepaymentResult | None]:
    """Eligible plan with the lowest payment, lowest total cost and fastest payoff."""
    eligible = [r for r in results if r.is_eligible]
    if not eligible:
        return {"lowest_payment": None, "lowest_total": None, "fastest_payoff": None}
    return {
        "lowest_payment": min(eligible, key=lambda r: r.monthly_payment),
        "lowest_total": min(eligible, key=lambda r: r.total_paid),
        "fastest_payoff": min(eligible, key=lambda r: r.payoff_months),
    }


CSV_HEADER = (
    "Plan Name",
    "Monthly Payment",
    "Total Paid",
    "Total Interest",
    "Payoff Time (months)",
    "Forgiveness Amount",
)


def results_to_csv(results: Iterable[RepaymentResult]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for r in results:
        writer.writerow(
            [
                r.plan_name,
                format_money(r.monthly_payment),
                format_money(r.total_paid),
                format_money(r.total_interest),
                r.payoff_months,
                format_money(r.forgiveness),
            ]
        )
    return buf.getvalue()
