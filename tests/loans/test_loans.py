from __future__ import annotations

from dataclasses import replace

import pytest

from fafsa.loans import (
    CSV_HEADER,
    DEFAULT_PLANS,
    POVERTY_GUIDELINES_2024,
    POVERTY_PER_ADDITIONAL,
    PLANS,
    RepaymentResult,
    SimulatorInputs,
    best_options,
    compare_plans,
    field_errors,
    idr_payment,
    poverty_line,
    results_to_csv,
    simulate_repayment,
    standard_payment,
    validate_inputs,
)


@pytest.fixture
def inputs() -> SimulatorInputs:
    return SimulatorInputs(
        total_balance=35000,
        weighted_interest_rate=5.5,
        annual_income=50000,
        family_size=1,
        filing_status="single",
    )


class TestPovertyLine:
    def test_guideline_table(self) -> None:
        assert len(POVERTY_GUIDELINES_2024) == 8
        assert POVERTY_GUIDELINES_2024[2] == 20440
        assert POVERTY_PER_ADDITIONAL == 5380

    @pytest.mark.parametrize("size,expected", [(1, 15060), (4, 31200), (8, 52720), (9, 58100), (10, 63480)])
    def test_family_sizes(self, size: int, expected: int) -> None:
        assert poverty_line(size) == expected

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_uses_single_person(self, size: int) -> None:
        assert poverty_line(size) == 15060


class TestStandardPayment:
    def test_ten_year_payment(self) -> None:
        assert standard_payment(35000, 5.5) == pytest.approx(379.61, abs=0.5)

    def test_large_balance(self) -> None:
        assert standard_payment(200000, 7) == pytest.approx(2322.17, abs=0.5)

    @pytest.mark.parametrize("balance", [0, -1000])
    def test_no_balance_pays_nothing(self, balance: float) -> None:
        assert standard_payment(balance, 5.5) == 0

    def test_zero_interest(self) -> None:
        assert standard_payment(12000, 0) == 100

    def test_minimum_payment(self) -> None:
        assert standard_payment(500, 5) >= 50


class TestIdrPayment:
    @pytest.mark.parametrize(
        "income,size,pct,multiplier,expected",
        [
            (50000, 1, 10, 2.25, 134.29),  # SAVE
            (50000, 1, 10, 1.5, 228.42),  # PAYE / IBR
            (50000, 1, 20, 1.0, 582.33),  # ICR
            (80000, 4, 10, 2.25, 81.67),
        ],
    )
    def test_plan_formulas(self, income, size, pct, multiplier, expected) -> None:
        assert idr_payment(income, size, pct, multiplier) == pytest.approx(expected, abs=0.5)

    def test_income_below_protected_amount(self) -> None:
        assert idr_payment(20000, 1, 10, 2.25) == 0

    @pytest.mark.parametrize("args", [(-1000, 1, 10, 2.25), (50000, 0, 10, 2.25), (50000, 1, 0, 2.25)])
    def test_invalid_inputs(self, args) -> None:
        assert idr_payment(*args) == 0


class TestSimulateRepayment:
    def test_standard_repayment(self) -> None:
        sim = simulate_repayment(35000, 5.5, 380, 120)

        assert sim.payoff_months <= 120
        assert sim.total_paid > 35000
        assert sim.total_interest > 0
        assert sim.forgiveness == 0

    def test_forgiveness(self) -> None:
        sim = simulate_repayment(50000, 6, 100, 300, 240)

        assert sim.payoff_months == 240
        assert sim.forgiveness > 0

    def test_pays_off_before_forgiveness(self) -> None:
        sim = simulate_repayment(20000, 5, 500, 300, 240)

        assert sim.payoff_months < 240
        assert sim.forgiveness == 0

    def test_invalid_inputs(self) -> None:
        sim = simulate_repayment(0, 5, 100, 120)

        assert sim.total_paid == 0
        assert sim.payoff_months == 0

    def test_zero_interest(self) -> None:
        sim = simulate_repayment(12000, 0, 100, 150)

        assert sim.payoff_months == 120
        assert sim.total_interest == 0
        assert sim.total_paid == pytest.approx(12000, abs=0.5)


class TestValidateInputs:
    def test_valid(self, inputs: SimulatorInputs) -> None:
        assert validate_inputs(inputs) == []

    @pytest.mark.parametrize(
        "changes,field",
        [
            ({"total_balance": 0}, "total_balance"),
            ({"total_balance": -1000}, "total_balance"),
            ({"total_balance": 2_000_000}, "total_balance"),
            ({"weighted_interest_rate": 0}, "weighted_interest_rate"),
            ({"weighted_interest_rate": 20}, "weighted_interest_rate"),
            ({"annual_income": -1000}, "annual_income"),
            ({"annual_income": 50_000_000}, "annual_income"),
            ({"family_size": 0}, "family_size"),
            ({"family_size": 25}, "family_size"),
            ({"filing_status": "married-joint", "spouse_income": -5000}, "spouse_income"),
        ],
    )
    def test_rejected_field(self, inputs: SimulatorInputs, changes: dict, field: str) -> None:
        errors = validate_inputs(replace(inputs, **changes))

        assert field in [e.field for e in errors]

    def test_spouse_income_ignored_for_single_filers(self, inputs: SimulatorInputs) -> None:
        errors = validate_inputs(replace(inputs, spouse_income=-5000))

        assert "spouse_income" not in [e.field for e in errors]

    def test_messages(self, inputs: SimulatorInputs) -> None:
        errors = field_errors(validate_inputs(replace(inputs, total_balance=0, weighted_interest_rate=20)))

        assert errors == {
            "total_balance": "Loan balance must be greater than $0",
            "weighted_interest_rate": "Interest rate seems too high. Federal rates are typically 3-9%",
        }


class TestComparePlans:
    def test_all_plans_in_fixed_order(self, inputs: SimulatorInputs) -> None:
        results = compare_plans(inputs)

        assert [r.key for r in results] == list(PLANS)
        assert [r.plan_name for r in results] == list(PLANS.values())

    def test_extended_needs_thirty_thousand(self, inputs: SimulatorInputs) -> None:
        keys = [r.key for r in compare_plans(replace(inputs, total_balance=20000))]

        assert "extended" not in keys
        assert "standard" in keys

    def test_selected_plans_only(self, inputs: SimulatorInputs) -> None:
        assert [r.key for r in compare_plans(inputs, DEFAULT_PLANS)] == ["standard", "save", "paye", "ibr"]
        assert [r.key for r in compare_plans(inputs, ["icr", "save"])] == ["save", "icr"]

    def test_unknown_plan_raises(self, inputs: SimulatorInputs) -> None:
        with pytest.raises(ValueError, match="unknown plans"):
            compare_plans(inputs, ["standard", "pslf"])

    def test_fixed_plans(self, inputs: SimulatorInputs) -> None:
        results = {r.key: r for r in compare_plans(inputs)}
        standard = standard_payment(35000, 5.5)

        assert results["standard"].monthly_payment == pytest.approx(standard)
        assert results["standard"].payoff_months <= 120
        assert results["standard"].forgiveness == 0
        assert results["graduated"].monthly_payment == pytest.approx(standard * 0.5)
        assert results["graduated"].payoff_months == 120
        assert results["extended"].monthly_payment == pytest.approx(standard * 0.6)

    def test_save_forgives_low_income_balance(self, inputs: SimulatorInputs) -> None:
        save = {r.key: r for r in compare_plans(replace(inputs, annual_income=20000, total_balance=50000))}["save"]

        assert save.monthly_payment == 0
        assert save.payoff_months == 240
        assert save.forgiveness > 0
        assert save.forgiveness_year == 20
        assert save.notes[-1].endswith("forgiven after 20 years")

    def test_paye_not_eligible_when_payment_exceeds_standard(self, inputs: SimulatorInputs) -> None:
        paye = {r.key: r for r in compare_plans(replace(inputs, annual_income=500000))}["paye"]

        assert paye.is_eligible is False
        assert paye.monthly_payment == pytest.approx(standard_payment(35000, 5.5))
        assert paye.notes == ["May not qualify - payment exceeds Standard Plan"]

    def test_joint_filers_combine_income(self, inputs: SimulatorInputs) -> None:
        single = compare_plans(inputs, ["save"])[0]
        joint = compare_plans(replace(inputs, filing_status="married-joint", spouse_income=30000), ["save"])[0]
        separate = compare_plans(replace(inputs, filing_status="married-separate", spouse_income=30000), ["save"])[0]

        assert joint.monthly_payment > single.monthly_payment
        assert separate.monthly_payment == pytest.approx(single.monthly_payment)


def test_best_options_ignores_ineligible_plans() -> None:
    results = [
        RepaymentResult("standard", "Standard", 400, 48000, 13000, 120),
        RepaymentResult("paye", "PAYE", 100, 30000, 5000, 240, is_eligible=False),
        RepaymentResult("save", "SAVE", 150, 36000, 9000, 240),
    ]
    best = best_options(results)

    assert best["lowest_payment"].key == "save"
    assert best["lowest_total"].key == "save"
    assert best["fastest_payoff"].key == "standard"
    assert best_options([]) == {"lowest_payment": None, "lowest_total": None, "fastest_payoff": None}


def test_results_to_csv() -> None:
    text = results_to_csv(
        [
            RepaymentResult("standard", "Standard (10-Year)", 379.836, 45580.3, 10580.3, 120),
            RepaymentResult("save", "SAVE Plan", 134.2917, 32230, 30000.5, 240, forgiveness=41234.567),
        ]
    )
    lines = text.splitlines()

    assert lines[0] == ",".join(CSV_HEADER)
    assert lines[0] == "Plan Name,Monthly Payment,Total Paid,Total Interest,Payoff Time (months),Forgiveness Amount"
    assert lines[1] == "Standard (10-Year),379.84,45580.30,10580.30,120,0.00"
    assert lines[2] == "SAVE Plan,134.29,32230.00,30000.50,240,41234.57"
    assert text.endswith("\n")
