from __future__ import annotations

import re
from datetime import date

from starlette.datastructures import ImmutableMultiDict

from app.routes.pages import parse_simulator_form
from fafsa.loans import SimulatorInputs

SIMULATOR = "/manage-loans/loan-simulator"
EXPORT = f"{SIMULATOR}/export"
HX = {"HX-Request": "true"}


def test_home_page(client) -> None:
    r = client.get("/")

    assert r.status_code == 200
    assert "<title>FAFSA Application Assistant</title>" in r.text
    assert 'data-slot="site-header"' in r.text
    assert 'data-slot="home-page"' in r.text
    assert 'data-slot="site-footer"' in r.text
    assert f'href="{SIMULATOR}"' in r.text
    assert 'x-data="{ menu: false }"' in r.text
    assert 'x-show="menu"' in r.text


def test_htmx_request_gets_fragment(client) -> None:
    r = client.get("/", headers=HX)

    assert r.status_code == 200
    assert 'data-slot="home-page"' in r.text
    assert 'data-slot="site-header"' not in r.text


def test_simulator_first_visit_is_empty(client) -> None:
    r = client.get(SIMULATOR)

    assert r.status_code == 200
    assert "Loan Simulator | FAFSA Application Assistant" in r.text
    assert 'data-state="empty"' in r.text
    assert 'data-slot="simulator-empty"' in r.text
    assert 'id="simulator-errors"' not in r.text
    assert 'aria-current="page"' in r.text


def test_simulator_query_renders_results(client, simulator_form) -> None:
    r = client.get(SIMULATOR, params={**simulator_form, "plans": ["standard", "save"]})

    assert r.status_code == 200
    assert 'data-state="results"' in r.text
    assert 'data-plan="standard"' in r.text
    assert 'data-plan="save"' in r.text
    assert 'data-plan="icr"' not in r.text
    assert "SAVE Plan" in r.text
    assert f"{EXPORT}?total_balance=35000" in r.text


def test_post_with_errors(client, simulator_form) -> None:
    r = client.post(SIMULATOR, data={**simulator_form, "total_balance": "0", "weighted_interest_rate": "20"})

    assert r.status_code == 200
    assert 'data-state="error"' in r.text
    assert 'id="simulator-errors"' in r.text
    assert "Loan balance must be greater than $0" in r.text
    assert "Interest rate seems too high. Federal rates are typically 3-9%" in r.text
    assert 'aria-describedby="total_balance-error"' in r.text
    assert 'data-slot="simulator-results"' not in r.text


def test_post_unparseable_number_is_zero(client, simulator_form) -> None:
    r = client.post(SIMULATOR, data={**simulator_form, "total_balance": "lots"})

    assert "Loan balance must be greater than $0" in r.text


def test_post_selected_plans(client, simulator_form) -> None:
    r = client.post(SIMULATOR, data={**simulator_form, "plans": ["save", "icr"]})

    assert 'data-state="results"' in r.text
    assert 'data-plan="save"' in r.text
    assert 'data-plan="icr"' in r.text
    assert 'data-plan="standard"' not in r.text


def test_post_large_family_keeps_its_option(client, simulator_form) -> None:
    r = client.post(SIMULATOR, data={**simulator_form, "family_size": "12"})

    assert 'data-state="results"' in r.text
    assert re.search(r'<option[^>]*value="12"[^>]*\sselected', r.text)


def test_post_out_of_range_family_is_redisplayed(client, simulator_form) -> None:
    r = client.post(SIMULATOR, data={**simulator_form, "family_size": "25"})

    assert 'data-state="error"' in r.text
    assert "Family size must be between 1 and 20" in r.text
    assert re.search(r'<option[^>]*value="25"[^>]*\sselected', r.text)


def test_htmx_post_swaps_simulator_only(client, simulator_form) -> None:
    r = client.post(SIMULATOR, data=simulator_form, headers=HX)

    assert r.status_code == 200
    assert 'id="loan-simulator"' in r.text
    assert 'data-slot="site-header"' not in r.text


def test_csv_export(client, simulator_form) -> None:
    r = client.get(EXPORT, params=simulator_form)

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert r.headers["content-disposition"] == (
        f'attachment; filename="loan-simulation-{date.today().isoformat()}.csv"'
    )
    lines = r.text.strip().splitlines()
    assert lines[0].startswith("Plan Name,Monthly Payment")
    assert len(lines) == 1 + 7
    assert lines[1].startswith("Standard (10-Year),")


def test_csv_export_selected_plans(client, simulator_form) -> None:
    r = client.get(EXPORT, params={**simulator_form, "plans": ["ibr"]})

    lines = r.text.strip().splitlines()
    assert len(lines) == 2
    assert lines[1].startswith("IBR Plan (New Borrower),")


def test_csv_export_rejects_invalid_inputs(client, simulator_form) -> None:
    r = client.get(EXPORT, params={**simulator_form, "family_size": "0"})

    assert r.status_code == 400
    assert "Family size must be between 1 and 20" in r.text


def test_pages_build_links_carry_base_path(pages_client) -> None:
    r = pages_client.get("/")

    assert 'href="/fafsa_application_assistant/manage-loans/loan-simulator/"' in r.text
    assert 'href="/fafsa_application_assistant/"' in r.text


def test_pages_build_export_link_has_no_trailing_slash(pages_client, simulator_form) -> None:
    r = pages_client.get(SIMULATOR, params=simulator_form)

    assert 'data-state="results"' in r.text
    assert 'href="/fafsa_application_assistant/manage-loans/loan-simulator/export?total_balance=35000' in r.text


def test_parse_simulator_form() -> None:
    data = ImmutableMultiDict(
        [
            ("total_balance", "12000.5"),
            ("weighted_interest_rate", "nan"),
            ("family_size", "3"),
            ("filing_status", "married-joint"),
            ("spouse_income", "20000"),
            ("plans", "icr"),
            ("plans", "bogus"),
            ("plans", "standard"),
        ]
    )
    inputs, plans, submitted = parse_simulator_form(data)

    assert submitted
    assert inputs.total_balance == 12000.5
    assert inputs.weighted_interest_rate == 0
    assert inputs.annual_income == SimulatorInputs().annual_income
    assert inputs.family_size == 3
    assert inputs.filing_status == "married-joint"
    assert inputs.combined_income == 70000
    assert plans == ["standard", "icr"]


def test_parse_simulator_form_defaults() -> None:
    inputs, plans, submitted = parse_simulator_form({"filing_status": "widowed"})

    assert submitted
    assert inputs.filing_status == "single"
    assert parse_simulator_form({}) == (SimulatorInputs(), [], False)
