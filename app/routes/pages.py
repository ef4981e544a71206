from __future__ import annotations

import math
from datetime import date
from typing import Mapping

from fasthtml.common import APIRouter
from starlette.responses import PlainTextResponse, Response

from fafsa.config import BUILD
from fafsa.loans import (
    FILING_STATUSES,
    PLANS,
    SimulatorInputs,
    compare_plans,
    results_to_csv,
    validate_inputs,
)
from ui.app import EXPORT_PATH, SIMULATOR_PATH, HomePage, LoanSimulatorPage, PageShell, SITE_NAME

ar = APIRouter()

INPUT_FIELDS = (
    "total_balance",
    "weighted_interest_rate",
    "annual_income",
    "family_size",
    "filing_status",
    "spouse_income",
)


def _url(req):
    build = getattr(req.app.state, "build", BUILD)
    return build.url


def _app_or_fragment(req, title: str, content, active: str):
    if req.headers.get("HX-Request"):
        return content
    return PageShell(title, content, url=_url(req), active=active)


def _number(raw, default: float) -> float:
    """Lenient number parsing: missing -> default, unparseable -> 0."""
    if raw is None:
        return default
    try:
        value = float(str(raw).strip())
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def parse_simulator_form(data: Mapping) -> tuple[SimulatorInputs, list[str], bool]:
    """Read simulator inputs from form/query data.

    Returns `(inputs, plans, submitted)`; `submitted` is False when no input
    field is present (first visit). Unknown plan keys and filing statuses are
    ignored.
    """
    defaults = SimulatorInputs()
    filing = data.get("filing_status")
    getlist = getattr(data, "getlist", None)
    raw_plans = getlist("plans") if getlist else data.get("plans") or []
    if isinstance(raw_plans, str):
        raw_plans = [raw_plans]

    inputs = SimulatorInputs(
        total_balance=_number(data.get("total_balance"), defaults.total_balance),
        weighted_interest_rate=_number(data.get("weighted_interest_rate"), defaults.weighted_interest_rate),
        annual_income=_number(data.get("annual_income"), defaults.annual_income),
        family_size=int(_number(data.get("family_size"), defaults.family_size)),
        filing_status=filing if filing in FILING_STATUSES else defaults.filing_status,
        spouse_income=_number(data.get("spouse_income"), defaults.spouse_income),
    )
    plans = [p for p in PLANS if p in raw_plans]
    submitted = any(f in data for f in INPUT_FIELDS)
    return inputs, plans, submitted


def _simulator(req, data: Mapping):
    inputs, plans, submitted = parse_simulator_form(data)
    errors, results = [], None
    if submitted:
        errors = validate_inputs(inputs)
        if not errors:
            results = compare_plans(inputs, plans)
        content = LoanSimulatorPage(inputs, errors=errors, results=results, plans=plans, url=_url(req))
    else:
        content = LoanSimulatorPage(url=_url(req))
    return _app_or_fragment(req, "Loan Simulator", content, SIMULATOR_PATH)


@ar("/", methods=["GET"])
def index(req):
    return _app_or_fragment(req, SITE_NAME, HomePage(url=_url(req)), "/")


@ar(SIMULATOR_PATH, methods=["GET"])
def loan_simulator(req):
    return _simulator(req, req.query_params)


@ar(SIMULATOR_PATH, methods=["POST"])
async def loan_simulator_submit(req):
    form = await req.form()
    return _simulator(req, form)


@ar(EXPORT_PATH, methods=["GET"])
def loan_simulator_csv(req):
    inputs, plans, _ = parse_simulator_form(req.query_params)
    errors = validate_inputs(inputs)
    if errors:
        return PlainTextResponse("\n".join(e.message for e in errors), status_code=400)

    filename = f"loan-simulation-{date.today().isoformat()}.csv"
    return Response(
        results_to_csv(compare_plans(inputs, plans)),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
