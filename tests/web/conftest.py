from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from app.main import create_app
from fafsa.config import build_settings


@pytest.fixture
def client():
    with TestClient(create_app(build_settings({}))) as c:
        yield c


@pytest.fixture
def pages_client():
    """Client for the GitHub Pages build (base path + trailing slashes)."""
    with TestClient(create_app(build_settings({"GITHUB_PAGES": "1"}))) as c:
        yield c


@pytest.fixture
def simulator_form() -> dict:
    return {
        "total_balance": "35000",
        "weighted_interest_rate": "5.5",
        "annual_income": "50000",
        "family_size": "1",
        "filing_status": "single",
        "spouse_income": "0",
    }
