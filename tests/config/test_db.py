from __future__ import annotations

import pytest
from sqlalchemy import text

from fafsa.db import db


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgresql://u:p@h:5432/x", "postgresql+psycopg://u:p@h:5432/x"),
        ("postgres://u:p@h:5432/x", "postgresql+psycopg://u:p@h:5432/x"),
        ("postgresql+psycopg://u:p@h/x", "postgresql+psycopg://u:p@h/x"),
        ("sqlite://", "sqlite://"),
    ],
)
def test_sqlalchemy_url(url: str, expected: str) -> None:
    assert db.sqlalchemy_url(url) == expected


def test_engine_is_cached_per_url() -> None:
    assert db.engine("sqlite://") is db.engine("sqlite://")
    assert db.engine("sqlite://").dialect.name == "sqlite"


def test_engine_defaults_to_configured_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(db, "database_url", lambda: "sqlite:///:memory:")

    assert db.engine().url.database == ":memory:"


def test_session_runs_queries() -> None:
    with db.session("sqlite://") as s:
        assert s.connection().execute(text("SELECT 1")).scalar() == 1
