from __future__ import annotations

from pathlib import Path

import pytest

from app import main as cli


@pytest.fixture(autouse=True)
def _no_logfire_setup(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cli.logfire, "configure", lambda **kw: None)
    monkeypatch.setattr(cli.logfire, "instrument_starlette", lambda app, **kw: None)


@pytest.fixture
def served(monkeypatch: pytest.MonkeyPatch) -> dict:
    calls: dict = {}

    def fake_run(app, **kw):
        calls["app"] = app
        calls.update(kw)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    return calls


def test_export_command(tmp_path: Path) -> None:
    assert cli.main(["export", "--out", str(tmp_path)]) == 0

    assert (tmp_path / "index.html").exists()


def test_serve_command(served: dict) -> None:
    assert cli.main(["serve", "--port", "4000", "--host", "127.0.0.1"]) == 0

    assert served["app"] is cli.app
    assert served["port"] == 4000
    assert served["host"] == "127.0.0.1"


def test_serves_by_default(served: dict) -> None:
    cli.main([])

    assert served["port"] == cli.config.port()
    assert served["host"] == "0.0.0.0"
