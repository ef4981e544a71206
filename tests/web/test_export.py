from __future__ import annotations

from pathlib import Path

import pytest

from app.export import PAGES, export_site, output_path
from app.main import create_app
from fafsa.config import build_settings


STANDALONE = build_settings({})
GITHUB_PAGES = build_settings({"GITHUB_PAGES": "1"})


@pytest.mark.parametrize(
    "build,path,expected",
    [
        (STANDALONE, "/", "index.html"),
        (GITHUB_PAGES, "/", "index.html"),
        (STANDALONE, "/manage-loans/loan-simulator", "manage-loans/loan-simulator.html"),
        (GITHUB_PAGES, "/manage-loans/loan-simulator", "manage-loans/loan-simulator/index.html"),
    ],
)
def test_output_path(build, path: str, expected: str) -> None:
    assert output_path(Path("out"), path, build) == Path("out") / expected


def test_export_standalone(tmp_path: Path) -> None:
    written = export_site(create_app(STANDALONE), tmp_path, STANDALONE)

    assert written == [tmp_path / "index.html", tmp_path / "manage-loans" / "loan-simulator.html"]
    home = (tmp_path / "index.html").read_text(encoding="utf-8")
    assert "<html" in home
    assert 'href="/manage-loans/loan-simulator"' in home


def test_export_github_pages(tmp_path: Path) -> None:
    written = export_site(create_app(GITHUB_PAGES), tmp_path, GITHUB_PAGES)

    assert len(written) == len(PAGES)
    simulator = tmp_path / "manage-loans" / "loan-simulator" / "index.html"
    assert simulator.exists()
    html = simulator.read_text(encoding="utf-8")
    assert 'data-slot="simulator-empty"' in html
    assert 'href="/fafsa_application_assistant/"' in html


def test_export_is_reproducible(tmp_path: Path) -> None:
    first = export_site(create_app(GITHUB_PAGES), tmp_path / "a", GITHUB_PAGES)
    second = export_site(create_app(GITHUB_PAGES), tmp_path / "b", GITHUB_PAGES)

    for a, b in zip(first, second, strict=True):
        assert a.relative_to(tmp_path / "a") == b.relative_to(tmp_path / "b")
        assert a.read_bytes() == b.read_bytes()
