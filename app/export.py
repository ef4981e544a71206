"""Static site export.

Renders every page through the app (as a browser would request it) and writes
the HTML under `out_dir`, laid out for the configured build:

- trailing slash on:  out/manage-loans/loan-simulator/index.html
- trailing slash off: out/manage-loans/loan-simulator.html
- home is always out/index.html
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import logfire
from starlette.testclient import TestClient

from fafsa.config import BuildSettings
from ui.app import SIMULATOR_PATH

PAGES: tuple[str, ...] = ("/", SIMULATOR_PATH)


def output_path(out_dir: Path, path: str, build: BuildSettings) -> Path:
    rel = path.strip("/")
    if not rel:
        return out_dir / "index.html"
    if build.trailing_slash:
        return out_dir / rel / "index.html"
    return out_dir / f"{rel}.html"


def export_site(app, out_dir: Path, build: BuildSettings, pages: Iterable[str] = PAGES) -> list[Path]:
    """Write each page in `pages` to disk; returns the written files."""
    out_dir = Path(out_dir)
    written: list[Path] = []
    with logfire.span("static export", out_dir=str(out_dir), output=build.output, base_path=build.base_path):
        with TestClient(app) as client:
            for path in pages:
                response = client.get(path)
                response.raise_for_status()
                target = output_path(out_dir, path, build)
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(response.text, encoding="utf-8")
                logfire.info("exported {path}", path=path, file=str(target))
                written.append(target)
    return written
