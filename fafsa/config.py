"""Environment configuration.

`.env` is loaded at import; `settings` is the merged view (process environment
wins over `.env`). The resolver functions take an explicit mapping so they can
be evaluated against any environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Mapping

from dotenv import dotenv_values, load_dotenv

load_dotenv()
settings: dict[str, str | None] = {**dotenv_values(), **os.environ}

GITHUB_PAGES_BASE_PATH = "/fafsa_application_assistant"
DEFAULT_API_URL = "http://localhost:3001/api"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class BuildSettings:
    output: Literal["export", "standalone"]
    base_path: str
    asset_prefix: str
    trailing_slash: bool
    images_unoptimized: bool

    def url(self, path: str, page: bool = True) -> str:
        """Public URL of an app path under this build: "/manage-loans" -> "/<base>/manage-loans/".

        Only pages get the trailing slash. Endpoints (`page=False`, e.g. the CSV
        download) and paths whose last segment has an extension keep theirs as is.
        """
        path = "/" + path.lstrip("/")
        last = path.rsplit("/", 1)[-1]
        if page and self.trailing_slash and last and "." not in last:
            path += "/"
        if not self.base_path:
            return path
        return self.base_path + ("/" if path == "/" else path)


def _env(env: Mapping[str, str | None] | None) -> Mapping[str, str | None]:
    return settings if env is None else env


def database_url(env: Mapping[str, str | None] | None = None) -> str:
    env = _env(env)
    if env.get("DATABASE_URL"):
        return env["DATABASE_URL"]
    user = env.get("DB_USER") or "postgres"
    password = env.get("DB_PASSWORD") or "postgres"
    host = env.get("DB_HOST") or "localhost"
    port = env.get("DB_PORT") or "5432"
    name = env.get("DB_NAME") or "fafsa_assistant"
    return f"postgresql://{user}:{password}@{host}:{port}/{name}"


def api_url(env: Mapping[str, str | None] | None = None) -> str:
    return _env(env).get("NEXT_PUBLIC_API_URL") or DEFAULT_API_URL


def build_settings(env: Mapping[str, str | None] | None = None) -> BuildSettings:
    pages = bool(_env(env).get("GITHUB_PAGES"))
    return BuildSettings(
        output="export" if pages else "standalone",
        base_path=GITHUB_PAGES_BASE_PATH if pages else "",
        asset_prefix=f"{GITHUB_PAGES_BASE_PATH}/" if pages else "",
        trailing_slash=pages,
        images_unoptimized=pages,
    )


def port(env: Mapping[str, str | None] | None = None) -> int:
    raw = _env(env).get("PORT")
    try:
        return int(raw) if raw else DEFAULT_PORT
    except ValueError:
        return DEFAULT_PORT


DATABASE_URL = database_url()
API_URL = api_url()
BUILD = build_settings()
