from __future__ import annotations

from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from fafsa.config import database_url


def sqlalchemy_url(url: str) -> str:
    """Pin plain postgres URLs to the psycopg (v3) driver."""
    for scheme in ("postgresql://", "postgres://"):
        if url.startswith(scheme):
            return "postgresql+psycopg://" + url[len(scheme):]
    return url


@lru_cache(maxsize=None)
def _engine(url: str) -> Engine:
    return create_engine(sqlalchemy_url(url), pool_pre_ping=True)


def engine(url: str | None = None) -> Engine:
    """Process-wide engine for `url` (default: the configured database URL).

    Created on first use; no connection is opened until a query runs.
    """
    return _engine(url or database_url())


def session(url: str | None = None) -> Session:
    return Session(engine(url))
