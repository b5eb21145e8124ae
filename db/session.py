"""
db/session.py

Engine and session factory for the CRM store. Nothing connects until the
first session is requested.
"""

from __future__ import annotations

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from db.config import DatabaseSettings, get_database_settings


def create_db_engine(settings: DatabaseSettings) -> Engine:
    if not settings.url.startswith("postgresql"):
        raise RuntimeError("Only PostgreSQL URLs are supported.")

    # Session-wide ceiling; import calls tighten it per transaction.
    return create_engine(
        settings.url,
        echo=settings.echo,
        pool_pre_ping=True,
        pool_recycle=settings.pool_recycle_seconds,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        connect_args={"options": f"-c statement_timeout={settings.statement_timeout_ms}"},
    )


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return create_db_engine(get_database_settings())


@lru_cache(maxsize=1)
def _session_factory() -> sessionmaker[Session]:
    return sessionmaker(
        bind=get_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


def SessionLocal() -> Session:
    return _session_factory()()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency yielding one session per request.
    """

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
