from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _allowed_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "").strip()
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _check_db() -> None:
    """Open a session and run SELECT 1. Raises RuntimeError if the DB is unreachable."""
    from sqlalchemy import text

    from db.session import SessionLocal

    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
    except Exception as exc:
        raise RuntimeError("Database unavailable.") from exc


def _check_schema() -> None:
    """
    Every table registered on Base.metadata must exist in the database.

    Does NOT auto-migrate; run 'alembic upgrade head' first.
    """
    from sqlalchemy import inspect as sa_inspect

    import db.models  # noqa: F401  registers all ORM models on Base.metadata
    from db.base import Base
    from db.session import get_engine

    inspector = sa_inspect(get_engine())
    missing = set(Base.metadata.tables.keys()) - set(inspector.get_table_names())
    if missing:
        logging.getLogger(__name__).critical(
            "Schema mismatch: table(s) absent from the database: %s. "
            "Run 'alembic upgrade head' and restart.",
            ", ".join(sorted(missing)),
        )
        raise RuntimeError(
            f"Schema mismatch: {len(missing)} table(s) missing from the database "
            f"({', '.join(sorted(missing))}). Run migrations and restart."
        )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Validate DB connectivity and schema before serving traffic."""
    _check_db()
    logging.getLogger(__name__).info("Database connectivity confirmed")
    _check_schema()
    logging.getLogger(__name__).info("Database schema validated")
    yield


def create_app(*, check_database: bool = True) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    from db.config import load_env_files

    load_env_files()
    _configure_logging()

    application = FastAPI(
        title="CRM Import API",
        version="1.0.0",
        lifespan=_lifespan if check_database else None,
    )

    origins = _allowed_origins()
    if origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    from app.api.routers import imports_router, projects_router, recommendations_router

    application.include_router(imports_router)
    application.include_router(projects_router)
    application.include_router(recommendations_router)

    @application.get("/api/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "healthy", "service": "crm-import-api"}

    return application


app = create_app()
