"""
db/config.py

Database settings for the CRM store, read from the environment and from
optional `.env` / `.env.local` files at the project root.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_ENV_FILENAMES: tuple[str, ...] = (".env", ".env.local")
_CLOUD_LIKE_ENVIRONMENTS = frozenset({"prod", "production", "staging", "cloud"})
_PSYCOPG_SCHEMES: tuple[tuple[str, str], ...] = (
    ("postgres://", "postgresql+psycopg://"),
    ("postgresql://", "postgresql+psycopg://"),
)


def _parse_env_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None

    key, value = line.split("=", 1)
    key = key.strip()
    if key.startswith("export "):
        key = key[len("export ") :].strip()
    if not key:
        return None
    return key, value.strip().strip('"').strip("'")


def load_env_files(project_root: Path | None = None) -> None:
    """
    Copy KEY=VALUE pairs from `.env` then `.env.local` into os.environ.

    Variables already set in the process win, so `.env` shadows `.env.local`
    for keys defined in both.
    """

    root = project_root or Path(__file__).resolve().parents[1]
    for filename in _ENV_FILENAMES:
        env_path = root / filename
        if not env_path.is_file():
            continue
        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            parsed = _parse_env_line(raw_line)
            if parsed is not None:
                os.environ.setdefault(*parsed)


def normalize_postgres_url(url: str) -> str:
    for prefix, replacement in _PSYCOPG_SCHEMES:
        if url.startswith(prefix):
            return replacement + url[len(prefix) :]
    return url


def resolve_database_url() -> str:
    """
    Pick the CRM database URL.

    DATABASE_URL wins; otherwise CLOUD_DATABASE_URL when ENVIRONMENT is
    cloud-like, then LOCAL_DATABASE_URL.
    """

    load_env_files()

    candidates = [os.getenv("DATABASE_URL", "")]
    if os.getenv("ENVIRONMENT", "local").strip().lower() in _CLOUD_LIKE_ENVIRONMENTS:
        candidates.append(os.getenv("CLOUD_DATABASE_URL", ""))
    candidates.append(os.getenv("LOCAL_DATABASE_URL", ""))

    for candidate in candidates:
        if candidate.strip():
            return normalize_postgres_url(candidate.strip())

    raise RuntimeError(
        "No database URL configured. Set DATABASE_URL, or configure "
        "LOCAL_DATABASE_URL / CLOUD_DATABASE_URL."
    )


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DatabaseSettings:
    """
    Connection and pool settings for the SQLAlchemy engine.
    """

    url: str
    statement_timeout_ms: int = 30000
    pool_size: int = 5
    max_overflow: int = 10
    pool_recycle_seconds: int = 1800
    echo: bool = False


def get_database_settings() -> DatabaseSettings:
    url = resolve_database_url()
    return DatabaseSettings(
        url=url,
        statement_timeout_ms=max(0, _env_int("DB_STATEMENT_TIMEOUT_MS", 30000)),
        pool_size=_env_int("DB_POOL_SIZE", 5),
        max_overflow=_env_int("DB_MAX_OVERFLOW", 10),
        pool_recycle_seconds=_env_int("DB_POOL_RECYCLE", 1800),
        echo=_env_bool("SQL_ECHO"),
    )
