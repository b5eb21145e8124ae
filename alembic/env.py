from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from db.base import Base
from db.config import normalize_postgres_url, resolve_database_url
from db.models import Account, Project  # noqa: F401  registers the CRM tables on Base.metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _migration_url() -> str:
    """
    `-x db_url=...` first, then ALEMBIC_DATABASE_URL, then the application URL.
    """

    override = context.get_x_argument(as_dictionary=True).get("db_url") or os.getenv("ALEMBIC_DATABASE_URL", "")
    url = normalize_postgres_url(override.strip()) if override.strip() else resolve_database_url()
    if not url.startswith("postgresql"):
        raise RuntimeError("CRM migrations target PostgreSQL only.")
    return url


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)


if context.is_offline_mode():
    _configure(url=_migration_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()
else:
    engine = create_engine(_migration_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()
