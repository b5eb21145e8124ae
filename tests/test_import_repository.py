"""
tests/test_import_repository.py

SQL issued by the import repository, captured with a recording session.
"""

from __future__ import annotations

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, OperationalError

from app.domain.errors import DuplicateRecordError, ImportStoreError
from app.domain.records import AccountRecord, EntityType, ImportSource, ProjectRecord
from app.repositories.import_repository import ImportRepository
from app.services.deduplication import build_check_spec
from db.models.account import Account


class _Result:
    def __init__(self, value: int) -> None:
        self._value = value

    def scalar_one(self) -> int:
        return self._value


class RecordingSession:
    def __init__(self, *, count: int = 0, flush_error: Exception | None = None) -> None:
        self.statements: list[str] = []
        self.added: list[object] = []
        self._count = count
        self._flush_error = flush_error

    def execute(self, statement):
        self.statements.append(str(statement.compile(dialect=postgresql.dialect())))
        return _Result(self._count)

    def add(self, row) -> None:
        self.added.append(row)

    def flush(self) -> None:
        if self._flush_error is not None:
            raise self._flush_error


def test_count_uses_description_fragments_for_spreadsheet_projects() -> None:
    session = RecordingSession(count=2)
    repository = ImportRepository(session, timeout_seconds=1.5)  # type: ignore[arg-type]
    spec = build_check_spec(
        EntityType.PROJECTS,
        ProjectRecord(name="Solar", region="Africa", department="Finance"),
        ImportSource.SPREADSHEET,
    )

    assert repository.count_matching(EntityType.PROJECTS, spec) == 2
    timeout_sql, count_sql = session.statements
    assert timeout_sql == "SET LOCAL statement_timeout = 1500"
    assert "count(*)" in count_sql
    assert "projects.name = " in count_sql
    assert count_sql.count("projects.description LIKE") == 2


def test_count_for_accounts_compares_columns() -> None:
    session = RecordingSession()
    repository = ImportRepository(session)  # type: ignore[arg-type]
    spec = build_check_spec(EntityType.ACCOUNTS, AccountRecord(name="Acme", industry="Retail"), ImportSource.JSON)

    assert repository.count_matching(EntityType.ACCOUNTS, spec) == 0
    [count_sql] = session.statements
    assert "accounts.name = " in count_sql
    assert "accounts.industry = " in count_sql


def test_insert_maps_account_fields_and_audit_label() -> None:
    session = RecordingSession()
    repository = ImportRepository(session)  # type: ignore[arg-type]
    record = AccountRecord(name="Acme", industry="Retail", phone="555", account_type="Customer")

    repository.insert(EntityType.ACCOUNTS, record, created_by="csv-import")

    [row] = session.added
    assert isinstance(row, Account)
    assert row.phone_office == "555"
    assert row.account_type == "Customer"
    assert row.created_by == "csv-import"
    assert row.modified_user_id == "csv-import"


def test_insert_translates_unique_violation() -> None:
    session = RecordingSession(flush_error=IntegrityError("INSERT", {}, Exception("duplicate key")))
    repository = ImportRepository(session)  # type: ignore[arg-type]

    with pytest.raises(DuplicateRecordError, match="Record already exists: Acme"):
        repository.insert(EntityType.ACCOUNTS, AccountRecord(name="Acme"), created_by="csv-import")


def test_insert_wraps_other_store_errors() -> None:
    session = RecordingSession(flush_error=OperationalError("INSERT", {}, Exception("server closed")))
    repository = ImportRepository(session)  # type: ignore[arg-type]

    with pytest.raises(ImportStoreError, match="Insert failed"):
        repository.insert(EntityType.PROJECTS, ProjectRecord(name="Solar"), created_by="json-import")
