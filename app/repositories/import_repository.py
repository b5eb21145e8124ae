"""
app/repositories/import_repository.py

Store operations used by the import pipeline: one existence count per
record and single-row inserts.
"""

from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.errors import DuplicateRecordError, ImportStoreError, UnsupportedEntityTypeError
from app.domain.import_outcome import DuplicateCheckSpec, MatchMode
from app.domain.records import AccountRecord, CanonicalRecord, EntityType, ProjectRecord
from db.models.account import Account
from db.models.project import Project


class ImportStore(Protocol):
    """
    Relational-store surface the import pipeline depends on.
    """

    def count_matching(self, entity_type: EntityType, spec: DuplicateCheckSpec) -> int:
        ...

    def insert(self, entity_type: EntityType, record: CanonicalRecord, *, created_by: str) -> None:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...


def _model_for(entity_type: EntityType) -> type[Project] | type[Account]:
    if entity_type is EntityType.PROJECTS:
        return Project
    if entity_type is EntityType.ACCOUNTS:
        return Account
    raise UnsupportedEntityTypeError(entity_type)


class ImportRepository:
    """
    SQLAlchemy implementation of ImportStore.

    Callers own the transaction: commit after a successful insert, roll back
    after any failure so the next row starts clean.
    """

    def __init__(self, session: Session, *, timeout_seconds: float | None = None) -> None:
        self._session = session
        self._timeout_ms = int(timeout_seconds * 1000) if timeout_seconds else None

    def count_matching(self, entity_type: EntityType, spec: DuplicateCheckSpec) -> int:
        model = _model_for(entity_type)
        stmt = select(func.count()).select_from(model)
        for criterion in spec.criteria:
            if criterion.mode is MatchMode.DESCRIPTION_CONTAINS:
                stmt = stmt.where(model.description.contains(criterion.description_fragment, autoescape=True))
            else:
                stmt = stmt.where(getattr(model, criterion.field) == criterion.value)

        try:
            self._apply_timeout()
            return int(self._session.execute(stmt).scalar_one())
        except SQLAlchemyError as exc:
            raise ImportStoreError(f"Duplicate check failed: {exc}") from exc

    def insert(self, entity_type: EntityType, record: CanonicalRecord, *, created_by: str) -> None:
        row = _model_for(entity_type)(**self._payload(entity_type, record, created_by))
        try:
            self._apply_timeout()
            self._session.add(row)
            self._session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(f"Record already exists: {record.name}") from exc
        except SQLAlchemyError as exc:
            raise ImportStoreError(f"Insert failed: {exc}") from exc

    def commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            raise ImportStoreError(f"Commit failed: {exc}") from exc

    def rollback(self) -> None:
        self._session.rollback()

    def _apply_timeout(self) -> None:
        if self._timeout_ms is not None:
            self._session.execute(text(f"SET LOCAL statement_timeout = {self._timeout_ms}"))

    @staticmethod
    def _payload(entity_type: EntityType, record: CanonicalRecord, created_by: str) -> dict[str, Any]:
        audit = {"created_by": created_by, "modified_user_id": created_by}
        if entity_type is EntityType.PROJECTS and isinstance(record, ProjectRecord):
            return {
                "name": record.name,
                "description": record.description,
                "status": record.status,
                "priority": record.priority,
                **audit,
            }
        if entity_type is EntityType.ACCOUNTS and isinstance(record, AccountRecord):
            return {
                "name": record.name,
                "account_type": record.account_type,
                "industry": record.industry,
                "phone_office": record.phone,
                "website": record.website,
                **audit,
            }
        raise TypeError(f"{type(record).__name__} cannot be stored in {entity_type.value}.")
