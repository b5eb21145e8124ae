"""
Shared fixtures: an in-memory import store and an .xlsx writer.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

import openpyxl
import pytest

from app.config import ImportSettings
from app.domain.errors import DuplicateRecordError, ImportStoreError
from app.domain.import_outcome import DuplicateCheckSpec, MatchMode
from app.domain.records import CanonicalRecord, EntityType
from app.services.import_service import BatchImportService

PROJECT_HEADERS: tuple[str, ...] = (
    "Fiscal Year",
    "Project Number",
    "Project Type",
    "Region",
    "Country",
    "Department",
    "Framework",
    "Project Name",
    "Committed",
    "NAICS Sector",
    "Project Description",
    "Project Profile URL",
)


class InMemoryImportStore:
    """
    ImportStore double with commit/rollback semantics and injectable failures.
    """

    def __init__(
        self,
        *,
        fail_insert_names: Iterable[str] = (),
        fail_count_names: Iterable[str] = (),
        conflict_names: Iterable[str] = (),
    ) -> None:
        self.rows: dict[EntityType, list[CanonicalRecord]] = {entity: [] for entity in EntityType}
        self.created_by: list[str] = []
        self.count_calls: list[DuplicateCheckSpec] = []
        self.commits = 0
        self.rollbacks = 0
        self._pending: list[tuple[EntityType, CanonicalRecord, str]] = []
        self._fail_insert_names = set(fail_insert_names)
        self._fail_count_names = set(fail_count_names)
        self._conflict_names = set(conflict_names)

    def count_matching(self, entity_type: EntityType, spec: DuplicateCheckSpec) -> int:
        self.count_calls.append(spec)
        name = spec.criteria[0].value
        if name in self._fail_count_names:
            raise ImportStoreError("Duplicate check failed: connection reset")
        return sum(1 for stored in self.rows[entity_type] if self._matches(stored, spec))

    def insert(self, entity_type: EntityType, record: CanonicalRecord, *, created_by: str) -> None:
        if record.name in self._fail_insert_names:
            raise ImportStoreError(f"Insert failed: value too long for {record.name}")
        if record.name in self._conflict_names:
            raise DuplicateRecordError(f"Record already exists: {record.name}")
        self._pending.append((entity_type, record, created_by))

    def commit(self) -> None:
        self.commits += 1
        for entity_type, record, created_by in self._pending:
            self.rows[entity_type].append(record)
            self.created_by.append(created_by)
        self._pending.clear()

    def rollback(self) -> None:
        self.rollbacks += 1
        self._pending.clear()

    @staticmethod
    def _matches(stored: CanonicalRecord, spec: DuplicateCheckSpec) -> bool:
        for criterion in spec.criteria:
            if criterion.mode is MatchMode.DESCRIPTION_CONTAINS:
                description = getattr(stored, "description", None) or ""
                if criterion.description_fragment not in description:
                    return False
            elif getattr(stored, criterion.field) != criterion.value:
                return False
        return True


@pytest.fixture()
def store() -> InMemoryImportStore:
    return InMemoryImportStore()


@pytest.fixture()
def import_service() -> BatchImportService:
    return BatchImportService(settings=ImportSettings(store_timeout_seconds=1.0))


@pytest.fixture()
def write_workbook(tmp_path: Path) -> Callable[..., str]:
    """
    Write an .xlsx with one header row and return its path.
    """

    def _write(
        headers: Sequence[Any],
        rows: Sequence[Sequence[Any]],
        *,
        sheet_name: str = "Projects",
        filename: str = "projects.xlsx",
        extra_sheets: Sequence[str] = (),
    ) -> str:
        workbook = openpyxl.Workbook()
        worksheet = workbook.active
        worksheet.title = sheet_name
        worksheet.append(list(headers))
        for row in rows:
            worksheet.append(list(row))
        for extra in extra_sheets:
            workbook.create_sheet(extra)
        path = tmp_path / filename
        workbook.save(path)
        return str(path)

    return _write


def project_row(
    name: str | None,
    *,
    region: str | None = "Africa",
    department: str | None = "Finance",
    committed: Any = 2_500_000,
    naics_sector: str | None = "Utilities",
    project_type: str | None = "Active Project",
    description: str | None = "Solar mini-grids",
    country: str | None = "Kenya",
) -> list[Any]:
    """
    One data row in PROJECT_HEADERS order.
    """

    return [
        2024,
        "P-001",
        project_type,
        region,
        country,
        department,
        "Energy",
        name,
        committed,
        naics_sector,
        description,
        "https://example.org/p/1",
    ]
