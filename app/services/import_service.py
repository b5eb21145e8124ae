"""
app/services/import_service.py

Batch import orchestration for spreadsheet, JSON and project-feed inputs.

Every input shape runs through the same per-row pipeline:

    build record -> derive fields -> duplicate check -> insert

Input-level problems (unreadable workbook, unsupported table) raise before
any row is touched. After that, every row produces exactly one outcome and a
failing row never stops the batch. Rows are committed one at a time, so the
outcomes in the report match what is in the store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Optional

from sqlalchemy.orm import Session

from app.config import ImportSettings, get_import_settings
from app.domain.errors import DuplicateRecordError, UnsupportedEntityTypeError
from app.domain.import_outcome import DuplicateCheckSpec, ImportOutcome, ImportReport, OutcomeStatus
from app.domain.records import CanonicalRecord, EntityType, ImportSource, ProjectRecord
from app.mappers.header_resolver import (
    ACCOUNT_JSON_CANDIDATES,
    PROJECT_COLUMN_CANDIDATES,
    PROJECT_JSON_CANDIDATES,
    ColumnResolution,
    HeaderResolver,
)
from app.mappers.record_builder import RecordBuilder, collect_headers, row_values
from app.readers.workbook_reader import list_sheet_names, read_sheet
from app.repositories.import_repository import ImportRepository, ImportStore
from app.services.deduplication import DuplicateChecker, default_check_description
from app.services.derived_fields import DerivedFieldEngine

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 10

RowBuilder = Callable[[Any], Optional[CanonicalRecord]]


@dataclass(frozen=True)
class WorkbookPreview:
    """
    First records of a worksheet, built but not derived or stored.
    """

    total_records: int
    records: list[ProjectRecord] = field(default_factory=list)


class BatchImportService:
    """
    Coordinates record building, derived fields, deduplication and inserts.
    """

    def __init__(
        self,
        *,
        settings: ImportSettings,
        builder: RecordBuilder | None = None,
        derived_fields: DerivedFieldEngine | None = None,
    ) -> None:
        self._settings = settings
        self._builder = builder or RecordBuilder()
        self._derived_fields = derived_fields or DerivedFieldEngine()
        self._spreadsheet_resolver = HeaderResolver(PROJECT_COLUMN_CANDIDATES)
        self._json_resolvers: dict[EntityType, HeaderResolver] = {
            EntityType.PROJECTS: HeaderResolver(PROJECT_JSON_CANDIDATES),
            EntityType.ACCOUNTS: HeaderResolver(ACCOUNT_JSON_CANDIDATES),
        }

    def open_store(self, session: Session) -> ImportRepository:
        return ImportRepository(session, timeout_seconds=self._settings.store_timeout_seconds)

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def import_batch(
        self,
        entity_type: EntityType,
        rows: Sequence[Mapping[str, Any]],
        *,
        store: ImportStore,
        source: ImportSource = ImportSource.JSON,
        headers: Sequence[str] | None = None,
    ) -> ImportReport:
        """
        Import JSON objects (field name -> raw JSON value) into ``entity_type``.

        Field names are resolved once for the whole batch from ``headers``
        plus every key seen in ``rows``.
        """

        if not isinstance(entity_type, EntityType):
            raise UnsupportedEntityTypeError(entity_type)

        shared_headers = collect_headers(rows, headers)
        resolution = self._json_resolvers[entity_type].resolve(shared_headers)
        logger.info(
            "JSON import started table=%s source=%s rows=%s resolved=%s",
            entity_type.value,
            source.value,
            len(rows),
            dict(resolution.field_to_index),
        )

        def build(row: Mapping[str, Any]) -> CanonicalRecord | None:
            if not isinstance(row, Mapping):
                raise ValueError(f"Expected a JSON object, got {type(row).__name__}.")
            return self._build(entity_type, row_values(row, shared_headers), resolution)

        return self._run(
            entity_type=entity_type,
            source=source,
            rows=rows,
            build=build,
            store=store,
        )

    def import_workbook(
        self,
        file_path: str,
        *,
        store: ImportStore,
        sheet_name: str | None = None,
    ) -> ImportReport:
        """
        Import one worksheet of project rows.
        """

        sheet = read_sheet(file_path, sheet_name)
        resolution = self._spreadsheet_resolver.resolve(sheet.headers)
        logger.info(
            "Spreadsheet import started file=%s sheet=%s rows=%s resolved=%s",
            file_path,
            sheet.sheet_name,
            len(sheet.rows),
            dict(resolution.field_to_index),
        )

        return self._run(
            entity_type=EntityType.PROJECTS,
            source=ImportSource.SPREADSHEET,
            rows=sheet.rows,
            build=lambda row: self._builder.build_project(row, resolution),
            store=store,
        )

    def import_democracylab(
        self,
        projects: Sequence[Mapping[str, Any]],
        *,
        store: ImportStore,
    ) -> ImportReport:
        """
        Import entries of a DemocracyLab project feed.
        """

        return self._run(
            entity_type=EntityType.PROJECTS,
            source=ImportSource.DEMOCRACYLAB,
            rows=projects,
            build=self._builder.build_democracylab_project,
            store=store,
        )

    def preview_workbook(
        self,
        file_path: str,
        *,
        sheet_name: str | None = None,
        limit: int = PREVIEW_LIMIT,
    ) -> WorkbookPreview:
        sheet = read_sheet(file_path, sheet_name)
        resolution = self._spreadsheet_resolver.resolve(sheet.headers)
        records = [
            record
            for record in (self._builder.build_project(row, resolution) for row in sheet.rows)
            if record is not None
        ]
        return WorkbookPreview(total_records=len(records), records=records[: max(0, limit)])

    @staticmethod
    def list_sheets(file_path: str) -> list[str]:
        return list_sheet_names(file_path)

    # ------------------------------------------------------------------
    # Pipeline internals
    # ------------------------------------------------------------------

    def _build(
        self,
        entity_type: EntityType,
        row: Sequence[Any],
        resolution: ColumnResolution,
    ) -> CanonicalRecord | None:
        if entity_type is EntityType.PROJECTS:
            return self._builder.build_project(row, resolution)
        if entity_type is EntityType.ACCOUNTS:
            return self._builder.build_account(row, resolution)
        raise UnsupportedEntityTypeError(entity_type)

    def _run(
        self,
        *,
        entity_type: EntityType,
        source: ImportSource,
        rows: Sequence[Any],
        build: RowBuilder,
        store: ImportStore,
    ) -> ImportReport:
        checker = DuplicateChecker(store)
        created_by = source.audit_label(entity_type)
        outcomes: list[ImportOutcome] = []
        discarded = 0

        for row_number, raw_row in enumerate(rows, start=1):
            try:
                record = build(raw_row)
                if record is None:
                    discarded += 1
                    continue
                record = self._derived_fields.apply(record, source)
                outcomes.append(
                    self._store_record(
                        row_number=row_number,
                        entity_type=entity_type,
                        source=source,
                        record=record,
                        checker=checker,
                        store=store,
                        created_by=created_by,
                    )
                )
            except Exception as exc:  # noqa: BLE001
                self._rollback(store)
                outcomes.append(
                    ImportOutcome(
                        row_number=row_number,
                        status=OutcomeStatus.FAILED,
                        message=str(exc) or type(exc).__name__,
                    )
                )

        return self._summarize(
            entity_type=entity_type,
            source=source,
            total=len(rows),
            discarded=discarded,
            outcomes=outcomes,
        )

    @staticmethod
    def _store_record(
        *,
        row_number: int,
        entity_type: EntityType,
        source: ImportSource,
        record: CanonicalRecord,
        checker: DuplicateChecker,
        store: ImportStore,
        created_by: str,
    ) -> ImportOutcome:
        is_duplicate, spec = checker.check_duplicate(entity_type, record, source)
        if is_duplicate:
            return ImportOutcome(row_number=row_number, status=OutcomeStatus.SKIPPED, duplicate_check=spec)

        try:
            store.insert(entity_type, record, created_by=created_by)
            store.commit()
        except DuplicateRecordError:
            # Another import inserted the same identity after our check.
            store.rollback()
            logger.info(
                "Skipping %s record name=%r: unique constraint hit after duplicate check",
                entity_type.value,
                record.name,
            )
            return ImportOutcome(row_number=row_number, status=OutcomeStatus.SKIPPED, duplicate_check=spec)

        return ImportOutcome(row_number=row_number, status=OutcomeStatus.INSERTED, duplicate_check=spec)

    def _summarize(
        self,
        *,
        entity_type: EntityType,
        source: ImportSource,
        total: int,
        discarded: int,
        outcomes: list[ImportOutcome],
    ) -> ImportReport:
        inserted = sum(1 for outcome in outcomes if outcome.status is OutcomeStatus.INSERTED)
        skipped = sum(1 for outcome in outcomes if outcome.status is OutcomeStatus.SKIPPED)
        failures = [outcome for outcome in outcomes if outcome.status is OutcomeStatus.FAILED]

        errors: list[str] = []
        for outcome in failures:
            self._record_error(errors, outcome)
        omitted = len(failures) - len(errors)
        if omitted > 0:
            errors.append(f"... and {omitted} more errors")

        first_spec = next(
            (outcome.duplicate_check for outcome in outcomes if outcome.duplicate_check is not None),
            None,
        )
        success = not failures or inserted > 0
        message = _summary_message(
            table=entity_type.value,
            total=total,
            inserted=inserted,
            skipped=skipped,
            failed=len(failures),
            success=success,
        )
        logger.info(
            "Import finished table=%s source=%s total=%s inserted=%s skipped=%s discarded=%s failed=%s",
            entity_type.value,
            source.value,
            total,
            inserted,
            skipped,
            discarded,
            len(failures),
        )

        return ImportReport(
            entity_type=entity_type,
            total_processed=total,
            inserted_count=inserted,
            skipped_count=skipped,
            discarded_count=discarded,
            success=success,
            message=message,
            duplicate_check_columns=_describe_check(first_spec, entity_type, source),
            errors=errors,
            outcomes=outcomes,
        )

    def _record_error(self, errors: list[str], outcome: ImportOutcome) -> None:
        line = outcome.error_line()
        if self._settings.log_row_errors:
            logger.warning("Import row failed %s", line)
        if len(errors) < self._settings.max_reported_errors:
            errors.append(line)

    @staticmethod
    def _rollback(store: ImportStore) -> None:
        try:
            store.rollback()
        except Exception:  # noqa: BLE001
            logger.exception("Rollback after failed import row did not complete")


def _describe_check(
    spec: DuplicateCheckSpec | None,
    entity_type: EntityType,
    source: ImportSource,
) -> str:
    if spec is not None:
        return spec.describe()
    return default_check_description(entity_type, source)


def _summary_message(
    *,
    table: str,
    total: int,
    inserted: int,
    skipped: int,
    failed: int,
    success: bool,
) -> str:
    if not success:
        return f"Failed to import data into {table}"
    if failed:
        return (
            f"Imported {inserted} of {total} records into {table} "
            f"with {failed} errors, skipped {skipped} duplicates"
        )
    if skipped:
        return f"Successfully imported {inserted} records into {table}, skipped {skipped} duplicates"
    return f"Successfully imported {inserted} records into {table}"


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_batch_import_service() -> BatchImportService:
    """
    Build and cache the import service with env-driven settings.
    """

    return BatchImportService(settings=get_import_settings())
