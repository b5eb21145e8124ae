"""
app/api/routers/imports.py

Spreadsheet, JSON and project-feed import endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_import_store
from app.domain.errors import ImportInputError, UnsupportedEntityTypeError
from app.domain.import_outcome import ImportReport
from app.domain.records import EntityType, ImportSource, ProjectRecord
from app.repositories.import_repository import ImportStore
from app.schemas.imports import (
    DataImportRequest,
    DataImportResponse,
    DemocracyLabImportRequest,
    ExcelImportRequest,
    ExcelPreviewResponse,
    ExcelSheetsRequest,
    ExcelSheetsResponse,
    ImportResponse,
    ProjectRecordResponse,
)
from app.services.import_service import BatchImportService, get_batch_import_service

router = APIRouter(prefix="/api/import", tags=["import"])


def _bad_request(exc: ImportInputError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _to_import_response(report: ImportReport) -> ImportResponse:
    return ImportResponse(
        success=report.success,
        message=report.message,
        records_processed=report.total_processed,
        records_inserted=report.inserted_count,
        records_skipped=report.skipped_count,
        duplicate_check_columns=report.duplicate_check_columns,
        errors=report.errors,
    )


def _to_record_response(record: ProjectRecord) -> ProjectRecordResponse:
    return ProjectRecordResponse(
        project_name=record.name,
        fiscal_year=record.fiscal_year,
        project_number=record.project_number,
        project_type=record.project_type,
        region=record.region,
        country=record.country,
        department=record.department,
        framework=record.framework,
        committed=record.committed,
        naics_sector=record.naics_sector,
        project_description=record.project_description,
        project_profile_url=record.project_profile_url,
    )


@router.post("/excel", response_model=ImportResponse)
def import_excel(
    payload: ExcelImportRequest,
    store: ImportStore = Depends(get_import_store),
    service: BatchImportService = Depends(get_batch_import_service),
) -> ImportResponse:
    """
    Import project rows from a worksheet on the API host.
    """

    try:
        if EntityType.parse(payload.table_name) is not EntityType.PROJECTS:
            raise UnsupportedEntityTypeError(payload.table_name)
        report = service.import_workbook(payload.file_path, store=store, sheet_name=payload.sheet_name)
    except ImportInputError as exc:
        raise _bad_request(exc) from exc
    return _to_import_response(report)


@router.post("/excel/preview", response_model=ExcelPreviewResponse)
def preview_excel(
    payload: ExcelImportRequest,
    service: BatchImportService = Depends(get_batch_import_service),
) -> ExcelPreviewResponse:
    try:
        preview = service.preview_workbook(payload.file_path, sheet_name=payload.sheet_name)
    except ImportInputError as exc:
        raise _bad_request(exc) from exc

    return ExcelPreviewResponse(
        message=f"Preview of {preview.total_records} records (showing first {len(preview.records)})",
        total_records=preview.total_records,
        preview=[_to_record_response(record) for record in preview.records],
    )


@router.post("/excel/sheets", response_model=ExcelSheetsResponse)
def list_excel_sheets(
    payload: ExcelSheetsRequest,
    service: BatchImportService = Depends(get_batch_import_service),
) -> ExcelSheetsResponse:
    try:
        sheets = service.list_sheets(payload.file_path)
    except ImportInputError as exc:
        raise _bad_request(exc) from exc
    return ExcelSheetsResponse(sheets=sheets)


@router.post("/data", response_model=DataImportResponse)
def import_data(
    payload: DataImportRequest,
    store: ImportStore = Depends(get_import_store),
    service: BatchImportService = Depends(get_batch_import_service),
) -> DataImportResponse:
    """
    Import JSON rows into the requested table.
    """

    try:
        entity_type = EntityType.parse(payload.table_name)
    except ImportInputError as exc:
        raise _bad_request(exc) from exc

    report = service.import_batch(
        entity_type,
        payload.data,
        store=store,
        source=ImportSource.JSON,
        headers=payload.headers,
    )
    return DataImportResponse(
        success=report.success,
        message=report.message,
        imported_count=report.inserted_count,
        skipped_count=report.skipped_count,
        duplicate_check_columns=report.duplicate_check_columns,
        errors=report.errors,
    )


@router.post("/democracylab", response_model=ImportResponse)
def import_democracylab(
    payload: DemocracyLabImportRequest,
    store: ImportStore = Depends(get_import_store),
    service: BatchImportService = Depends(get_batch_import_service),
) -> ImportResponse:
    report = service.import_democracylab(
        [project.model_dump() for project in payload.projects],
        store=store,
    )
    return _to_import_response(report)
