"""
app/schemas/imports.py

Request and response schemas for import endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ExcelImportRequest(BaseModel):
    """
    Spreadsheet import / preview request. The file must be readable by the API host.
    """

    file_path: str = Field(..., min_length=1)
    sheet_name: str | None = None
    table_name: str = "projects"


class ExcelSheetsRequest(BaseModel):
    file_path: str = Field(..., min_length=1)


class DataImportRequest(BaseModel):
    """
    JSON batch import: one object per row, keyed by source field name.

    Rows are not validated here; a row that is not an object fails on its own.
    """

    data: list[Any] = Field(default_factory=list)
    headers: list[str] = Field(default_factory=list)
    table_name: str
    source: str = ""
    file_source: str = ""


class DemocracyLabProjectPayload(BaseModel):
    project_name: str
    project_description: str | None = None
    project_url: str | None = None


class DemocracyLabImportRequest(BaseModel):
    projects: list[DemocracyLabProjectPayload] = Field(default_factory=list)


class DataImportResponse(BaseModel):
    """
    Aggregate outcome of a JSON batch import.
    """

    success: bool
    message: str
    imported_count: int = Field(..., ge=0)
    skipped_count: int = Field(..., ge=0)
    duplicate_check_columns: str | None = None
    errors: list[str] = Field(default_factory=list)


class ImportResponse(BaseModel):
    """
    Aggregate outcome of a spreadsheet or project-feed import.
    """

    success: bool
    message: str
    records_processed: int | None = Field(default=None, ge=0)
    records_inserted: int | None = Field(default=None, ge=0)
    records_skipped: int | None = Field(default=None, ge=0)
    duplicate_check_columns: str | None = None
    errors: list[str] = Field(default_factory=list)


class ProjectRecordResponse(BaseModel):
    project_name: str
    fiscal_year: str | None = None
    project_number: str | None = None
    project_type: str | None = None
    region: str | None = None
    country: str | None = None
    department: str | None = None
    framework: str | None = None
    committed: float | None = None
    naics_sector: str | None = None
    project_description: str | None = None
    project_profile_url: str | None = None


class ExcelPreviewResponse(BaseModel):
    success: bool = True
    message: str
    total_records: int = Field(..., ge=0)
    preview: list[ProjectRecordResponse] = Field(default_factory=list)


class ExcelSheetsResponse(BaseModel):
    success: bool = True
    sheets: list[str] = Field(default_factory=list)
