"""
app/schemas package marker.
"""

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
from app.schemas.projects import ProjectListResponse, StoredProjectResponse
from app.schemas.recommendations import RecommendationRequest, RecommendationResponse

__all__ = [
    "DataImportRequest",
    "DataImportResponse",
    "DemocracyLabImportRequest",
    "ExcelImportRequest",
    "ExcelPreviewResponse",
    "ExcelSheetsRequest",
    "ExcelSheetsResponse",
    "ImportResponse",
    "ProjectListResponse",
    "ProjectRecordResponse",
    "RecommendationRequest",
    "RecommendationResponse",
    "StoredProjectResponse",
]
