"""
app/services package marker.
"""

from app.services.deduplication import DuplicateChecker, build_check_spec
from app.services.derived_fields import DerivedFieldEngine
from app.services.import_service import BatchImportService, WorkbookPreview, get_batch_import_service
from app.services.recommendation_service import (
    PREFERENCE_CRITERIA,
    Preference,
    PreferenceCriteria,
    RecommendationService,
    get_recommendation_service,
    get_recommendations,
)

__all__ = [
    "BatchImportService",
    "DerivedFieldEngine",
    "DuplicateChecker",
    "PREFERENCE_CRITERIA",
    "Preference",
    "PreferenceCriteria",
    "RecommendationService",
    "WorkbookPreview",
    "build_check_spec",
    "get_batch_import_service",
    "get_recommendation_service",
    "get_recommendations",
]
