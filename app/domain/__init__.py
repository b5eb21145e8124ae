"""
app/domain package marker.
"""

from app.domain.errors import (
    DuplicateRecordError,
    ImportInputError,
    ImportStoreError,
    UnsupportedEntityTypeError,
    WorkbookReadError,
)
from app.domain.import_outcome import (
    DuplicateCheckSpec,
    ImportOutcome,
    ImportReport,
    MatchCriterion,
    MatchMode,
    OutcomeStatus,
)
from app.domain.records import (
    AccountRecord,
    CanonicalRecord,
    EntityType,
    ImportSource,
    ProjectRecord,
    Recommendation,
)

__all__ = [
    "AccountRecord",
    "CanonicalRecord",
    "DuplicateCheckSpec",
    "DuplicateRecordError",
    "EntityType",
    "ImportInputError",
    "ImportOutcome",
    "ImportReport",
    "ImportSource",
    "ImportStoreError",
    "MatchCriterion",
    "MatchMode",
    "OutcomeStatus",
    "ProjectRecord",
    "Recommendation",
    "UnsupportedEntityTypeError",
    "WorkbookReadError",
]
