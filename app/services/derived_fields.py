"""
app/services/derived_fields.py

Secondary attributes computed from imported source fields: project priority
and status, account type, and the synthesized project description.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from app.domain.errors import UnsupportedEntityTypeError
from app.domain.records import AccountRecord, CanonicalRecord, ImportSource, ProjectRecord
from db.models.account import AccountType

HIGH_PRIORITY_THRESHOLD = 10_000_000.0
MEDIUM_PRIORITY_THRESHOLD = 1_000_000.0

DEFAULT_STATUS = "Active"

# Checked in order; the first keyword found in the project type wins.
_STATUS_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("active", "Active"),
    ("planned", "Planning"),
    ("completed", "Completed"),
)

DESCRIPTION_SEPARATOR = "\n\n"


class ProjectPriority:
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def priority_from_committed(committed: float | None) -> str | None:
    """
    Tier a committed amount. Each threshold is inclusive at its lower bound.
    """

    if committed is None:
        return None
    if committed >= HIGH_PRIORITY_THRESHOLD:
        return ProjectPriority.HIGH
    if committed >= MEDIUM_PRIORITY_THRESHOLD:
        return ProjectPriority.MEDIUM
    return ProjectPriority.LOW


def status_from_project_type(project_type: str | None) -> str:
    if project_type:
        lowered = project_type.lower()
        for keyword, status in _STATUS_KEYWORDS:
            if keyword in lowered:
                return status
    return DEFAULT_STATUS


def account_type_for(record: AccountRecord) -> str:
    if record.email or record.phone:
        return AccountType.CUSTOMER
    return AccountType.PROSPECT


def synthesize_description(record: ProjectRecord) -> str | None:
    """
    Merge descriptive spreadsheet columns into one labeled block.

    The free-text description comes first, unlabeled; the remaining fields
    follow in a fixed order as "Label: value" lines. Absent fields are skipped.
    """

    parts: list[str | None] = [
        record.project_description,
        _labeled("Department", record.department),
        _labeled("Region", record.region),
        _labeled("Country", record.country),
        _labeled("Framework", record.framework),
        _labeled("NAICS Sector", record.naics_sector),
        _labeled("Profile URL", record.project_profile_url),
    ]
    return _join_parts(parts)


def synthesize_feed_description(record: ProjectRecord) -> str | None:
    """
    Description for DemocracyLab feed projects: text, then the project URL.
    """

    return _join_parts(
        [
            record.project_description,
            _labeled("Project URL", record.project_profile_url),
        ]
    )


class DerivedFieldEngine:
    """
    Applies derived-field rules to a freshly built record.
    """

    def apply(self, record: CanonicalRecord, source: ImportSource) -> CanonicalRecord:
        if isinstance(record, ProjectRecord):
            return self._apply_project(record, source)
        if isinstance(record, AccountRecord):
            return replace(record, account_type=account_type_for(record))
        raise UnsupportedEntityTypeError(type(record).__name__)

    @staticmethod
    def _apply_project(record: ProjectRecord, source: ImportSource) -> ProjectRecord:
        if source is ImportSource.SPREADSHEET:
            return replace(
                record,
                description=synthesize_description(record),
                priority=priority_from_committed(record.committed),
                status=status_from_project_type(record.project_type),
            )
        if source is ImportSource.DEMOCRACYLAB:
            return replace(
                record,
                description=synthesize_feed_description(record),
                status=DEFAULT_STATUS,
            )
        if source is ImportSource.JSON:
            return replace(
                record,
                description=record.project_description,
                status=DEFAULT_STATUS,
            )
        raise ValueError(f"Unsupported import source: {source!r}")


def _labeled(label: str, value: str | None) -> str | None:
    if value is None:
        return None
    return f"{label}: {value}"


def _join_parts(parts: Sequence[str | None]) -> str | None:
    present = [part for part in parts if part]
    if not present:
        return None
    return DESCRIPTION_SEPARATOR.join(present)
