"""
app/domain/records.py

Canonical record types produced by the import pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from app.domain.errors import UnsupportedEntityTypeError


class EntityType(str, Enum):
    """
    Target tables an import may write to.
    """

    PROJECTS = "projects"
    ACCOUNTS = "accounts"

    @classmethod
    def parse(cls, raw: str) -> "EntityType":
        """
        Resolve a request-supplied table name, raising on anything unsupported.
        """

        normalized = (raw or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise UnsupportedEntityTypeError(raw) from exc


class ImportSource(str, Enum):
    """
    Where a batch came from. Drives the project duplicate check and audit labels.
    """

    SPREADSHEET = "spreadsheet"
    JSON = "json"
    DEMOCRACYLAB = "democracylab"

    def audit_label(self, entity_type: EntityType) -> str:
        """
        Value written to created_by / modified_user_id for imported rows.
        """

        if self is ImportSource.SPREADSHEET:
            return "excel-import"
        if self is ImportSource.DEMOCRACYLAB:
            return "democracylab-import"
        if entity_type is EntityType.ACCOUNTS:
            return "csv-import"
        return "json-import"


@dataclass(frozen=True)
class ProjectRecord:
    """
    Normalized project row.

    Source fields are copied from the input; status, priority and description
    are filled in by the derived field engine.
    """

    name: str
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
    status: str | None = None
    priority: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class AccountRecord:
    """
    Normalized account row.
    """

    name: str
    industry: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    account_type: str | None = None


CanonicalRecord = Union[ProjectRecord, AccountRecord]


@dataclass
class Recommendation:
    """
    Project surfaced to a user, with user-editable annotations.
    """

    id: int
    project: ProjectRecord
    tags: list[str] = field(default_factory=list)
    starred: bool = False
    comment: str = ""
