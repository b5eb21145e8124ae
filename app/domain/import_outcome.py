"""
app/domain/import_outcome.py

Per-row outcomes and the aggregate report of one batch import.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from app.domain.records import EntityType


class MatchMode(str, Enum):
    EXACT = "exact"
    DESCRIPTION_CONTAINS = "description_contains"


@dataclass(frozen=True)
class MatchCriterion:
    """
    One predicate of a duplicate check.

    DESCRIPTION_CONTAINS criteria test the stored description for the
    labeled fragment (e.g. "Region: Africa") instead of a structured column.
    """

    field: str
    label: str
    value: Any
    mode: MatchMode = MatchMode.EXACT

    @property
    def description_fragment(self) -> str:
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class DuplicateCheckSpec:
    """
    Ordered identity criteria used to decide whether a record already exists.
    """

    entity_type: EntityType
    criteria: tuple[MatchCriterion, ...]

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(criterion.field for criterion in self.criteria)

    def describe(self) -> str:
        return " + ".join(criterion.label for criterion in self.criteria)


class OutcomeStatus(str, Enum):
    INSERTED = "inserted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ImportOutcome:
    """
    Result of processing one input row.
    """

    row_number: int
    status: OutcomeStatus
    message: str | None = None
    duplicate_check: DuplicateCheckSpec | None = None

    def error_line(self) -> str:
        return f"Row {self.row_number}: {self.message}"


@dataclass(frozen=True)
class ImportReport:
    """
    End-of-run import summary.
    """

    entity_type: EntityType
    total_processed: int
    inserted_count: int
    skipped_count: int
    discarded_count: int
    success: bool
    message: str
    duplicate_check_columns: str | None
    errors: list[str] = field(default_factory=list)
    outcomes: list[ImportOutcome] = field(default_factory=list)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is OutcomeStatus.FAILED)
