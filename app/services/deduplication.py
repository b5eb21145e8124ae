"""
app/services/deduplication.py

Per-record identity selection and the existence check against the store.
"""

from __future__ import annotations

import logging

from app.domain.errors import UnsupportedEntityTypeError
from app.domain.import_outcome import DuplicateCheckSpec, MatchCriterion, MatchMode
from app.domain.records import AccountRecord, CanonicalRecord, EntityType, ImportSource, ProjectRecord
from app.repositories.import_repository import ImportStore

logger = logging.getLogger(__name__)


def default_check_description(entity_type: EntityType, source: ImportSource) -> str:
    """
    Widest identity description for an entity/source pair.

    Reported when no row of a batch reached the duplicate check.
    """

    if entity_type is EntityType.ACCOUNTS:
        return "Name + Industry"
    if entity_type is EntityType.PROJECTS:
        if source is ImportSource.SPREADSHEET:
            return "Name + Region + Department"
        return "Name"
    raise UnsupportedEntityTypeError(entity_type)


def build_check_spec(
    entity_type: EntityType,
    record: CanonicalRecord,
    source: ImportSource,
) -> DuplicateCheckSpec:
    """
    Choose the identity criteria for ``record``.

    Optional identity fields that are absent on the record are dropped, so the
    check falls back to a coarser key instead of failing.
    """

    criteria: list[MatchCriterion] = [MatchCriterion(field="name", label="Name", value=record.name)]

    if entity_type is EntityType.ACCOUNTS:
        if not isinstance(record, AccountRecord):
            raise TypeError(f"Expected AccountRecord, got {type(record).__name__}.")
        if record.industry is not None:
            criteria.append(MatchCriterion(field="industry", label="Industry", value=record.industry))

    elif entity_type is EntityType.PROJECTS:
        if not isinstance(record, ProjectRecord):
            raise TypeError(f"Expected ProjectRecord, got {type(record).__name__}.")
        # Spreadsheet imports predate structured region/department columns and
        # match them inside the synthesized description.
        if source is ImportSource.SPREADSHEET:
            if record.region is not None:
                criteria.append(
                    MatchCriterion(
                        field="region",
                        label="Region",
                        value=record.region,
                        mode=MatchMode.DESCRIPTION_CONTAINS,
                    )
                )
            if record.department is not None:
                criteria.append(
                    MatchCriterion(
                        field="department",
                        label="Department",
                        value=record.department,
                        mode=MatchMode.DESCRIPTION_CONTAINS,
                    )
                )

    else:
        raise UnsupportedEntityTypeError(entity_type)

    return DuplicateCheckSpec(entity_type=entity_type, criteria=tuple(criteria))


class DuplicateChecker:
    """
    Runs one existence query per record against the import store.
    """

    def __init__(self, store: ImportStore) -> None:
        self._store = store

    def check_duplicate(
        self,
        entity_type: EntityType,
        record: CanonicalRecord,
        source: ImportSource = ImportSource.JSON,
    ) -> tuple[bool, DuplicateCheckSpec]:
        spec = build_check_spec(entity_type, record, source)
        existing = self._store.count_matching(entity_type, spec)
        if existing > 0:
            logger.info(
                "Skipping duplicate %s record name=%r check=%s existing=%s",
                entity_type.value,
                record.name,
                spec.describe(),
                existing,
            )
            return True, spec
        return False, spec
