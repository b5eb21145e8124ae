"""
tests/test_deduplication.py

Identity selection and the duplicate check against a store.
"""

from __future__ import annotations

import pytest

from app.domain.import_outcome import MatchMode
from app.domain.records import AccountRecord, EntityType, ImportSource, ProjectRecord
from app.services.deduplication import DuplicateChecker, build_check_spec, default_check_description

from conftest import InMemoryImportStore


def test_account_identity_includes_industry_when_present() -> None:
    spec = build_check_spec(EntityType.ACCOUNTS, AccountRecord(name="Acme", industry="Retail"), ImportSource.JSON)

    assert spec.fields == ("name", "industry")
    assert spec.describe() == "Name + Industry"


def test_account_identity_falls_back_to_name() -> None:
    spec = build_check_spec(EntityType.ACCOUNTS, AccountRecord(name="Acme"), ImportSource.JSON)

    assert spec.fields == ("name",)
    assert spec.describe() == "Name"


def test_json_project_identity_is_name_only() -> None:
    record = ProjectRecord(name="Solar", region="Africa", department="Finance")

    spec = build_check_spec(EntityType.PROJECTS, record, ImportSource.JSON)

    assert spec.describe() == "Name"


def test_spreadsheet_project_identity_matches_description_fragments() -> None:
    record = ProjectRecord(name="Solar", region="Africa", department="Finance")

    spec = build_check_spec(EntityType.PROJECTS, record, ImportSource.SPREADSHEET)

    assert spec.describe() == "Name + Region + Department"
    assert [criterion.mode for criterion in spec.criteria[1:]] == [
        MatchMode.DESCRIPTION_CONTAINS,
        MatchMode.DESCRIPTION_CONTAINS,
    ]
    assert spec.criteria[1].description_fragment == "Region: Africa"


def test_spreadsheet_identity_drops_absent_department() -> None:
    spec = build_check_spec(EntityType.PROJECTS, ProjectRecord(name="Solar", region="Asia"), ImportSource.SPREADSHEET)

    assert spec.describe() == "Name + Region"


def test_mismatched_record_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        build_check_spec(EntityType.ACCOUNTS, ProjectRecord(name="Solar"), ImportSource.JSON)


@pytest.mark.parametrize(
    ("entity_type", "source", "expected"),
    [
        (EntityType.ACCOUNTS, ImportSource.JSON, "Name + Industry"),
        (EntityType.PROJECTS, ImportSource.SPREADSHEET, "Name + Region + Department"),
        (EntityType.PROJECTS, ImportSource.JSON, "Name"),
        (EntityType.PROJECTS, ImportSource.DEMOCRACYLAB, "Name"),
    ],
)
def test_default_check_description(entity_type, source, expected) -> None:
    assert default_check_description(entity_type, source) == expected


def test_checker_reports_existing_record() -> None:
    store = InMemoryImportStore()
    store.rows[EntityType.ACCOUNTS].append(AccountRecord(name="Acme", industry="Retail"))
    checker = DuplicateChecker(store)

    is_duplicate, spec = checker.check_duplicate(
        EntityType.ACCOUNTS,
        AccountRecord(name="Acme", industry="Retail"),
    )
    other_industry, _ = checker.check_duplicate(
        EntityType.ACCOUNTS,
        AccountRecord(name="Acme", industry="Energy"),
    )

    assert is_duplicate is True
    assert spec.describe() == "Name + Industry"
    assert other_industry is False
    assert len(store.count_calls) == 2
