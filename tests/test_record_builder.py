"""
tests/test_record_builder.py

Record assembly from resolved rows.
"""

from __future__ import annotations

import pytest

from app.mappers.header_resolver import (
    ACCOUNT_JSON_CANDIDATES,
    PROJECT_COLUMN_CANDIDATES,
    HeaderResolver,
)
from app.mappers.record_builder import RecordBuilder, collect_headers, row_values

from conftest import PROJECT_HEADERS, project_row


@pytest.fixture()
def builder() -> RecordBuilder:
    return RecordBuilder()


@pytest.fixture()
def project_resolution():
    return HeaderResolver(PROJECT_COLUMN_CANDIDATES).resolve(PROJECT_HEADERS)


class TestBuildProject:
    def test_builds_typed_record(self, builder: RecordBuilder, project_resolution) -> None:
        record = builder.build_project(project_row("  Solar Farm  "), project_resolution)

        assert record is not None
        assert record.name == "Solar Farm"
        assert record.fiscal_year == "2024"
        assert record.committed == 2_500_000.0
        assert record.region == "Africa"
        assert record.status is None
        assert record.description is None

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_row_without_name_is_rejected(self, builder: RecordBuilder, project_resolution, name) -> None:
        assert builder.build_project(project_row(name), project_resolution) is None

    def test_unparseable_committed_is_absent(self, builder: RecordBuilder, project_resolution) -> None:
        record = builder.build_project(project_row("Wind", committed="TBD"), project_resolution)

        assert record is not None
        assert record.committed is None

    def test_long_project_name_is_truncated(self, builder: RecordBuilder, project_resolution) -> None:
        record = builder.build_project(project_row("A" * 60), project_resolution)

        assert record is not None
        assert record.name == "A" * 47 + "..."
        assert len(record.name) == 50

    def test_truncation_can_be_disabled(self, project_resolution) -> None:
        record = RecordBuilder(project_name_max_length=None).build_project(
            project_row("A" * 60),
            project_resolution,
        )

        assert record is not None
        assert record.name == "A" * 60


class TestBuildAccount:
    def test_builds_account_from_json_row(self, builder: RecordBuilder) -> None:
        rows = [{"Name": "Acme", "Sector": "Retail", "Phone": 5551234}]
        headers = collect_headers(rows)
        resolution = HeaderResolver(ACCOUNT_JSON_CANDIDATES).resolve(headers)

        record = builder.build_account(row_values(rows[0], headers), resolution)

        assert record is not None
        assert record.name == "Acme"
        assert record.industry == "Retail"
        assert record.phone == "5551234"
        assert record.email is None


class TestBuildDemocracyLabProject:
    def test_maps_feed_fields(self, builder: RecordBuilder) -> None:
        record = builder.build_democracylab_project(
            {
                "project_name": "Civic Maps",
                "project_description": "Open data mapping",
                "project_url": "https://democracylab.org/projects/1",
            }
        )

        assert record is not None
        assert record.project_description == "Open data mapping"
        assert record.project_profile_url == "https://democracylab.org/projects/1"

    def test_blank_feed_name_is_rejected(self, builder: RecordBuilder) -> None:
        assert builder.build_democracylab_project({"project_name": "  "}) is None


def test_collect_headers_keeps_declared_order_then_first_appearance() -> None:
    rows = [{"b": 1, "a": 2}, {"c": 3, "a": 4}]

    assert collect_headers(rows, ["a", "z"]) == ["a", "z", "b", "c"]
