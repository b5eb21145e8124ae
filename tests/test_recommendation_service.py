"""
tests/test_recommendation_service.py

Preference matching over loaded project rows.
"""

from __future__ import annotations

import pytest

from app.config import RecommendationSettings
from app.domain.errors import WorkbookReadError
from app.domain.records import ProjectRecord, Recommendation
from app.services.recommendation_service import (
    PREFERENCE_CRITERIA,
    Preference,
    RecommendationService,
    get_recommendations,
)

from conftest import PROJECT_HEADERS, project_row


def _recommendation(index: int, *, sector: str | None = None, department: str | None = None) -> Recommendation:
    return Recommendation(
        id=index,
        project=ProjectRecord(name=f"Project {index}", naics_sector=sector, department=department),
    )


def test_every_preference_has_criteria() -> None:
    assert set(PREFERENCE_CRITERIA) == set(Preference)
    for criteria in PREFERENCE_CRITERIA.values():
        assert criteria.naics_sectors or criteria.departments


def test_results_are_capped_in_source_order() -> None:
    records = [_recommendation(index, sector="Agriculture") for index in range(1, 9)]

    result = get_recommendations(["Agriculture"], records)

    assert [item.id for item in result] == [1, 2, 3, 4, 5]


def test_stops_reading_once_limit_is_reached() -> None:
    consumed: list[int] = []

    def records():
        for index in range(1, 100):
            consumed.append(index)
            yield _recommendation(index, sector="Health Care")

    result = get_recommendations(["Healthcare Access"], records(), limit=2)

    assert len(result) == 2
    assert consumed == [1, 2]


def test_matches_on_department_or_sector() -> None:
    records = [
        _recommendation(1, sector="Mining"),
        _recommendation(2, department="Technical Assistance"),
        _recommendation(3, sector="Agriculture"),
    ]

    result = get_recommendations(["Food Security"], records)

    assert [item.id for item in result] == [2, 3]


def test_record_matching_several_preferences_appears_once() -> None:
    records = [_recommendation(1, sector="Utilities", department="Finance")]

    result = get_recommendations(["Renewable Energy", "Water & Sanitation"], records)

    assert [item.id for item in result] == [1]


@pytest.mark.parametrize("preferences", [[], ["Space Tourism"], ["renewable energy"]])
def test_unknown_or_missing_preferences_match_nothing(preferences) -> None:
    records = [_recommendation(1, sector="Utilities")]

    assert get_recommendations(preferences, records) == []


def test_unknown_labels_are_ignored_alongside_known_ones() -> None:
    records = [_recommendation(1, sector="Information")]

    result = get_recommendations(["Space Tourism", "Technology Innovation"], records)

    assert [item.id for item in result] == [1]


class TestRecommendationService:
    def test_loads_workbook_and_recommends(self, write_workbook) -> None:
        long_name = "Regional Water Utility Expansion And Rehabilitation Program"
        path = write_workbook(
            PROJECT_HEADERS,
            [
                project_row("Mine", naics_sector="Mining", department="Equity Investments"),
                project_row(None),
                project_row(long_name, naics_sector="Utilities"),
            ],
        )
        service = RecommendationService(settings=RecommendationSettings(workbook_path=path, max_results=5))

        result = service.recommend(["Water & Sanitation"])

        assert [item.id for item in result] == [3]
        assert result[0].project.name == long_name
        assert result[0].tags == []
        assert result[0].starred is False

    def test_missing_workbook_raises(self, tmp_path) -> None:
        service = RecommendationService(
            settings=RecommendationSettings(workbook_path=str(tmp_path / "missing.xlsx")),
        )

        with pytest.raises(WorkbookReadError):
            service.recommend(["Education"])
