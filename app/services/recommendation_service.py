"""
app/services/recommendation_service.py

Preference-based project recommendations.

Each preference label maps to a set of acceptable NAICS sectors and/or
departments. A project is recommended when it satisfies any requested
preference; results keep source order and are capped. There is no scoring.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from app.config import RecommendationSettings, get_recommendation_settings
from app.domain.records import ProjectRecord, Recommendation
from app.mappers.header_resolver import PROJECT_COLUMN_CANDIDATES, HeaderResolver
from app.mappers.record_builder import RecordBuilder
from app.readers.workbook_reader import read_sheet

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5


class Preference(str, Enum):
    AGRICULTURE = "Agriculture"
    EDUCATION = "Education"
    HEALTHCARE_ACCESS = "Healthcare Access"
    FINANCIAL_INCLUSION = "Financial Inclusion"
    INFRASTRUCTURE_DEVELOPMENT = "Infrastructure Development"
    TECHNOLOGY_INNOVATION = "Technology Innovation"
    SMALL_BUSINESS_SUPPORT = "Small Business Support"
    RURAL_DEVELOPMENT = "Rural Development"
    ENVIRONMENTAL_SUSTAINABILITY = "Environmental Sustainability"
    RENEWABLE_ENERGY = "Renewable Energy"
    WATER_SANITATION = "Water & Sanitation"
    DIGITAL_INCLUSION = "Digital Inclusion"
    ECONOMIC_GROWTH = "Economic Growth"
    FOOD_SECURITY = "Food Security"

    @classmethod
    def from_label(cls, label: str) -> "Preference | None":
        try:
            return cls(label)
        except ValueError:
            return None


@dataclass(frozen=True)
class PreferenceCriteria:
    """
    Acceptable sector and department values for one preference.
    """

    naics_sectors: frozenset[str] = frozenset()
    departments: frozenset[str] = frozenset()

    def matches(self, project: ProjectRecord) -> bool:
        if self.naics_sectors and project.naics_sector in self.naics_sectors:
            return True
        if self.departments and project.department in self.departments:
            return True
        return False


def _criteria(sectors: Iterable[str] = (), departments: Iterable[str] = ()) -> PreferenceCriteria:
    return PreferenceCriteria(naics_sectors=frozenset(sectors), departments=frozenset(departments))


PREFERENCE_CRITERIA: Mapping[Preference, PreferenceCriteria] = MappingProxyType(
    {
        Preference.AGRICULTURE: _criteria(["Agriculture"], ["Technical Assistance"]),
        Preference.EDUCATION: _criteria(["Educational Services"], ["Technical Assistance"]),
        Preference.HEALTHCARE_ACCESS: _criteria(["Health Care"], ["Equity Investments"]),
        Preference.FINANCIAL_INCLUSION: _criteria(["Finance and Insurance"], ["Investment Funds", "Finance"]),
        Preference.INFRASTRUCTURE_DEVELOPMENT: _criteria(["Utilities"], ["Finance"]),
        Preference.TECHNOLOGY_INNOVATION: _criteria(["Information"], ["Investment Funds"]),
        Preference.SMALL_BUSINESS_SUPPORT: _criteria(["Finance and Insurance"], ["Investment Funds"]),
        Preference.RURAL_DEVELOPMENT: _criteria(departments=["Technical Assistance"]),
        Preference.ENVIRONMENTAL_SUSTAINABILITY: _criteria(["Utilities"], ["Finance"]),
        Preference.RENEWABLE_ENERGY: _criteria(["Utilities"], ["Finance"]),
        Preference.WATER_SANITATION: _criteria(["Utilities"], ["Finance"]),
        Preference.DIGITAL_INCLUSION: _criteria(["Information", "Educational Services"], ["Technical Assistance"]),
        Preference.ECONOMIC_GROWTH: _criteria(["Finance and Insurance"], ["Investment Funds"]),
        Preference.FOOD_SECURITY: _criteria(["Agriculture"], ["Technical Assistance"]),
    }
)


def get_recommendations(
    preferences: Sequence[str],
    records: Iterable[Recommendation],
    *,
    limit: int = MAX_RECOMMENDATIONS,
) -> list[Recommendation]:
    """
    Return up to ``limit`` records matching any of ``preferences``.

    Preferences are tried in the order given and the first match wins, so a
    record appears at most once. Unknown labels match nothing.
    """

    criteria = [
        PREFERENCE_CRITERIA[preference]
        for preference in (Preference.from_label(label) for label in preferences)
        if preference is not None
    ]
    if not criteria or limit <= 0:
        return []

    matched: list[Recommendation] = []
    for record in records:
        if any(rule.matches(record.project) for rule in criteria):
            matched.append(record)
            if len(matched) >= limit:
                break
    return matched


class RecommendationService:
    """
    Loads the configured project workbook and filters it by preference.
    """

    def __init__(
        self,
        *,
        settings: RecommendationSettings,
        builder: RecordBuilder | None = None,
    ) -> None:
        self._settings = settings
        # Recommendations show full names; truncation only applies to stored rows.
        self._builder = builder or RecordBuilder(project_name_max_length=None)
        self._resolver = HeaderResolver(PROJECT_COLUMN_CANDIDATES)

    def load_projects(self) -> list[Recommendation]:
        sheet = read_sheet(self._settings.workbook_path)
        resolution = self._resolver.resolve(sheet.headers)

        loaded: list[Recommendation] = []
        for position, row in enumerate(sheet.rows, start=1):
            project = self._builder.build_project(row, resolution)
            if project is not None:
                loaded.append(Recommendation(id=position, project=project))
        return loaded

    def recommend(self, preferences: Sequence[str]) -> list[Recommendation]:
        projects = self.load_projects()
        recommended = get_recommendations(
            preferences,
            projects,
            limit=self._settings.max_results,
        )
        logger.info(
            "Recommendations computed preferences=%s loaded=%s returned=%s",
            list(preferences),
            len(projects),
            len(recommended),
        )
        return recommended


@lru_cache(maxsize=1)
def get_recommendation_service() -> RecommendationService:
    return RecommendationService(settings=get_recommendation_settings())
