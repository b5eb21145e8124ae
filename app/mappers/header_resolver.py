"""
app/mappers/header_resolver.py

Heuristic column resolution for loosely structured tabular input.

Each canonical field owns an ordered list of candidate substrings. A header
equal to a candidate wins outright; otherwise a field resolves to the first
header whose lowercased text contains the first candidate that matches
anything, so spreadsheets with different casing, padding or wording
("Project Name", " project name (official) ") land on the same canonical
field.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

PROJECT_COLUMN_CANDIDATES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "fiscal_year": ("fiscal year",),
        "project_number": ("project number",),
        "project_type": ("project type",),
        "region": ("region",),
        "country": ("country",),
        "department": ("department",),
        "framework": ("framework",),
        "name": ("project name",),
        "committed": ("committed",),
        "naics_sector": ("naics sector",),
        "project_description": ("project description",),
        "project_profile_url": ("project profile url",),
    }
)

PROJECT_JSON_CANDIDATES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "name": ("project_name", "name"),
        "project_description": ("project_description", "description"),
    }
)

ACCOUNT_JSON_CANDIDATES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "name": ("name",),
        "email": ("email",),
        "phone": ("phone",),
        "website": ("website",),
        "industry": ("industry", "sector"),
    }
)


def normalize_header(header: Any) -> str:
    """
    Lowercase and trim a header cell for containment matching.
    """

    if header is None:
        return ""
    return str(header).strip().lower()


@dataclass(frozen=True)
class ColumnResolution:
    """
    Canonical field -> column index, computed once per input set.
    """

    field_to_index: Mapping[str, int]
    headers: tuple[str, ...]

    def index_of(self, field: str) -> int | None:
        return self.field_to_index.get(field)

    def value(self, row: Sequence[Any], field: str) -> Any:
        """
        Return the raw cell for ``field`` in ``row``, or None when unresolved.
        """

        index = self.field_to_index.get(field)
        if index is None or index >= len(row):
            return None
        return row[index]

    def source_header(self, field: str) -> str | None:
        index = self.field_to_index.get(field)
        return None if index is None else self.headers[index]


class HeaderResolver:
    """
    Resolves raw headers to canonical fields: exact header match first, then
    case-insensitive containment.
    """

    def __init__(self, candidates: Mapping[str, Sequence[str]]) -> None:
        self._candidates: dict[str, tuple[str, ...]] = {
            field: tuple(normalize_header(candidate) for candidate in values if normalize_header(candidate))
            for field, values in candidates.items()
        }

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._candidates)

    def resolve(self, headers: Sequence[Any]) -> ColumnResolution:
        """
        Resolve every canonical field against ``headers``.

        Fields are resolved independently; a field with no matching header is
        simply absent from the result.
        """

        normalized = [normalize_header(header) for header in headers]
        field_to_index: dict[str, int] = {}
        for field, candidates in self._candidates.items():
            index = self._find_column(normalized, candidates)
            if index is not None:
                field_to_index[field] = index

        return ColumnResolution(
            field_to_index=MappingProxyType(field_to_index),
            headers=tuple("" if header is None else str(header) for header in headers),
        )

    @staticmethod
    def _find_column(normalized_headers: Sequence[str], candidates: Sequence[str]) -> int | None:
        # Exact headers first, so "name" is not captured by "first_name".
        for candidate in candidates:
            if candidate in normalized_headers:
                return normalized_headers.index(candidate)
        for candidate in candidates:
            for index, header in enumerate(normalized_headers):
                if header and candidate in header:
                    return index
        return None
