"""
app/mappers/record_builder.py

Builds canonical records from resolved rows.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from app.domain.records import AccountRecord, ProjectRecord
from app.mappers.header_resolver import ColumnResolution
from app.normalizers.cell_normalizer import normalize_cell, parse_amount, truncate_text
from db.models.account import ACCOUNT_NAME_MAX_LENGTH
from db.models.project import PROJECT_NAME_MAX_LENGTH

_PROJECT_TEXT_FIELDS: tuple[str, ...] = (
    "fiscal_year",
    "project_number",
    "project_type",
    "region",
    "country",
    "department",
    "framework",
    "naics_sector",
    "project_description",
    "project_profile_url",
)


class RecordBuilder:
    """
    Assembles ProjectRecord / AccountRecord values from raw rows.

    Rows without a name are rejected by returning None; this is not an error.
    Passing None as a max length keeps names untruncated.
    """

    def __init__(
        self,
        *,
        project_name_max_length: int | None = PROJECT_NAME_MAX_LENGTH,
        account_name_max_length: int = ACCOUNT_NAME_MAX_LENGTH,
    ) -> None:
        self._project_name_max_length = project_name_max_length
        self._account_name_max_length = account_name_max_length

    def build_project(
        self,
        row: Sequence[Any],
        resolution: ColumnResolution,
    ) -> ProjectRecord | None:
        name = normalize_cell(resolution.value(row, "name"))
        if name is None:
            return None

        text_values = {
            field: normalize_cell(resolution.value(row, field))
            for field in _PROJECT_TEXT_FIELDS
        }
        return ProjectRecord(
            name=self._project_name(name),
            committed=parse_amount(normalize_cell(resolution.value(row, "committed"))),
            **text_values,
        )

    def build_account(
        self,
        row: Sequence[Any],
        resolution: ColumnResolution,
    ) -> AccountRecord | None:
        name = normalize_cell(resolution.value(row, "name"))
        if name is None:
            return None

        return AccountRecord(
            name=truncate_text(name, self._account_name_max_length),
            industry=normalize_cell(resolution.value(row, "industry")),
            email=normalize_cell(resolution.value(row, "email")),
            phone=normalize_cell(resolution.value(row, "phone")),
            website=normalize_cell(resolution.value(row, "website")),
        )

    def _project_name(self, name: str) -> str:
        if self._project_name_max_length is None:
            return name
        return truncate_text(name, self._project_name_max_length)

    def build_democracylab_project(self, project: Mapping[str, Any]) -> ProjectRecord | None:
        """
        Build a project from one DemocracyLab feed entry.
        """

        name = normalize_cell(project.get("project_name"))
        if name is None:
            return None

        return ProjectRecord(
            name=self._project_name(name),
            project_description=normalize_cell(project.get("project_description")),
            project_profile_url=normalize_cell(project.get("project_url")),
        )


def collect_headers(rows: Sequence[Mapping[str, Any]], declared: Sequence[str] | None = None) -> list[str]:
    """
    Header list for JSON rows: declared headers first, then any other keys
    in order of first appearance.
    """

    headers: list[str] = []
    seen: set[str] = set()
    for header in declared or ():
        if isinstance(header, str) and header not in seen:
            seen.add(header)
            headers.append(header)
    for row in rows:
        # Non-object rows fail later, one row at a time.
        if not isinstance(row, Mapping):
            continue
        for key in row:
            if key not in seen:
                seen.add(key)
                headers.append(key)
    return headers


def row_values(row: Mapping[str, Any], headers: Sequence[str]) -> list[Any]:
    """
    Project a JSON object onto the shared header order.
    """

    return [row.get(header) for header in headers]
