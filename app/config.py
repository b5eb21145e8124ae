"""
app/config.py

Runtime settings for the import pipeline and the recommendation service.

Settings are read from the environment once and handed to services as frozen
snapshots; nothing below app/api reads the environment directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, TypeVar

from db.config import load_env_files

_T = TypeVar("_T")


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    load_env_files()


def _read_env(name: str, default: _T, parse: Callable[[str], _T]) -> _T:
    """
    Parse an environment variable, falling back to ``default`` when it is
    unset, blank or malformed.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return parse(raw_value.strip())
    except ValueError:
        return default


def _parse_bool(raw_value: str) -> bool:
    return raw_value.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ImportSettings:
    """
    Runtime settings for batch imports.
    """

    store_timeout_seconds: float = 10.0
    max_reported_errors: int = 500
    log_row_errors: bool = True


@dataclass(frozen=True)
class RecommendationSettings:
    """
    Runtime settings for preference-based project recommendations.
    """

    workbook_path: str = "preferences/projects/DFC-ActiveProjects.xlsx"
    max_results: int = 5


@lru_cache(maxsize=1)
def get_import_settings() -> ImportSettings:
    """
    Return cached import settings from environment variables.
    """

    return ImportSettings(
        store_timeout_seconds=max(0.1, _read_env("IMPORT_STORE_TIMEOUT_SECONDS", 10.0, float)),
        max_reported_errors=max(1, _read_env("IMPORT_MAX_REPORTED_ERRORS", 500, int)),
        log_row_errors=_read_env("IMPORT_LOG_ROW_ERRORS", True, _parse_bool),
    )


@lru_cache(maxsize=1)
def get_recommendation_settings() -> RecommendationSettings:
    """
    Return cached recommendation settings from environment variables.
    """

    return RecommendationSettings(
        workbook_path=_read_env(
            "RECOMMENDATIONS_WORKBOOK_PATH",
            "preferences/projects/DFC-ActiveProjects.xlsx",
            str,
        ),
        max_results=max(1, _read_env("RECOMMENDATIONS_MAX_RESULTS", 5, int)),
    )
