"""
app/mappers package marker.
"""

from app.mappers.header_resolver import (
    ACCOUNT_JSON_CANDIDATES,
    PROJECT_COLUMN_CANDIDATES,
    PROJECT_JSON_CANDIDATES,
    ColumnResolution,
    HeaderResolver,
)
from app.mappers.record_builder import RecordBuilder, collect_headers, row_values

__all__ = [
    "ACCOUNT_JSON_CANDIDATES",
    "PROJECT_COLUMN_CANDIDATES",
    "PROJECT_JSON_CANDIDATES",
    "ColumnResolution",
    "HeaderResolver",
    "RecordBuilder",
    "collect_headers",
    "row_values",
]
