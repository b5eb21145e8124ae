"""
app/normalizers/cell_normalizer.py

Coerces heterogeneous spreadsheet / JSON cell values into trimmed text.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Any

_ELLIPSIS = "..."


def normalize_cell(value: Any) -> str | None:
    """
    Return the canonical text of one cell, or None when the cell is empty.

    Booleans become "true"/"false", integral floats drop their fractional
    part ("2024.0" -> "2024"), dates render as ISO text, and every other kind
    falls back to ``str()``. Whitespace-only results count as empty.
    """

    if value is None:
        return None
    if isinstance(value, str):
        return _strip_or_none(value)
    # bool is a subclass of int and must be checked first.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return _strip_or_none(str(value))


def parse_amount(value: str | None) -> float | None:
    """
    Parse a normalized cell as a finite number; anything else is absent.
    """

    if value is None:
        return None
    try:
        amount = float(value)
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount


def truncate_text(value: str, max_length: int) -> str:
    """
    Shorten ``value`` to ``max_length`` characters, ending in "..." when cut.
    """

    if len(value) <= max_length:
        return value
    keep = max(0, max_length - len(_ELLIPSIS))
    return f"{value[:keep]}{_ELLIPSIS}"


def _strip_or_none(text: str) -> str | None:
    stripped = text.strip()
    return stripped or None


def _format_float(value: float) -> str | None:
    if math.isnan(value):
        return None
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)
