"""
tests/test_cell_normalizer.py

Cell coercion rules for spreadsheet and JSON values.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from app.normalizers.cell_normalizer import normalize_cell, parse_amount, truncate_text


class TestNormalizeCell:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, None),
            ("", None),
            ("   ", None),
            ("  Solar Farm \t", "Solar Farm"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (0, "0"),
            (2024.0, "2024"),
            (1.5, "1.5"),
            (-3.25, "-3.25"),
            (Decimal("10.50"), "10.50"),
        ],
    )
    def test_coerces_scalar_kinds(self, raw: object, expected: str | None) -> None:
        assert normalize_cell(raw) == expected

    def test_nan_float_is_absent(self) -> None:
        assert normalize_cell(float("nan")) is None

    def test_dates_render_as_iso_text(self) -> None:
        assert normalize_cell(date(2024, 3, 1)) == "2024-03-01"
        assert normalize_cell(datetime(2024, 3, 1, 12, 30)) == "2024-03-01T12:30:00"

    def test_other_kinds_use_their_text_form(self) -> None:
        assert normalize_cell(["a", "b"]) == "['a', 'b']"


class TestParseAmount:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1000000", 1_000_000.0),
            ("999999.99", 999_999.99),
            ("-5", -5.0),
        ],
    )
    def test_parses_numbers(self, raw: str, expected: float) -> None:
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", [None, "n/a", "$1,000", "inf", "nan"])
    def test_unparseable_amount_is_absent(self, raw: str | None) -> None:
        assert parse_amount(raw) is None


class TestTruncateText:
    def test_sixty_characters_become_forty_seven_plus_ellipsis(self) -> None:
        name = "x" * 60

        truncated = truncate_text(name, 50)

        assert len(truncated) == 50
        assert truncated == "x" * 47 + "..."

    def test_text_at_the_limit_is_untouched(self) -> None:
        name = "y" * 50
        assert truncate_text(name, 50) == name
