"""
app/normalizers package marker.
"""

from app.normalizers.cell_normalizer import normalize_cell, parse_amount, truncate_text

__all__ = [
    "normalize_cell",
    "parse_amount",
    "truncate_text",
]
