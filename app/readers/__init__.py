"""
app/readers package marker.
"""

from app.readers.workbook_reader import SheetData, list_sheet_names, read_sheet

__all__ = [
    "SheetData",
    "list_sheet_names",
    "read_sheet",
]
