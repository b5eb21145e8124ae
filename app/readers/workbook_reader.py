"""
app/readers/workbook_reader.py

Reads .xlsx worksheets into a header row plus typed data rows.
"""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from app.domain.errors import WorkbookReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetData:
    """
    One worksheet: the first row as headers, the rest as raw cell tuples.
    """

    sheet_name: str
    headers: tuple[Any, ...]
    rows: list[tuple[Any, ...]] = field(default_factory=list)


def _open_workbook(file_path: str) -> openpyxl.Workbook:
    path = Path(file_path)
    if not path.is_file():
        raise WorkbookReadError(file_path=file_path, reason=f"File not found at: {file_path}")
    try:
        return openpyxl.load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        raise WorkbookReadError(file_path=file_path, reason=str(exc) or type(exc).__name__) from exc


def list_sheet_names(file_path: str) -> list[str]:
    workbook = _open_workbook(file_path)
    try:
        return list(workbook.sheetnames)
    finally:
        workbook.close()


def read_sheet(file_path: str, sheet_name: str | None = None) -> SheetData:
    """
    Load one worksheet, defaulting to the first sheet of the workbook.

    Fully empty trailing rows are dropped; interior empty rows are kept so
    row numbers line up with the spreadsheet.
    """

    workbook = _open_workbook(file_path)
    try:
        if sheet_name is None:
            if not workbook.sheetnames:
                raise WorkbookReadError(file_path=file_path, reason="Workbook has no sheets.")
            sheet_name = workbook.sheetnames[0]
        if sheet_name not in workbook.sheetnames:
            raise WorkbookReadError(
                file_path=file_path,
                reason=f"Error reading sheet: '{sheet_name}' not found",
            )

        worksheet = workbook[sheet_name]
        rows_iter = worksheet.iter_rows(values_only=True)
        headers = next(rows_iter, ())
        rows = [tuple(row) for row in rows_iter]
    finally:
        workbook.close()

    while rows and all(cell is None for cell in rows[-1]):
        rows.pop()

    logger.info(
        "Read worksheet file=%s sheet=%s columns=%s rows=%s",
        file_path,
        sheet_name,
        len(headers),
        len(rows),
    )
    return SheetData(sheet_name=sheet_name, headers=tuple(headers), rows=rows)
