"""
app/domain/errors.py

Exceptions raised by the import pipeline.

Input-level errors abort a request before any row is processed; everything
else is caught per row and reported as a failed outcome.
"""

from __future__ import annotations


class ImportInputError(ValueError):
    """
    Raised when an import request cannot be processed at all.
    """


class UnsupportedEntityTypeError(ImportInputError):
    """
    Raised when a request targets a table the importer does not handle.
    """

    def __init__(self, table_name: object) -> None:
        super().__init__(f"Unsupported table: {table_name}")
        self.table_name = table_name


class WorkbookReadError(ImportInputError):
    """
    Raised when a spreadsheet file or sheet cannot be opened.
    """

    def __init__(self, *, file_path: str, reason: str) -> None:
        super().__init__(f"Failed to read Excel file at '{file_path}': {reason}")
        self.file_path = file_path
        self.reason = reason


class ImportStoreError(RuntimeError):
    """
    Raised when the relational store rejects a query or insert.
    """


class DuplicateRecordError(ImportStoreError):
    """
    Raised when an insert collides with a store-level uniqueness rule.
    """
