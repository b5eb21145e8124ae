"""
app/api/dependencies.py

Shared FastAPI dependencies for import endpoints.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.repositories.import_repository import ImportStore
from app.services.import_service import BatchImportService, get_batch_import_service
from db.session import get_db


def get_import_store(
    db: Session = Depends(get_db),
    service: BatchImportService = Depends(get_batch_import_service),
) -> ImportStore:
    """
    Import store bound to the request's session, with the configured timeout.
    """

    return service.open_store(db)
