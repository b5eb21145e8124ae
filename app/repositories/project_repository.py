"""
app/repositories/project_repository.py

Read helpers for stored projects.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.project import Project

_DEFAULT_LIMIT = 50


class ProjectRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_recent(self, *, limit: int = _DEFAULT_LIMIT) -> Sequence[Project]:
        """
        Most recently modified projects first.
        """

        stmt = select(Project).order_by(Project.date_modified.desc()).limit(max(1, limit))
        return self._session.execute(stmt).scalars().all()
