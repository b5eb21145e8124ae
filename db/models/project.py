"""
db/models/project.py

CRM project rows populated by spreadsheet, JSON and project-feed imports.
"""

from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import Date, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from db.base import AuditMixin, Base

PROJECT_NAME_MAX_LENGTH = 50


class Project(Base, AuditMixin):
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(String(PROJECT_NAME_MAX_LENGTH), nullable=True)
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Synthesized from source columns as labeled lines",
    )
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    priority: Mapped[str | None] = mapped_column(String(255), nullable=True)
    estimated_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    estimated_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        Index("ix_projects_name", "name"),
        Index("ix_projects_date_modified", "date_modified"),
    )
