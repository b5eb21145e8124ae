"""
db/base.py

Declarative base and the CRM audit-column mixin shared by imported tables.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Project-wide declarative base.
    All models must inherit from this class.
    """

    type_annotation_map: dict[type, Any] = {}


class AuditMixin:
    """
    CRM audit columns: entry/modification timestamps and the acting user.

    date_modified is refreshed on every UPDATE via onupdate.
    """

    date_entered: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    date_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    created_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    modified_user_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
