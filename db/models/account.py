"""
db/models/account.py

CRM account (organization) rows populated by JSON imports.
"""

from __future__ import annotations

import uuid

from sqlalchemy import Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from db.base import AuditMixin, Base

ACCOUNT_NAME_MAX_LENGTH = 150


class AccountType:
    CUSTOMER = "Customer"
    PROSPECT = "Prospect"


class Account(Base, AuditMixin):
    __tablename__ = "accounts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(String(ACCOUNT_NAME_MAX_LENGTH), nullable=True)
    account_type: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Customer, Prospect",
    )
    industry: Mapped[str | None] = mapped_column(String(50), nullable=True)
    phone_office: Mapped[str | None] = mapped_column(String(100), nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("uq_accounts_name_industry", "name", "industry", unique=True),
    )
