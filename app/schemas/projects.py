"""
app/schemas/projects.py

Response schemas for stored project listings.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class StoredProjectResponse(BaseModel):
    id: uuid.UUID
    name: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    created_date: datetime
    modified_date: datetime


class ProjectListResponse(BaseModel):
    success: bool = True
    data: list[StoredProjectResponse] = Field(default_factory=list)
