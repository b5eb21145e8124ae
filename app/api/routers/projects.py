"""
app/api/routers/projects.py

Stored project listing.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.repositories.project_repository import ProjectRepository
from app.schemas.projects import ProjectListResponse, StoredProjectResponse
from db.session import get_db

router = APIRouter(prefix="/api", tags=["projects"])


@router.get("/projects", response_model=ProjectListResponse)
def list_projects(
    limit: int = Query(default=50, ge=1, le=500),
    db: Session = Depends(get_db),
) -> ProjectListResponse:
    rows = ProjectRepository(db).list_recent(limit=limit)
    return ProjectListResponse(
        data=[
            StoredProjectResponse(
                id=row.id,
                name=row.name,
                description=row.description,
                status=row.status,
                priority=row.priority,
                created_date=row.date_entered,
                modified_date=row.date_modified,
            )
            for row in rows
        ]
    )
