"""
app/repositories package marker.
"""

from app.repositories.import_repository import ImportRepository, ImportStore
from app.repositories.project_repository import ProjectRepository

__all__ = [
    "ImportRepository",
    "ImportStore",
    "ProjectRepository",
]
