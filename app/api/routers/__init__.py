"""
app/api/routers package marker.
"""

from app.api.routers.imports import router as imports_router
from app.api.routers.projects import router as projects_router
from app.api.routers.recommendations import router as recommendations_router

__all__ = [
    "imports_router",
    "projects_router",
    "recommendations_router",
]
