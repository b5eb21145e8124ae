"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.account import Account
from db.models.project import Project

__all__ = [
    "Account",
    "Project",
]
