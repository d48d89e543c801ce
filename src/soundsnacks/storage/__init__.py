"""Persistence layer: SQLAlchemy tables behind a repository."""

from soundsnacks.storage.database import MEMORY_URL, database_url
from soundsnacks.storage.repository import Repository

__all__ = ["MEMORY_URL", "Repository", "database_url"]
