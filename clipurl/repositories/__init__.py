"""Repository layer for the ClipURL application.

This module provides repository classes that abstract database operations
and implement the Repository pattern for clean separation of concerns.
"""

from clipurl.repositories.base import (
    BaseRepository,
    RepositoryError,
    DuplicateEntityError
)
from clipurl.repositories.link_repository import LinkRepository

__all__ = [
    # Base classes and exceptions
    "BaseRepository",
    "RepositoryError",
    "DuplicateEntityError",

    # Concrete repositories
    "LinkRepository",
]
