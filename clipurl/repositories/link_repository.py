"""Link Repository for the ClipURL application.

This module provides the LinkRepository class, the persistent record store
mapping short codes to original URLs.
"""

from typing import Any, Dict, Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from clipurl.models.link import ShortLink, ShortLinkCreate
from clipurl.repositories.base import BaseRepository, DuplicateEntityError, RepositoryError

_UNIQUE_VIOLATION_MARKERS = ("unique constraint", "duplicate key", "unique violation")


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell a unique-index rejection apart from other integrity errors."""
    message = str(error.orig if error.orig is not None else error).lower()
    return any(marker in message for marker in _UNIQUE_VIOLATION_MARKERS)


class LinkRepository(BaseRepository[ShortLink, ShortLinkCreate]):
    """
    Repository for ShortLink model database operations.

    Uniqueness of ``short_code`` is enforced by the unique index on the
    table, so ``insert`` is an atomic insert-if-absent.
    """

    def __init__(self):
        super().__init__(ShortLink)

    async def insert(
        self,
        db: AsyncSession,
        data: Union[ShortLinkCreate, Dict[str, Any]]
    ) -> ShortLink:
        """
        Insert a new short link.

        Args:
            db: Database session
            data: Link data (either as a ShortLinkCreate model or dictionary)

        Returns:
            The created ShortLink entity

        Raises:
            DuplicateEntityError: If the short code already exists
            RepositoryError: On other database errors
        """
        try:
            return await self.create(db, data)
        except IntegrityError as e:
            if is_unique_violation(e):
                if isinstance(data, ShortLinkCreate):
                    short_code = data.short_code
                else:
                    short_code = data.get("short_code")
                raise DuplicateEntityError(self.model_type, "short_code", short_code) from e
            raise RepositoryError(f"Database error creating short link: {e}") from e

    async def find_by_code(self, db: AsyncSession, short_code: str) -> Optional[ShortLink]:
        """
        Find a link by its short code.

        Args:
            db: Database session
            short_code: The short code to look up

        Returns:
            The ShortLink if found, None otherwise

        Raises:
            RepositoryError: On database errors
        """
        try:
            query = select(self.model_type).where(self.model_type.short_code == short_code)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error retrieving link by short code: {e}") from e

    async def count_by_code(self, db: AsyncSession, short_code: str) -> int:
        """Number of stored links for a short code; at most one."""
        return await self.count(db, short_code=short_code)
