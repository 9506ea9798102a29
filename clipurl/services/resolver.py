"""Alias resolution service for the ClipURL application.

This module contains the AliasResolver class which registers a
user-chosen alias for a destination URL.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from clipurl.db.session import db_transaction
from clipurl.repositories.base import DuplicateEntityError, RepositoryError
from clipurl.repositories.link_repository import LinkRepository
from clipurl.services.exceptions import AliasConflictError, LinkCreationError

logger = logging.getLogger(__name__)


def compose_short_url(base_url: str, short_code: str) -> str:
    """Join the backend base address and a short code."""
    return f"{base_url.rstrip('/')}/{short_code}"


class AliasResolver:
    """
    Service that turns an alias into a stored short link.

    There is no existence pre-check: the unique index on ``short_code``
    decides, so two concurrent requests for one alias store one row.
    """

    def __init__(self, link_repository: LinkRepository, base_url: str):
        """
        Initialize the resolver.

        Args:
            link_repository: Repository for short link data access
            base_url: Backend base address short URLs are composed on
        """
        self.link_repository = link_repository
        self.base_url = base_url

    @db_transaction(db_param_name="db")
    async def create(self, db: AsyncSession, original_url: str, short_code: str) -> str:
        """
        Register ``short_code`` for ``original_url``.

        Neither argument is validated; an empty alias is stored as-is.

        Args:
            db: Database session
            original_url: Destination address
            short_code: User-supplied alias

        Returns:
            str: The composed short URL

        Raises:
            AliasConflictError: If the alias is already taken
            LinkCreationError: If the link could not be stored
        """
        try:
            link = await self.link_repository.insert(
                db, {"original_url": original_url, "short_code": short_code}
            )
        except DuplicateEntityError as e:
            logger.warning(f"Alias '{short_code}' already taken")
            raise AliasConflictError(short_code) from e
        except RepositoryError as e:
            logger.error(f"Error creating short link: {e}")
            raise LinkCreationError(f"Failed to create short link: {e}") from e

        logger.info(f"Created short link '{link.short_code}' -> {link.original_url}")
        return compose_short_url(self.base_url, link.short_code)
