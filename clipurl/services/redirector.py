"""Redirect lookup for the ClipURL application."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from clipurl.repositories.link_repository import LinkRepository
from clipurl.services.exceptions import LinkNotFoundError

logger = logging.getLogger(__name__)


class Redirector:
    """Resolves short codes to their stored destination."""

    def __init__(self, link_repository: LinkRepository):
        self.link_repository = link_repository

    async def resolve(self, db: AsyncSession, short_code: str) -> str:
        """
        Look up the destination for ``short_code``.

        The stored URL is returned unchanged; it is not checked for
        well-formedness. Storage errors propagate.

        Raises:
            LinkNotFoundError: If no link exists for the code
        """
        link = await self.link_repository.find_by_code(db, short_code)
        if link is None:
            logger.info(f"No link for short code '{short_code}'")
            raise LinkNotFoundError(short_code)
        return link.original_url
