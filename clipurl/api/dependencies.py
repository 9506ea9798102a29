"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access settings and service instances.
"""

from fastapi import Depends, Request

from clipurl.core.config import Settings
from clipurl.repositories.link_repository import LinkRepository
from clipurl.services.redirector import Redirector
from clipurl.services.resolver import AliasResolver


def get_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


async def get_link_repository() -> LinkRepository:
    """Get an instance of the link repository."""
    return LinkRepository()


async def get_alias_resolver(
    link_repo: LinkRepository = Depends(get_link_repository),
    settings: Settings = Depends(get_settings),
) -> AliasResolver:
    """Get an alias resolver bound to the configured base URL."""
    return AliasResolver(link_repository=link_repo, base_url=settings.BASE_URL)


async def get_redirector(
    link_repo: LinkRepository = Depends(get_link_repository),
) -> Redirector:
    """Get an instance of the redirector."""
    return Redirector(link_repository=link_repo)
