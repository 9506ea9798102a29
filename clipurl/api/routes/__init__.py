"""Routes package initialization.

This module assembles the route collection for the application.
"""

from fastapi import APIRouter

from clipurl.api.routes import redirect, root, shortener
from clipurl.core.config import Settings


def build_api_router(settings: Settings) -> APIRouter:
    """Create the root router for the given settings."""
    api_router = APIRouter()

    api_router.include_router(root.router)

    # Include shortener routes with API prefix
    api_router.include_router(
        shortener.router,
        prefix=settings.API_PREFIX
    )

    # Redirects live at the root path so short URLs are /{code};
    # registered last so fixed paths win
    api_router.include_router(redirect.router)

    return api_router


__all__ = ["build_api_router"]
