"""API package for the ClipURL application.

This package contains the API layer components including routes,
request/response schemas, and dependency providers.
"""

from clipurl.api.routes import build_api_router

__all__ = ["build_api_router"]
