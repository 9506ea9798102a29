"""Exceptions for the ClipURL service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""

ALIAS_TAKEN_MESSAGE = "Alias already taken"
LINK_NOT_FOUND_MESSAGE = "Incorrect short url"


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class LinkError(ServiceError):
    """Base exception for short link errors."""
    pass


class LinkCreationError(LinkError):
    """Error occurred during link creation."""
    pass


class AliasConflictError(LinkCreationError):
    """The requested alias is already in use."""

    def __init__(self, short_code: str, message: str = ALIAS_TAKEN_MESSAGE):
        self.short_code = short_code
        super().__init__(message)


class LinkNotFoundError(LinkError):
    """No link exists for the requested short code."""

    def __init__(self, short_code: str, message: str = LINK_NOT_FOUND_MESSAGE):
        self.short_code = short_code
        super().__init__(message)
