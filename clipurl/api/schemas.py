"""API request and response schemas.

This module contains Pydantic models for API request validation
and response serialization. Field aliases carry the camelCase names
the frontend sends and expects.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ShortenRequest(BaseModel):
    """Request schema for registering an alias."""
    model_config = ConfigDict(populate_by_name=True)

    original_url: str = Field(alias="originalUrl")
    custom_alias: Optional[str] = Field(default="", alias="customAlias")

    # A missing or null alias is stored as the empty string
    @field_validator("custom_alias", mode="before")
    def none_to_empty(cls, v):
        return "" if v is None else v


class ShortenResponse(BaseModel):
    """Response schema for a created short link."""
    model_config = ConfigDict(populate_by_name=True)

    short_url: str = Field(alias="shortUrl")


class ErrorResponse(BaseModel):
    """Response schema for errors."""
    error: str
    error_id: Optional[str] = None
    details: Optional[List[Any]] = None
