"""Short link data models.

This module defines the ShortLink model for storing alias-to-URL mappings in the database.
"""
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ShortLinkBase(SQLModel):
    """Base model for short link data."""

    original_url: str = Field(
        description="The destination URL to redirect to"
    )
    short_code: str = Field(
        description="User-supplied alias used as the short URL path",
        unique=True,  # Uniqueness is arbitrated by the database
        index=True,
    )


class ShortLink(ShortLinkBase, table=True):
    """
    Short link model for storing alias mappings in the database.

    Rows are inserted once and never updated or deleted.
    """

    __tablename__ = "short_links"

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=_utcnow,
        description="Timestamp when this short link was created"
    )


class ShortLinkCreate(ShortLinkBase):
    """Schema for creating a new short link."""
    pass

