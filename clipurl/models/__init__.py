"""
Data models for the ClipURL application.

This module imports and exports all SQLModel models used in the application.
"""

from clipurl.models.link import ShortLink, ShortLinkBase, ShortLinkCreate

__all__ = [
    "ShortLink",
    "ShortLinkBase",
    "ShortLinkCreate",
]
