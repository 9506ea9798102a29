"""Core module for the ClipURL application."""

from clipurl.core.config import Settings, get_settings
from clipurl.core.logging import setup_logging

__all__ = ["Settings", "get_settings", "setup_logging"]
