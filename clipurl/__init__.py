"""ClipURL: alias-based URL shortener."""

__version__ = "0.1.0"
