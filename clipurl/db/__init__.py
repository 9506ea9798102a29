"""Database module for the ClipURL application."""
from clipurl.db.base import Database, get_engine
from clipurl.db.session import get_db, db_transaction

__all__ = [
    "Database",
    "get_engine",
    "get_db",
    "db_transaction",
]
