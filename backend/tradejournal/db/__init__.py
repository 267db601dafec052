"""
Database module for the trade journal.

Provides SQLite database connection and models.
"""

from tradejournal.db.database import get_db, init_db, close_db, AsyncSessionLocal
from tradejournal.db.models import Base, Trade

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "Base",
    "Trade",
]
