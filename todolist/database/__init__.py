"""Database package - the process-wide key-value preference store.

``from database import db, DatabaseError`` gives the shared store used by
the app; tests and tools can build their own ``Database(path)``.
"""
from pathlib import Path

from config import default_db_path
from database.helpers import DatabaseError
from database.core import Database


def configure_db_path(path: Path) -> None:
    """Set a custom store path before any connection is opened.

    Raises:
        RuntimeError: If the store connection is already open.
    """
    if db.is_open:
        raise RuntimeError(
            "Cannot change the preference store path after it has been opened. "
            "Call configure_db_path() before any store operations."
        )
    db.path = path


db = Database(default_db_path())

__all__ = ["Database", "DatabaseError", "configure_db_path", "db"]
