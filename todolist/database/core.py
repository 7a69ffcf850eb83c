import aiosqlite
import asyncio
import json
import sqlite3
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Any, AsyncIterator

from database.helpers import DatabaseError

logger = logging.getLogger(__name__)


class Database:
    """Async SQLite key-value store with a persistent connection and async lock.

    Uses a single persistent connection with an async lock to serialize
    access (SQLite limitation). The connection is lazily opened on first
    use, the schema is created with it, and it is reused until closed.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._conn: Optional[aiosqlite.Connection] = None
        self._conn_lock: Optional[asyncio.Lock] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def _ensure_connection(self) -> aiosqlite.Connection:
        """Ensure we have an open connection, creating one if needed."""
        if self._conn is None:
            try:
                conn = await aiosqlite.connect(self.path)
            except (sqlite3.Error, OSError) as e:
                raise DatabaseError(f"Cannot open preference store at {self.path}: {e}") from e
            try:
                await self._init_schema(conn)
            except sqlite3.Error as e:
                await conn.close()
                raise DatabaseError(f"Failed to initialize schema: {e}") from e
            self._conn = conn
            logger.debug(f"Opened preference store at {self.path}")
        return self._conn

    async def _init_schema(self, conn: aiosqlite.Connection) -> None:
        await conn.execute(
            "CREATE TABLE IF NOT EXISTS preferences (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
        )
        await conn.commit()

    def _get_lock(self) -> asyncio.Lock:
        if self._conn_lock is None:
            self._conn_lock = asyncio.Lock()
        return self._conn_lock

    @asynccontextmanager
    async def _get_connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Get the database connection with serialized access."""
        async with self._get_lock():
            conn = await self._ensure_connection()
            yield conn

    async def close(self) -> None:
        """Close the persistent connection."""
        if self._conn is not None:
            try:
                await self._conn.close()
            except (sqlite3.Error, OSError) as e:
                logger.warning(f"Error closing preference store: {e}")
            finally:
                self._conn = None
                self._conn_lock = None

    async def get_value(self, key: str) -> Optional[str]:
        """Return the raw text stored under key, or None if absent."""
        try:
            async with self._get_connection() as conn:
                async with conn.execute(
                    "SELECT value FROM preferences WHERE key=?",
                    (key,)
                ) as cursor:
                    row = await cursor.fetchone()
                    return row[0] if row else None
        except sqlite3.Error as e:
            logger.error(f"Error reading {key}: {e}")
            raise DatabaseError(f"Failed to read {key}: {e}") from e

    async def set_value(self, key: str, value: str) -> None:
        """Store raw text under key, replacing any prior value."""
        try:
            async with self._get_connection() as conn:
                await conn.execute(
                    "INSERT OR REPLACE INTO preferences (key,value) VALUES (?,?)",
                    (key, value)
                )
                await conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Error writing {key}: {e}")
            raise DatabaseError(f"Failed to write {key}: {e}") from e

    async def set_setting(self, key: str, value: Any) -> None:
        await self.set_value(key, json.dumps(value))
