"""SQLite connection wrapper for uitest-store."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import aiosqlite
from loguru import logger

from uitest_store.errors import StorageError

MEMORY_DATABASE = ":memory:"


class StoreDB:
    """
    SQLite database handle used by the test store.

    Owns a single aiosqlite connection and exposes the
    DbSessionPort operations over it. Schema is managed
    by the store's migrations, not here.
    """

    def __init__(self, db_path: Path | str) -> None:
        """
        Initialize StoreDB.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
        """
        self.db_path = db_path if db_path == MEMORY_DATABASE else Path(db_path)
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def initialize(self) -> None:
        """
        Open the database connection.

        Creates the database file and its parent directory if they
        don't exist. Calling it on an open handle does nothing.
        """
        if self._conn is not None:
            return

        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._conn = await aiosqlite.connect(self.db_path)
        self._conn.row_factory = aiosqlite.Row

        await self._conn.execute("PRAGMA foreign_keys = ON")
        if isinstance(self.db_path, Path):
            await self._conn.execute("PRAGMA journal_mode = WAL")

        logger.debug("Opened test store database: {}", self.db_path)

    async def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    async def __aenter__(self) -> "StoreDB":
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _get_conn(self) -> aiosqlite.Connection:
        """Get database connection, raising if not initialized."""
        if not self._conn:
            raise StorageError("Database not initialized")
        return self._conn

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        Context manager for database transactions.

        Commits on success, rollbacks on exception.
        """
        conn = self._get_conn()

        try:
            yield
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise

    async def execute(self, sql: str, params: list[Any] | None = None) -> aiosqlite.Cursor:
        """Execute a SQL statement."""
        conn = self._get_conn()
        return await conn.execute(sql, params or [])

    async def executescript(self, script: str) -> None:
        """
        Execute a multi-statement SQL script.

        A script that fails part way leaves any transaction it
        opened rolled back.
        """
        conn = self._get_conn()
        try:
            await conn.executescript(script)
        except Exception:
            await conn.rollback()
            raise

    async def fetchone(self, sql: str, params: list[Any] | None = None) -> aiosqlite.Row | None:
        """Execute query and fetch one row."""
        cursor = await self.execute(sql, params)
        return await cursor.fetchone()

    async def fetchall(self, sql: str, params: list[Any] | None = None) -> list[aiosqlite.Row]:
        """Execute query and fetch all rows."""
        cursor = await self.execute(sql, params)
        result = await cursor.fetchall()
        return list(result) if result else []
