"""
Database migrations for the test store.

Migrations are parameterized by table names and applied in
version order. Each table set records its own schema version
under its scope in the schema_version table.
"""

from typing import TYPE_CHECKING

from loguru import logger

from uitest_store.errors import SchemaError
from uitest_store.storage.migrations import v001_initial, v002_inverted_start_time

if TYPE_CHECKING:
    from uitest_store.ports.db_session import DbSessionPort
    from uitest_store.storage.tables import TableNames

MIGRATIONS = (v001_initial, v002_inverted_start_time)

LATEST_VERSION = MIGRATIONS[-1].VERSION

SCHEMA_VERSION_SQL = """
CREATE TABLE IF NOT EXISTS schema_version (
    scope TEXT NOT NULL,
    version INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (datetime('now')),
    PRIMARY KEY (scope, version)
);
"""


async def current_version(db: "DbSessionPort", tables: "TableNames") -> int:
    """Return the schema version recorded for a table set, 0 if none."""
    row = await db.fetchone(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    if row is None:
        return 0

    row = await db.fetchone(
        "SELECT MAX(version) AS version FROM schema_version WHERE scope = ?",
        [tables.scope],
    )
    return row["version"] if row and row["version"] is not None else 0


async def apply_migrations(db: "DbSessionPort", tables: "TableNames") -> int:
    """
    Apply pending migrations for a table set.

    Safe to call any number of times: applied versions are skipped
    and every migration step is itself idempotent.

    Returns:
        The schema version after migrating.

    Raises:
        SchemaError: If a migration fails.
    """
    try:
        await db.executescript(SCHEMA_VERSION_SQL)
        version = await current_version(db, tables)
    except Exception as e:
        raise SchemaError(f"Could not read schema version: {e}") from e

    for migration in MIGRATIONS:
        if version >= migration.VERSION:
            continue
        try:
            await migration.apply_migration(db, tables)
        except Exception as e:
            raise SchemaError(
                f"Migration v{migration.VERSION:03d} failed for {tables.scope}: {e}",
                version=migration.VERSION,
            ) from e
        version = migration.VERSION
        logger.info("Applied schema v{:03d} for {}", version, tables.scope)

    return version


__all__ = ["LATEST_VERSION", "MIGRATIONS", "apply_migrations", "current_version"]
