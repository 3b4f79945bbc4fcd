"""Add inverted_start_time to the reports table.

The column holds ``-start_time`` so an ascending ORDER BY lists
the most recent reports first.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uitest_store.ports.db_session import DbSessionPort
    from uitest_store.storage.tables import TableNames

VERSION = 2

ADD_COLUMN_SQL = """
ALTER TABLE {reports} ADD COLUMN inverted_start_time INTEGER;
"""

MIGRATION_SQL = """
BEGIN;

{add_column}

UPDATE {reports}
SET inverted_start_time = -start_time
WHERE inverted_start_time IS NULL;

CREATE INDEX IF NOT EXISTS ix_{reports}_owner_recent
ON {reports}(owner, inverted_start_time);

INSERT OR IGNORE INTO schema_version (scope, version) VALUES ('{scope}', 2);

COMMIT;
"""


async def has_column(db: "DbSessionPort", table: str, column: str) -> bool:
    """Check whether a table already has a column."""
    rows = await db.fetchall(f"PRAGMA table_info({table})")
    return any(row["name"] == column for row in rows)


async def apply_migration(db: "DbSessionPort", tables: "TableNames") -> None:
    """Apply v002 migration: add and backfill inverted_start_time."""
    add_column = ""
    if not await has_column(db, tables.reports, "inverted_start_time"):
        add_column = ADD_COLUMN_SQL.format(reports=tables.reports)

    await db.executescript(
        MIGRATION_SQL.format(
            add_column=add_column,
            reports=tables.reports,
            scope=tables.scope,
        )
    )
