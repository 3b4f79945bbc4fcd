"""Initial schema: owners, tests and reports tables."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uitest_store.ports.db_session import DbSessionPort
    from uitest_store.storage.tables import TableNames

VERSION = 1

SCHEMA = """
BEGIN;

-- ============================================================================
-- OWNERS (grouping key for tests and reports)
-- ============================================================================
CREATE TABLE IF NOT EXISTS {owners} (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL
);

CREATE UNIQUE INDEX IF NOT EXISTS ux_{owners}_name ON {owners}(name);

-- ============================================================================
-- TESTS (one row per test name and owner; data is the JSON payload)
-- ============================================================================
CREATE TABLE IF NOT EXISTS {tests} (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    data TEXT NOT NULL,
    owner_id INTEGER NOT NULL REFERENCES {owners}(id)
);

CREATE UNIQUE INDEX IF NOT EXISTS ux_{tests}_name_owner ON {tests}(name, owner_id);

-- ============================================================================
-- REPORTS (append only)
-- ============================================================================
CREATE TABLE IF NOT EXISTS {reports} (
    id INTEGER PRIMARY KEY,
    owner TEXT,
    name TEXT NOT NULL,
    version INTEGER,
    device_info TEXT,
    start_time INTEGER NOT NULL,
    end_time INTEGER,
    passed_steps INTEGER NOT NULL DEFAULT 0,
    error_steps INTEGER NOT NULL DEFAULT 0,
    steps TEXT,
    images TEXT,
    logs TEXT,
    runtime_exception TEXT,
    success INTEGER NOT NULL DEFAULT 0 CHECK (success IN (0, 1))
);

CREATE INDEX IF NOT EXISTS ix_{reports}_owner_name ON {reports}(owner, name);

INSERT OR IGNORE INTO schema_version (scope, version) VALUES ('{scope}', 1);

COMMIT;
"""


async def apply_migration(db: "DbSessionPort", tables: "TableNames") -> None:
    """Apply the initial schema migration."""
    await db.executescript(
        SCHEMA.format(
            owners=tables.owners,
            tests=tables.tests,
            reports=tables.reports,
            scope=tables.scope,
        )
    )
