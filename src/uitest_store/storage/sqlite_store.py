"""SQLite-backed test store.

Reads and writes recorded tests and submits execution reports
for a host UI testing framework. Every operation returns a typed
result; the host callbacks reduce those to the plain list/bool
contract the host expects, so storage trouble never reaches the
host as an exception.
"""

from typing import TYPE_CHECKING, Any

import aiosqlite
from loguru import logger
from pydantic import ValidationError

from uitest_store.errors import StoreNotInitializedError, UiTestStoreError
from uitest_store.models.reports import ExecutionReport
from uitest_store.models.results import ReadResult, WriteResult
from uitest_store.models.tests import PendingTest, RecordedTest
from uitest_store.storage import codec
from uitest_store.storage.migrations import apply_migrations
from uitest_store.storage.tables import TableNames

if TYPE_CHECKING:
    from uitest_store.config.models import StorageConfig
    from uitest_store.ports.db_session import DbSessionPort

DEFAULT_OWNER = "default"

# Failures converted to FAILED results at the operation boundary.
# sqlite3 raises OverflowError when binding integers beyond 64 bits.
STORE_ERRORS = (UiTestStoreError, aiosqlite.Error, ValidationError, OverflowError)


class SqliteTestStore:
    """
    Test store over an embedded SQLite database.

    Tests are filed under an owner name and upserted by
    ``(name, owner)``; reports are append only.
    """

    def __init__(
        self,
        database: "DbSessionPort",
        *,
        default_owner: str = DEFAULT_OWNER,
        tables: TableNames | None = None,
        owns_database: bool = False,
    ) -> None:
        """
        Initialize the store.

        Args:
            database: Open database session.
            default_owner: Owner used when an operation names none.
            tables: Table names; defaults to Owners, Tests and Reports.
            owns_database: Close ``database`` when the store is closed.
        """
        if not default_owner:
            raise ValueError("default_owner must not be empty")
        self.database = database
        self.default_owner = default_owner
        self.tables = tables or TableNames()
        self._owns_database = owns_database
        self._schema_version = 0

    @classmethod
    def from_config(
        cls, database: "DbSessionPort", config: "StorageConfig", **kwargs: Any
    ) -> "SqliteTestStore":
        """Build a store from storage configuration."""
        return cls(
            database,
            default_owner=config.default_owner,
            tables=TableNames(
                owners=config.owners_table,
                tests=config.tests_table,
                reports=config.reports_table,
            ),
            **kwargs,
        )

    @property
    def initialized(self) -> bool:
        return self._schema_version > 0

    async def initialize(self) -> int:
        """
        Create or migrate the store's tables.

        Idempotent; call once after construction.

        Returns:
            The schema version in effect.

        Raises:
            SchemaError: If the schema could not be brought up to date.
        """
        self._schema_version = await apply_migrations(self.database, self.tables)
        logger.debug(
            "Test store ready: tables={} schema=v{:03d}",
            self.tables.scope,
            self._schema_version,
        )
        return self._schema_version

    async def close(self) -> None:
        """Close the database if this store owns it."""
        if self._owns_database:
            await self.database.close()  # type: ignore[attr-defined]

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise StoreNotInitializedError("Test store used before initialize()")

    # =========================================================================
    # Owners
    # =========================================================================

    async def _find_owner_id(self, owner: str) -> int | None:
        row = await self.database.fetchone(
            f"SELECT id FROM {self.tables.owners} WHERE name = ?", [owner]
        )
        return row["id"] if row else None

    async def _ensure_owner_id(self, owner: str) -> int:
        """Look up an owner, creating it on first use."""
        await self.database.execute(
            f"INSERT INTO {self.tables.owners} (name) VALUES (?) ON CONFLICT(name) DO NOTHING",
            [owner],
        )
        owner_id = await self._find_owner_id(owner)
        if owner_id is None:
            raise UiTestStoreError(f"Owner row missing after insert: {owner}")
        return owner_id

    async def list_owners(self) -> ReadResult[str]:
        """List every owner name, alphabetically."""
        try:
            self._require_initialized()
            rows = await self.database.fetchall(
                f"SELECT name FROM {self.tables.owners} ORDER BY name"
            )
        except STORE_ERRORS as e:
            logger.exception("Error listing owners: {}", e)
            return ReadResult.failure(e)
        return ReadResult.found([row["name"] for row in rows])

    # =========================================================================
    # Tests
    # =========================================================================

    async def read_tests(self, *, owner: str | None = None) -> ReadResult[PendingTest]:
        """
        Load every test filed under an owner.

        An owner that has never written anything is NOT_FOUND, and is
        not created.

        Args:
            owner: Owner name; defaults to the store's default owner.
        """
        owner = owner or self.default_owner
        try:
            self._require_initialized()
            owner_id = await self._find_owner_id(owner)
            if owner_id is None:
                logger.debug("No tests stored for owner: {}", owner)
                return ReadResult.not_found()

            rows = await self.database.fetchall(
                f"SELECT id, data FROM {self.tables.tests} WHERE owner_id = ? ORDER BY name",
                [owner_id],
            )
            pending = [
                PendingTest.memory(
                    codec.decode_test(row["data"], table=self.tables.tests, row_id=row["id"])
                )
                for row in rows
            ]
        except STORE_ERRORS as e:
            logger.exception("Error loading tests for owner {}: {}", owner, e)
            return ReadResult.failure(e)

        logger.debug("Loaded {} test(s) for owner: {}", len(pending), owner)
        return ReadResult.found(pending)

    async def write_test(self, test: RecordedTest, *, owner: str | None = None) -> WriteResult:
        """
        Store a test, replacing any test of the same name and owner.

        Step images are dropped and the stored version is one more
        than ``test.version``.

        Args:
            test: Test to store.
            owner: Owner name; defaults to ``test.suite_name``, then the
                store's default owner.
        """
        owner = owner or test.suite_name or self.default_owner
        try:
            self._require_initialized()
            data, version = codec.encode_test(test, owner, table=self.tables.tests)
            async with self.database.transaction():
                owner_id = await self._ensure_owner_id(owner)
                rows = await self.database.fetchall(
                    f"""
                    INSERT INTO {self.tables.tests} (name, data, owner_id)
                    VALUES (?, ?, ?)
                    ON CONFLICT(name, owner_id) DO UPDATE SET data = excluded.data
                    RETURNING id
                    """,
                    [test.name, data, owner_id],
                )
        except STORE_ERRORS as e:
            logger.exception("Error writing test {} for owner {}: {}", test.name, owner, e)
            return WriteResult.failure(e)

        row_id = rows[0]["id"] if rows else None
        logger.debug("Stored test {} v{} for owner: {}", test.name, version, owner)
        return WriteResult.success(row_id, version=version)

    # =========================================================================
    # Reports
    # =========================================================================

    async def submit_report(
        self, report: ExecutionReport, *, owner: str | None = None
    ) -> WriteResult:
        """
        Append a report.

        Args:
            report: Completed execution report.
            owner: Owner name; defaults to ``report.suite_name``, then the
                store's default owner.
        """
        owner = owner or report.suite_name or self.default_owner
        try:
            self._require_initialized()
            values = codec.encode_report(report, owner, table=self.tables.reports)
            columns = ", ".join(values)
            placeholders = ", ".join("?" for _ in values)
            async with self.database.transaction():
                cursor = await self.database.execute(
                    f"INSERT INTO {self.tables.reports} ({columns}) VALUES ({placeholders})",
                    list(values.values()),
                )
        except STORE_ERRORS as e:
            logger.exception("Error writing report {} for owner {}: {}", report.name, owner, e)
            return WriteResult.failure(e)

        logger.debug("Stored report {} for owner: {}", report.name, owner)
        return WriteResult.success(cursor.lastrowid, version=report.version)

    async def list_reports(
        self,
        *,
        owner: str | None = None,
        name: str | None = None,
        limit: int | None = None,
    ) -> ReadResult[ExecutionReport]:
        """
        List reports for an owner, most recent first.

        Args:
            owner: Owner name; defaults to the store's default owner.
            name: Only reports for this test name.
            limit: Maximum number of reports, or None for all.
        """
        owner = owner or self.default_owner
        sql = f"SELECT * FROM {self.tables.reports} WHERE owner = ?"
        params: list[Any] = [owner]
        if name is not None:
            sql += " AND name = ?"
            params.append(name)
        sql += " ORDER BY inverted_start_time ASC, id DESC"
        if limit is not None:
            sql += " LIMIT ?"
            params.append(int(limit))

        try:
            self._require_initialized()
            rows = await self.database.fetchall(sql, params)
            reports = [codec.decode_report(row, table=self.tables.reports) for row in rows]
        except STORE_ERRORS as e:
            logger.exception("Error loading reports for owner {}: {}", owner, e)
            return ReadResult.failure(e)

        return ReadResult.found(reports)

    # =========================================================================
    # Host callbacks
    # =========================================================================

    async def test_reader(
        self, context: Any = None, *, owner: str | None = None
    ) -> list[PendingTest]:
        """TestReader callback: pending tests, empty on no data or failure."""
        return (await self.read_tests(owner=owner)).items

    async def test_writer(
        self, context: Any, test: RecordedTest, *, owner: str | None = None
    ) -> bool:
        """TestWriter callback: True when the test was stored."""
        return (await self.write_test(test, owner=owner)).ok

    async def test_reporter(
        self, report: ExecutionReport, *, owner: str | None = None
    ) -> bool:
        """TestReporter callback: True when the report was stored."""
        return (await self.submit_report(report, owner=owner)).ok
