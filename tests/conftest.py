"""Shared pytest fixtures for uitest-store tests."""

from collections.abc import AsyncIterator, Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from uitest_store.models import (
    DeviceInfo,
    ExecutionReport,
    RecordedStep,
    RecordedTest,
    ReportImage,
    ReportStep,
)
from uitest_store.storage import SqliteTestStore, StoreDB

START = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path."""
    return tmp_path / "tests.db"


@pytest.fixture
async def db(db_path: Path) -> AsyncIterator[StoreDB]:
    """Provide an open StoreDB."""
    store_db = StoreDB(db_path)
    await store_db.initialize()
    yield store_db
    await store_db.close()


@pytest.fixture
async def store(db: StoreDB) -> SqliteTestStore:
    """Provide an initialized store using the default tables."""
    test_store = SqliteTestStore(db)
    await test_store.initialize()
    return test_store


@pytest.fixture
def make_test() -> Callable[..., RecordedTest]:
    """Build recorded tests whose steps carry image bytes."""

    def _make(name: str = "login", steps: int = 2, **kwargs: Any) -> RecordedTest:
        return RecordedTest(
            name=name,
            steps=[
                RecordedStep(
                    id=f"tap_{i}",
                    image=b"\x89PNG" + bytes([i]),
                    values={"testableId": f"button_{i}"},
                )
                for i in range(steps)
            ],
            **kwargs,
        )

    return _make


@pytest.fixture
def make_report() -> Callable[..., ExecutionReport]:
    """Build execution reports with one passing and optionally one failing step."""

    def _make(
        name: str = "login",
        start: datetime = START,
        failed: bool = False,
        **kwargs: Any,
    ) -> ExecutionReport:
        steps = [
            ReportStep(
                id="tap",
                step={"testableId": "button_0"},
                start_time=start,
                end_time=start + timedelta(milliseconds=250),
            )
        ]
        if failed:
            steps.append(ReportStep(id="assert_text", error="Text mismatch"))
        return ExecutionReport(
            name=name,
            version=1,
            device_info=DeviceInfo(brand="google", model="Pixel 7", os="android"),
            start_time=start,
            end_time=start + timedelta(seconds=3),
            steps=steps,
            images=[ReportImage(id="screen", hash="abc", image=bytes(range(256)))],
            logs=["started", "finished"],
            **kwargs,
        )

    return _make
