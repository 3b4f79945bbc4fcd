"""Callback contracts the host testing framework plugs storage into."""

from typing import Any, Protocol

from uitest_store.models.reports import ExecutionReport
from uitest_store.models.tests import PendingTest, RecordedTest


class TestReader(Protocol):
    """Produce the tests pending execution."""

    async def __call__(
        self, context: Any = None, *, owner: str | None = None
    ) -> list[PendingTest]:
        """Return pending tests; empty when there are none or loading failed."""
        ...


class TestWriter(Protocol):
    """Persist a recorded test."""

    async def __call__(
        self, context: Any, test: RecordedTest, *, owner: str | None = None
    ) -> bool:
        """Return True when the test was stored."""
        ...


class TestReporter(Protocol):
    """Persist a completed execution report."""

    async def __call__(self, report: ExecutionReport, *, owner: str | None = None) -> bool:
        """Return True when the report was stored."""
        ...
