"""SQLite storage adapter for recorded UI tests and execution reports.

Typical use::

    store = await open_store(load_config(path))
    tests = await store.test_reader()
"""

from uitest_store.config import StoreConfig, load_config
from uitest_store.models import (
    ExecutionReport,
    PendingTest,
    ReadResult,
    RecordedStep,
    RecordedTest,
    ResultStatus,
    WriteResult,
)
from uitest_store.storage import SqliteTestStore, StoreDB, open_store

__version__ = "0.3.0"

__all__ = [
    "ExecutionReport",
    "PendingTest",
    "ReadResult",
    "RecordedStep",
    "RecordedTest",
    "ResultStatus",
    "SqliteTestStore",
    "StoreConfig",
    "StoreDB",
    "WriteResult",
    "__version__",
    "load_config",
    "open_store",
]
