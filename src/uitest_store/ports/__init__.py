"""Port interfaces for uitest-store.

Ports define the contracts that adapters must implement. The store
depends on DbSessionPort rather than a concrete connection, and the
host framework depends on the callback ports rather than the store.
"""

from uitest_store.ports.callbacks import TestReader, TestReporter, TestWriter
from uitest_store.ports.db_session import DbSessionPort

__all__ = [
    "DbSessionPort",
    "TestReader",
    "TestReporter",
    "TestWriter",
]
