"""
Storage layer for uitest-store.

This module provides:
- StoreDB: aiosqlite connection handle implementing DbSessionPort
- SqliteTestStore: test and report operations over that handle
- TableNames: validated table names for one store
- open_store: build an initialized store from configuration

The storage layer follows an async-first design for all I/O operations.
"""

from uitest_store.storage.factory import open_store
from uitest_store.storage.sqlite_store import SqliteTestStore
from uitest_store.storage.store_db import StoreDB
from uitest_store.storage.tables import TableNames

__all__ = [
    "SqliteTestStore",
    "StoreDB",
    "TableNames",
    "open_store",
]
