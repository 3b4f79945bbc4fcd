"""Store construction from configuration."""

from loguru import logger

from uitest_store.config.models import StoreConfig
from uitest_store.errors import SchemaError
from uitest_store.storage.sqlite_store import SqliteTestStore
from uitest_store.storage.store_db import StoreDB
from uitest_store.utils.logging import configure_logging


async def open_store(
    config: StoreConfig | None = None, *, setup_logging: bool = True
) -> SqliteTestStore:
    """
    Open the configured database and return an initialized store.

    The returned store owns its database; close it with
    ``await store.close()``.

    Args:
        config: Store configuration; defaults are used when omitted.
        setup_logging: Apply ``config.logging`` first. Pass False when
            the host configures loguru itself.

    Raises:
        SchemaError: If the schema could not be created or migrated.
    """
    config = config or StoreConfig()
    if setup_logging:
        configure_logging(config.logging)

    db = StoreDB(config.storage.database_path)
    await db.initialize()

    store = SqliteTestStore.from_config(db, config.storage, owns_database=True)
    try:
        await store.initialize()
    except SchemaError:
        logger.error("Could not prepare test store at {}", config.storage.database_path)
        await db.close()
        raise
    return store
