"""uitest-store error types.

All custom exceptions inherit from UiTestStoreError to allow
catching any store-specific error.
"""


class UiTestStoreError(Exception):
    """Base exception for all uitest-store errors."""

    pass


class ConfigurationError(UiTestStoreError):
    """Invalid configuration."""

    pass


class StorageError(UiTestStoreError):
    """Database or storage operation failed."""

    pass


class SchemaError(StorageError):
    """Schema bootstrap or migration failed."""

    def __init__(self, message: str, version: int | None = None) -> None:
        super().__init__(message)
        self.version = version


class StoreNotInitializedError(StorageError):
    """Operation attempted before the store was initialized."""

    pass


class PayloadError(UiTestStoreError):
    """Stored JSON payload is malformed or does not match its model."""

    def __init__(self, message: str, table: str, row_id: int | None = None) -> None:
        super().__init__(message)
        self.table = table
        self.row_id = row_id
