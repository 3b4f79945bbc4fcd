"""Configuration management for uitest-store."""

from uitest_store.config.loader import load_config
from uitest_store.config.models import LoggingConfig, StorageConfig, StoreConfig

__all__ = ["LoggingConfig", "StorageConfig", "StoreConfig", "load_config"]
