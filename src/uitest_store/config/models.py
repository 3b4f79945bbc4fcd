"""Pydantic configuration models for uitest-store."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

# Table names are interpolated into SQL, so only plain identifiers are allowed.
TABLE_NAME_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"


class StorageConfig(BaseModel):
    """Storage configuration."""

    database_path: Path = Field(
        default_factory=lambda: Path("~/.uitest_store/tests.db").expanduser()
    )
    default_owner: str = Field(default="default", min_length=1, max_length=200)
    owners_table: str = Field(default="Owners", pattern=TABLE_NAME_PATTERN)
    tests_table: str = Field(default="Tests", pattern=TABLE_NAME_PATTERN)
    reports_table: str = Field(default="Reports", pattern=TABLE_NAME_PATTERN)

    @field_validator("database_path", mode="before")
    @classmethod
    def expand_path(cls, v: Path | str) -> Path:
        """Expand user path and resolve to absolute."""
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser().resolve()


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class StoreConfig(BaseSettings):
    """Root configuration for uitest-store."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "UITEST_STORE_",
        "env_nested_delimiter": "__",
    }
