"""Tests for configuration loading."""

from pathlib import Path

import pytest

from uitest_store.config import StoreConfig, load_config
from uitest_store.errors import ConfigurationError


class TestLoadConfig:
    """Tests for load_config."""

    def test_none_returns_defaults(self) -> None:
        config = load_config(None)
        assert isinstance(config, StoreConfig)
        assert config.storage.default_owner == "default"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_loads_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "store.yaml"
        config_file.write_text(
            "storage:\n"
            f"  database_path: {tmp_path / 'ui.db'}\n"
            "  default_owner: tablet\n"
            "  owners_table: Suites\n"
            "logging:\n"
            "  level: WARNING\n"
        )
        config = load_config(config_file)
        assert config.storage.database_path == (tmp_path / "ui.db").resolve()
        assert config.storage.default_owner == "tablet"
        assert config.storage.owners_table == "Suites"
        assert config.logging.level == "WARNING"

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        config = load_config(config_file)
        assert config.storage.tests_table == "Tests"

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("storage: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(config_file)

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- one\n- two\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(config_file)
