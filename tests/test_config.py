"""Tests for configuration loading and writing."""

import pytest

from config import Config, load_config, write_config


class TestConfig:
    """Tests for load_config and write_config."""

    def test_missing_file_writes_defaults(self, tmp_path):
        config_path = tmp_path / "pennywise.toml"

        config = load_config(config_path)

        assert config_path.exists()
        assert config == Config.default()
        assert config.db_path.name == "pennywise.db"

    def test_round_trip(self, tmp_path, test_config):
        config_path = tmp_path / "pennywise.toml"
        test_config.default_user = "alice"
        test_config.currency = "EUR"
        test_config.enable_reset = True

        write_config(test_config, config_path)
        loaded = load_config(config_path)

        assert loaded == test_config

    def test_empty_default_user_loads_as_none(self, tmp_path, test_config):
        config_path = tmp_path / "pennywise.toml"

        write_config(test_config, config_path)

        assert load_config(config_path).default_user is None

    def test_partial_file_uses_defaults(self, tmp_path):
        config_path = tmp_path / "pennywise.toml"
        config_path.write_text(f'base_dir = "{tmp_path / "data"}"\n')

        config = load_config(config_path)

        assert config.db_data_dir == tmp_path / "data" / "db"
        assert config.log_dir == tmp_path / "data" / "logs"
        assert config.log_level == "INFO"
        assert config.currency == "USD"

    def test_unsupported_currency_rejected(self, tmp_path):
        config_path = tmp_path / "pennywise.toml"
        config_path.write_text('currency = "XYZ"\n')

        with pytest.raises(ValueError):
            load_config(config_path)
