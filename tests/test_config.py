import tomllib
from pathlib import Path

from config import Config, get_migrations_dir, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_writes_defaults(self, tmp_path):
        config_path = tmp_path / "config" / "budgetbook.toml"

        config = load_config(config_path)

        assert config_path.exists()
        assert config == Config.default()
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        assert data["database"]["filename"] == "budgetbook.db"
        assert data["budget"]["default_user_id"] == 1
        assert data["api"]["port"] == 8080

    def test_reads_values_from_file(self, tmp_path):
        config_path = tmp_path / "budgetbook.toml"
        config_path.write_text(
            f"""
base_dir = "{tmp_path / 'data'}"
enable_reset = true

[database]
filename = "home.db"
timeout = 5

[logging]
level = "DEBUG"

[api]
port = 9000

[budget]
default_user_id = 3
"""
        )

        config = load_config(config_path)

        assert config.base_dir == tmp_path / "data"
        assert config.db_path == tmp_path / "data" / "db" / "home.db"
        assert config.db_timeout == 5.0
        assert config.log_level == "DEBUG"
        assert config.log_dir == tmp_path / "data" / "logs"
        assert config.api_host == "0.0.0.0"
        assert config.api_port == 9000
        assert config.default_user_id == 3
        assert config.enable_reset is True

    def test_round_trip_of_written_file(self, tmp_path):
        config_path = tmp_path / "budgetbook.toml"

        written = load_config(config_path)
        loaded = load_config(config_path)

        assert loaded == written


def test_migrations_dir_is_next_to_code():
    assert get_migrations_dir() == Path(__file__).parent.parent / "db" / "migrations"
