# Area: Shared Tests
"""Tests for ServerConfig validation and config loading."""

import json
from unittest.mock import patch

import pytest

from nuggets_server._runner_config import (
    ENV_MAPPINGS,
    MAX_LETTERS,
    ServerConfig,
    load_config,
    read_config_file,
    read_environment,
    validate_config,
)
from nuggets_server.errors import UsageError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove NUGGETS_* variables and skip .env loading."""
    for env_key in ENV_MAPPINGS:
        monkeypatch.delenv(env_key, raising=False)
    with patch("nuggets_server._runner_config.load_dotenv"):
        yield


class TestServerConfig:
    """Tests for ServerConfig defaults and validators."""

    def test_defaults(self):
        config = ServerConfig()
        assert config.gold_total == 250
        assert config.gold_min_piles == 10
        assert config.gold_max_piles == 30
        assert config.max_players == MAX_LETTERS == 26
        assert config.max_name_length == 50
        assert config.port == 0

    def test_max_players_above_letters_rejected(self):
        with pytest.raises(UsageError) as exc:
            validate_config({"max_players": 27})
        assert "max_players" in str(exc.value)

    def test_zero_gold_rejected(self):
        with pytest.raises(UsageError):
            validate_config({"gold_total": 0})

    def test_pile_range_rejected(self):
        with pytest.raises(UsageError):
            validate_config({"gold_min_piles": 20, "gold_max_piles": 10})

    def test_port_range_rejected(self):
        with pytest.raises(UsageError):
            validate_config({"port": 70000})

    def test_usage_error_exit_code(self):
        with pytest.raises(UsageError) as exc:
            validate_config({"port": -1})
        assert exc.value.exit_code == 1


class TestReadConfigFile:
    """Tests for read_config_file()."""

    def test_no_path(self):
        assert read_config_file(None) == {}

    def test_reads_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"gold_total": 100}))
        assert read_config_file(str(path)) == {"gold_total": 100}

    def test_missing_file(self, tmp_path):
        with pytest.raises(UsageError):
            read_config_file(str(tmp_path / "nope.json"))

    def test_bad_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(UsageError):
            read_config_file(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(UsageError):
            read_config_file(str(path))


class TestLoadConfig:
    """Tests for layering file, environment and overrides."""

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("NUGGETS_PORT", "30000")
        monkeypatch.setenv("NUGGETS_TRACE", "yes")
        assert read_environment() == {"port": "30000", "trace": True}
        config = load_config()
        assert config.port == 30000
        assert config.trace is True

    def test_environment_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"gold_total": 100, "max_players": 4}))
        monkeypatch.setenv("NUGGETS_GOLD_TOTAL", "80")
        config = load_config(str(path))
        assert config.gold_total == 80
        assert config.max_players == 4

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("NUGGETS_PORT", "30000")
        config = load_config(overrides={"port": 31000})
        assert config.port == 31000

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("NUGGETS_LOG_FILE", "env.log")
        config = load_config(overrides={"log_file": None, "trace": None})
        assert config.log_file == "env.log"
        assert config.trace is False

    def test_bad_environment_value(self, monkeypatch):
        monkeypatch.setenv("NUGGETS_MAX_PLAYERS", "many")
        with pytest.raises(UsageError):
            load_config()
