# Area: Shared Tests
"""Tests for the command-line entry point and its exit codes."""

from unittest.mock import patch

import pytest

from nuggets_server.cli import build_parser, main, parse_seed
from nuggets_server.errors import InvalidSeedError

from helpers import ROOM_MAP


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("nuggets_server._runner_config.load_dotenv"):
        yield


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "room.txt"
    path.write_text(ROOM_MAP + "\n")
    return str(path)


@pytest.fixture
def log_args(tmp_path):
    return ["--log-file", str(tmp_path / "server.log")]


class TestParseSeed:
    """Tests for parse_seed()."""

    def test_absent(self):
        assert parse_seed(None) is None

    def test_digits(self):
        assert parse_seed("42") == 42
        assert parse_seed("0") == 0

    def test_negative(self):
        with pytest.raises(InvalidSeedError) as exc:
            parse_seed("-1")
        assert exc.value.exit_code == 3

    def test_not_a_number(self):
        with pytest.raises(InvalidSeedError):
            parse_seed("abc")


class TestParser:
    """Tests for build_parser()."""

    def test_positional_and_flags(self):
        args = build_parser().parse_args(["map.txt", "7", "--port", "30000", "--trace"])
        assert args.map_file == "map.txt"
        assert args.seed == "7"
        assert args.port == 30000
        assert args.trace is True

    def test_trace_defaults_to_none(self):
        args = build_parser().parse_args(["map.txt"])
        assert args.trace is None
        assert args.seed is None


class TestMainExitCodes:
    """Tests for main() exit codes."""

    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().err

    def test_unknown_flag(self, map_file):
        assert main([map_file, "--bogus"]) == 1

    def test_too_many_arguments(self, map_file):
        assert main([map_file, "1", "2"]) == 1

    def test_missing_map(self, tmp_path, log_args):
        assert main([str(tmp_path / "none.txt")] + log_args) == 2

    def test_invalid_map(self, tmp_path, log_args):
        path = tmp_path / "bad.txt"
        path.write_text("+--+\n|xx|\n+--+\n")
        assert main([str(path)] + log_args) == 2

    def test_bad_seed(self, map_file, log_args):
        assert main([map_file, "abc"] + log_args) == 3

    def test_bad_config_value(self, map_file, log_args):
        assert main([map_file, "--port", "70000"] + log_args) == 1

    def test_finished_game(self, map_file, log_args):
        with patch("nuggets_server.runner.ServerRunner.run", return_value=True):
            assert main([map_file, "42"] + log_args) == 0

    def test_interrupted_game(self, map_file, log_args):
        with patch("nuggets_server.runner.ServerRunner.run", return_value=False):
            assert main([map_file] + log_args) == 1

    def test_bind_failure(self, map_file, log_args):
        with patch("nuggets_server.runner.ServerRunner.run", side_effect=OSError("in use")):
            assert main([map_file] + log_args) == 1
