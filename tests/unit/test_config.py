"""Unit tests for instruction parsing and configuration loading.

Each test has a single assertion.
"""

import json

import pytest

from lexipath.cli import create_parser
from lexipath.core import ConfigurationError, load_config, load_instruction, parse_instruction


class TestParseInstruction:
    """Test the three-line instruction format."""

    def test_parses_costs(self) -> None:
        """First line becomes the cost vector."""
        query = parse_instruction("1 3 1 5\nteam\nmate\n")
        assert query.costs.as_tuple() == (1, 3, 1, 5)

    def test_parses_origin(self) -> None:
        """Second line becomes the origin."""
        assert parse_instruction("1 3 1 5\nteam\nmate\n").origin == "team"

    def test_parses_target(self) -> None:
        """Third line becomes the target."""
        assert parse_instruction("1 3 1 5\nteam\nmate\n").target == "mate"

    def test_normalizes_words(self) -> None:
        """Origin and target are trimmed and lower-cased."""
        assert parse_instruction("1 1 1 1\n  TEAM \nmate").origin == "team"

    def test_accepts_repeated_whitespace_between_costs(self) -> None:
        """Costs may be separated by any whitespace."""
        assert parse_instruction("1  2\t3 4\nteam\nmate").costs.anagram == 4

    def test_rejects_two_lines(self) -> None:
        """Missing target line is a configuration error."""
        with pytest.raises(ConfigurationError, match="3 lines"):
            parse_instruction("1 1 1 1\nteam\n")

    def test_rejects_four_lines(self) -> None:
        """An extra line is a configuration error."""
        with pytest.raises(ConfigurationError):
            parse_instruction("1 1 1 1\nteam\nmate\nextra\n")

    def test_rejects_wrong_token_count(self) -> None:
        """Three costs is a configuration error."""
        with pytest.raises(ConfigurationError):
            parse_instruction("1 1 1\nteam\nmate\n")

    def test_rejects_non_integer_cost(self) -> None:
        """A non-integer cost is a configuration error."""
        with pytest.raises(ConfigurationError):
            parse_instruction("1 1 x 1\nteam\nmate\n")


class TestLoadInstruction:
    """Test reading instruction files."""

    def test_reads_file(self, tmp_path) -> None:
        """A valid file produces a query."""
        path = tmp_path / "input.txt"
        path.write_text("2 2 1 4\ncats\nbats\n")
        assert load_instruction(path).costs.substitute == 1

    def test_missing_file_raises_os_error(self, tmp_path) -> None:
        """Unreadable file raises OSError."""
        with pytest.raises(OSError):
            load_instruction(tmp_path / "missing.txt")

    def test_malformed_file_raises_configuration_error(self, tmp_path) -> None:
        """Malformed content raises ConfigurationError."""
        path = tmp_path / "input.txt"
        path.write_text("2 2 1\ncats\nbats\n")
        with pytest.raises(ConfigurationError):
            load_instruction(path)


class TestLoadConfig:
    """Test JSON and CLI configuration precedence."""

    def test_uses_defaults_without_json(self) -> None:
        """Without JSON, parser defaults apply."""
        parser = create_parser()
        args = parser.parse_args([])
        assert load_config(None, args, parser).words == "words.txt"

    def test_json_value_applies(self, tmp_path) -> None:
        """JSON values fill settings not given on the command line."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"words": "big.txt", "max_expansions": 50}))
        parser = create_parser()
        args = parser.parse_args([])
        assert load_config(str(config_file), args, parser).max_expansions == 50

    def test_cli_overrides_json(self, tmp_path) -> None:
        """Explicit CLI flags take precedence over JSON."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"words": "big.txt"}))
        parser = create_parser()
        args = parser.parse_args(["-w", "small.txt"])
        assert load_config(str(config_file), args, parser).words == "small.txt"

    def test_json_flag_enables_verbose(self, tmp_path) -> None:
        """Boolean flags may be switched on from JSON."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"verbose": True}))
        parser = create_parser()
        args = parser.parse_args([])
        assert load_config(str(config_file), args, parser).verbose

    def test_invalid_json_raises_configuration_error(self, tmp_path) -> None:
        """Malformed JSON raises ConfigurationError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        parser = create_parser()
        args = parser.parse_args([])
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_config(str(config_file), args, parser)

    def test_invalid_value_raises_configuration_error(self) -> None:
        """Out-of-range values fail validation."""
        parser = create_parser()
        args = parser.parse_args(["--max-expansions", "0"])
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(None, args, parser)
