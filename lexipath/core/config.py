"""Configuration management for LexiPath."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from lexipath.core.costs import CostModel
from lexipath.core.errors import ConfigurationError
from lexipath.utils import Constants, expand_file_path, read_text_safely


class Config(BaseModel):
    """Application settings for the command-line tool."""

    words: str | None = Field(Constants.DEFAULT_WORD_FILE, description="Dictionary word file")
    builtin_dictionary: bool = Field(False, description="Use the english-words package")
    max_expansions: int | None = Field(None, ge=1, description="Node-expansion cap per query")
    log_file: str | None = None
    verbose: bool = False
    debug: bool = False


class SearchQuery(BaseModel):
    """A single cost query: cost vector plus origin and target words."""

    costs: CostModel
    origin: str
    target: str

    @field_validator("origin", "target", mode="before")
    @classmethod
    def normalize_word(cls, v):
        """Trim and lower-case the word."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def parse_instruction(text: str) -> SearchQuery:
    """Parse the three-line instruction format.

    Line 1 holds `insert delete substitute anagram`, line 2 the origin and
    line 3 the target.

    Raises:
        ConfigurationError: If the line count, token count or costs are invalid.
    """
    lines = text.splitlines()
    if len(lines) != Constants.INSTRUCTION_LINE_COUNT:
        raise ConfigurationError(
            f"Instruction must have {Constants.INSTRUCTION_LINE_COUNT} lines, got {len(lines)}"
        )
    costs = CostModel.from_tokens(lines[0].split())
    return SearchQuery(costs=costs, origin=lines[1], target=lines[2])


def load_instruction(filepath: str | Path) -> SearchQuery:
    """Read and parse an instruction file.

    Raises:
        ConfigurationError: If the file content is malformed.
        OSError: If the file cannot be read.
    """
    path = expand_file_path(str(filepath)) or str(filepath)
    text = read_text_safely(path, "Instruction file", _read_utf8)
    try:
        return parse_instruction(text)
    except ConfigurationError as e:
        logger.error(f"✗ Invalid instruction file {path}: {e}")
        raise


def _read_utf8(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        raw = read_text_safely(json_path, "Config file", _read_utf8)
        try:
            json_config = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ConfigurationError(f"Invalid JSON configuration: {e}") from e
        if not isinstance(json_config, dict):
            raise ConfigurationError("JSON configuration must be an object")

    config_dict = {
        "words": get_value("words", Constants.DEFAULT_WORD_FILE),
        "builtin_dictionary": cli_args.builtin_dictionary
        or json_config.get("builtin_dictionary", False),
        "max_expansions": get_value("max_expansions", None),
        "log_file": get_value("log_file", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ConfigurationError(f"Invalid configuration: {e}") from e
