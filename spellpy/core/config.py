"""Configuration management for spellpy."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from spellpy.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a spell-checking run."""

    # Lexicon
    dictionary: str = Field(Constants.DEFAULT_DICTIONARY, description="Word list file")
    builtin_dictionary: bool = Field(False, description="Use the english-words package instead")
    include: str | None = Field(None, description="Extra known words")
    expected_size: int | None = Field(None, ge=1, description="Expected dictionary size")

    # Input and output
    input: str | None = Field(None, description="File to check ('-' for stdin)")
    output: str | None = None
    format: Literal["text", "yaml"] = Field("text", description="Result format")
    unique: bool = Field(False, description="Report each misspelled word once")
    reports: str | None = None
    log_file: str | None = None

    # Flags
    verbose: bool = False
    debug: bool = False
    jobs: int = Field(1, ge=1)

    @field_validator("dictionary", "include", "input", "output", "reports", "log_file")
    @classmethod
    def expand_paths(cls, v):
        """Expand ~ in path-like fields."""
        if v is None or v == Constants.STDIN_MARKER:
            return v
        return expand_file_path(v) or v


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
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "dictionary": get_value("dictionary", Constants.DEFAULT_DICTIONARY),
        "builtin_dictionary": cli_args.builtin_dictionary
        or json_config.get("builtin_dictionary", False),
        "include": get_value("include", None),
        "expected_size": get_value("expected_size", None),
        "input": get_value("input", None),
        "output": get_value("output", None),
        "format": get_value("format", "text"),
        "unique": cli_args.unique or json_config.get("unique", False),
        "reports": get_value("reports", None),
        "log_file": get_value("log_file", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "jobs": get_value("jobs", 1),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
