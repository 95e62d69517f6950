# Copyright 2026 TinyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner configuration model and its YAML loader."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tinylex.scanner.buffer import DEFAULT_BUFFER_LENGTH
from tinylex.scanner.lexer import MAX_TOKEN_LENGTH

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".tinylex.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class ScannerConfig(BaseModel):
    """Settings that control listing output and scanner limits.

    Attributes:
        echo_source: Echo every source line to the listing.
        trace_scan: Write one trace line per token to the listing.
        max_token_length: Maximum number of characters kept in a lexeme.
        buffer_length: Size of the line buffer.
        source_suffix: Suffix appended to source names that have no extension.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    echo_source: bool = Field(alias="echo-source", default=True)
    trace_scan: bool = Field(alias="trace-scan", default=True)
    max_token_length: int = Field(alias="max-token-length", default=MAX_TOKEN_LENGTH, ge=1)
    buffer_length: int = Field(alias="buffer-length", default=DEFAULT_BUFFER_LENGTH, ge=2)
    source_suffix: str = Field(alias="source-suffix", default=".tny", pattern=r"^\.[^./\\]+$")


def load_config(path: Path) -> ScannerConfig:
    """Load and validate a scanner configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated ScannerConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ScannerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> Path | None:
    """Return the configuration file in *directory*, or None if there is none."""
    candidate = directory / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None
