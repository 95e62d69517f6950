# Copyright 2026 TinyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the scanner configuration module."""

from pathlib import Path

import pytest

from tinylex.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ScannerConfig,
    find_config,
    load_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_config_file_name_constant() -> None:
    assert CONFIG_FILE_NAME == ".tinylex.yaml"


def test_defaults() -> None:
    """A default config echoes and traces with the classic limits."""
    config = ScannerConfig()
    assert config.echo_source is True
    assert config.trace_scan is True
    assert config.max_token_length == 40
    assert config.buffer_length == 256
    assert config.source_suffix == ".tny"


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, ""))
    assert config == ScannerConfig()


def test_full_config(tmp_path: Path) -> None:
    """All keys are read through their kebab-case names."""
    content = """\
echo-source: false
trace-scan: false
max-token-length: 8
buffer-length: 64
source-suffix: .tiny
"""
    config = load_config(_write_config(tmp_path, content))

    assert config.echo_source is False
    assert config.trace_scan is False
    assert config.max_token_length == 8
    assert config.buffer_length == 64
    assert config.source_suffix == ".tiny"


def test_partial_config_keeps_other_defaults(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, "trace-scan: false\n"))
    assert config.trace_scan is False
    assert config.echo_source is True


def test_find_config_present(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "")
    assert find_config(tmp_path) == path


def test_find_config_absent(tmp_path: Path) -> None:
    assert find_config(tmp_path) is None


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "echo-source: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write_config(tmp_path, "- a\n- b\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write_config(tmp_path, "colour: blue\n"))


@pytest.mark.parametrize(
    "content",
    [
        "max-token-length: 0\n",
        "buffer-length: 1\n",
        "source-suffix: tny\n",
        "echo-source: maybe\n",
    ],
)
def test_invalid_values_raise(tmp_path: Path, content: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, content))
