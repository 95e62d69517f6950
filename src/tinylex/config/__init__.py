# Copyright 2026 TinyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the tinylex scanner."""

from tinylex.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    ScannerConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ScannerConfig",
    "find_config",
    "load_config",
]
