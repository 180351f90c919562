"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (applied by the caller, see LoggingConfig.with_overrides)
2. Environment variables (COMMON_EXT_*)
3. Config file (~/.common-ext/config.toml)
4. Default values

Environment variables:
- COMMON_EXT_CONFIG_PATH: Path to config file (overrides default location)
- COMMON_EXT_LOG_LEVEL: Log level (debug, info, warning, error)
- COMMON_EXT_LOG_FILE: Log file path
- COMMON_EXT_LOG_FORMAT: Log format (text, json)
- COMMON_EXT_LOG_INCLUDE_STDERR: Also log to stderr when a log file is set
- COMMON_EXT_LOG_MAX_BYTES: Log file rotation threshold in bytes
- COMMON_EXT_LOG_BACKUP_COUNT: Number of rotated log files to keep
- COMMON_EXT_DEFAULT_LINE_ENDING: Default normalization target
- COMMON_EXT_LEGACY_MIXED_TARGET: Accept "mixed" as a normalization target
- COMMON_EXT_NULL_POLICY: Null item policy for rendering (remove, include, raise)
- COMMON_EXT_SEPARATOR: Separator used when joining items
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from common_extensions.config.env import EnvReader
from common_extensions.config.models import (
    ExtensionsConfig,
    LineEndingsConfig,
    LoggingConfig,
    RenderingConfig,
)
from common_extensions.config.toml_parser import load_toml_file

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".common-ext"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

_DEFAULTS = ExtensionsConfig()


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by the COMMON_EXT_CONFIG_PATH environment variable.

    Returns:
        Path to config file.
    """
    return EnvReader(env).get_path("CONFIG_PATH") or DEFAULT_CONFIG_FILE


def load_config_file(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        path: Path to config file. If None, uses the default location.
        env: Environment mapping consulted for COMMON_EXT_CONFIG_PATH.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist.
    """
    if path is None:
        path = get_default_config_path(env)
    return load_toml_file(path)


def _section(file_config: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = file_config.get(name, {})
    if not isinstance(section, Mapping):
        raise ValueError(
            f"[{name}] must be a table, got {type(section).__name__} {section!r}"
        )
    return section


def get_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ExtensionsConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides COMMON_EXT_CONFIG_PATH).
        env: Environment mapping to read instead of os.environ.

    Returns:
        ExtensionsConfig with merged configuration.

    Raises:
        ValueError: If a section is not a table, an environment variable
            cannot be parsed, or a merged value fails validation.
    """
    reader = EnvReader(env)
    file_config = load_config_file(config_path, env)

    logging_file = _section(file_config, "logging")
    line_endings_file = _section(file_config, "line_endings")
    rendering_file = _section(file_config, "rendering")

    defaults = _DEFAULTS.logging
    logging_config = LoggingConfig(
        level=reader.get_str("LOG_LEVEL", logging_file.get("level", defaults.level)),
        file=reader.get_path("LOG_FILE") or logging_file.get("file"),
        format=reader.get_str(
            "LOG_FORMAT", logging_file.get("format", defaults.format)
        ),
        include_stderr=reader.get_bool(
            "LOG_INCLUDE_STDERR",
            logging_file.get("include_stderr", defaults.include_stderr),
        ),
        max_bytes=reader.get_int(
            "LOG_MAX_BYTES", logging_file.get("max_bytes", defaults.max_bytes)
        ),
        backup_count=reader.get_int(
            "LOG_BACKUP_COUNT",
            logging_file.get("backup_count", defaults.backup_count),
        ),
    )

    line_endings = LineEndingsConfig(
        default_style=reader.get_str(
            "DEFAULT_LINE_ENDING",
            line_endings_file.get(
                "default_style", _DEFAULTS.line_endings.default_style.value
            ),
        ),  # type: ignore[arg-type]
        legacy_mixed_target=reader.get_bool(
            "LEGACY_MIXED_TARGET",
            line_endings_file.get("legacy_mixed_target", False),
        ),
    )

    rendering = RenderingConfig(
        null_policy=reader.get_str(
            "NULL_POLICY",
            rendering_file.get("null_policy", _DEFAULTS.rendering.null_policy.value),
        ),  # type: ignore[arg-type]
        separator=reader.get_str(
            "SEPARATOR", rendering_file.get("separator", _DEFAULTS.rendering.separator)
        ),
    )

    return ExtensionsConfig(
        logging=logging_config,
        line_endings=line_endings,
        rendering=rendering,
    )
