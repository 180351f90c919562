"""TOML parsing for configuration files.

Parsing uses the standard library's tomllib. Loading a file is lenient:
a missing, unreadable or malformed file yields an empty dict so that
defaults and environment variables still apply.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class TomlParseError(ValueError):
    """Raised when TOML content cannot be parsed."""

    pass


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML content into a dictionary.

    Args:
        content: TOML file content as a string.

    Returns:
        Parsed dictionary.

    Raises:
        TomlParseError: If the content is not valid TOML.
    """
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise TomlParseError(str(e)) from e


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed dictionary. Returns empty dict if file doesn't exist
        or cannot be parsed.
    """
    if not path.exists():
        logger.debug("TOML file not found: %s", path)
        return {}

    try:
        content = path.read_text(encoding="utf-8")
        config = parse_toml(content)
        logger.debug("Loaded TOML config from %s", path)
        return config
    except (OSError, UnicodeDecodeError, TomlParseError) as e:
        logger.warning("Failed to load TOML file %s: %s", path, e)
        return {}
