"""Configuration data models.

This module defines dataclasses for common-extensions configuration options.
Values arrive from TOML files and environment variables, so every section
checks the types it is given and raises ValueError for anything else.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from common_extensions.core.enumerable_utils import NullItemPolicy
from common_extensions.core.line_endings import LineEndingStyle

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error")
LOG_FORMATS: tuple[str, ...] = ("text", "json")


def _require(name: str, value: Any, kind: type) -> None:
    # bool is an int subclass; a TOML `true` is never a valid byte count
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(
            f"{name} must be of type {kind.__name__}, got {type(value).__name__} "
            f"{value!r}"
        )


def _choice(name: str, value: Any, choices: tuple[str, ...]) -> str:
    _require(name, value, str)
    if value.lower() not in choices:
        raise ValueError(f"{name} must be one of {list(choices)}, got {value!r}")
    return value


@dataclass
class LoggingConfig:
    """Configuration for logging output."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only); a str is expanded to a Path
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        _choice("level", self.level, LOG_LEVELS)
        _choice("format", self.format, LOG_FORMATS)
        if isinstance(self.file, str):
            self.file = Path(self.file).expanduser() if self.file else None
        elif self.file is not None:
            _require("file", self.file, Path)
        _require("include_stderr", self.include_stderr, bool)
        _require("max_bytes", self.max_bytes, int)
        _require("backup_count", self.backup_count, int)
        if self.max_bytes < 0 or self.backup_count < 0:
            raise ValueError("max_bytes and backup_count must not be negative")

    def with_overrides(
        self,
        *,
        level: str | None = None,
        file: Path | None = None,
        format: str | None = None,
        include_stderr: bool | None = None,
    ) -> LoggingConfig:
        """Return a copy with every non-None override applied.

        The copy is validated again, so an invalid override raises ValueError.
        """
        overrides = {
            "level": level,
            "file": file,
            "format": format,
            "include_stderr": include_stderr,
        }
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


@dataclass
class LineEndingsConfig:
    """Configuration for line ending normalization."""

    default_style: LineEndingStyle = LineEndingStyle.UNIX
    """Target style used when a command does not name one."""

    legacy_mixed_target: bool = False
    """Accept "mixed" as a normalization target and treat it as "unix".

    Off by default: "mixed" does not name a single terminator.
    """

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.default_style, LineEndingStyle):
            name = _choice(
                "default_style",
                self.default_style,
                tuple(s.value for s in LineEndingStyle),
            )
            self.default_style = LineEndingStyle(name.lower())
        _require("legacy_mixed_target", self.legacy_mixed_target, bool)
        if self.default_style is LineEndingStyle.MIXED and not self.legacy_mixed_target:
            raise ValueError(
                "default_style 'mixed' requires legacy_mixed_target = true"
            )


@dataclass
class RenderingConfig:
    """Configuration for rendering items to text."""

    null_policy: NullItemPolicy = NullItemPolicy.REMOVE
    separator: str = ","

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.null_policy, NullItemPolicy):
            name = _choice(
                "null_policy",
                self.null_policy,
                tuple(p.value for p in NullItemPolicy),
            )
            self.null_policy = NullItemPolicy(name.lower())
        _require("separator", self.separator, str)


@dataclass
class ExtensionsConfig:
    """Main configuration container.

    Aggregates all configuration sections.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    line_endings: LineEndingsConfig = field(default_factory=LineEndingsConfig)
    rendering: RenderingConfig = field(default_factory=RenderingConfig)
