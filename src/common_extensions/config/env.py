"""Environment variable reader for COMMON_EXT_* settings.

EnvReader looks variables up by their short name (``LOG_LEVEL`` reads
``COMMON_EXT_LOG_LEVEL``) and converts them to the type a config field
expects. A value that is set but cannot be converted raises ValueError
naming the full variable, so the CLI reports it as a configuration error
instead of quietly falling back to a default.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

# Prefix shared by every environment variable the project reads.
ENV_PREFIX = "COMMON_EXT_"

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


class EnvReader:
    """Typed access to prefixed environment variables.

    Example:
        reader = EnvReader(env={"COMMON_EXT_LOG_MAX_BYTES": "2048"})
        reader.get_int("LOG_MAX_BYTES", 10_485_760)  # 2048
        reader.get_int("LOG_BACKUP_COUNT", 5)  # 5, not set
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        prefix: str = ENV_PREFIX,
    ) -> None:
        """Initialize the reader.

        Args:
            env: Mapping to read instead of os.environ.
            prefix: Prepended to every name passed to the get_* methods.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ
        self._prefix = prefix

    def var_name(self, name: str) -> str:
        """Return the full environment variable name for a short name."""
        return f"{self._prefix}{name}"

    def _raw(self, name: str) -> str | None:
        value = self._env.get(self.var_name(name))
        if value is not None:
            logger.debug("Read %s from environment", self.var_name(name))
        return value

    def get_str(self, name: str, default: str | None = None) -> str | None:
        """Return the variable's value, or default when it is not set."""
        value = self._raw(name)
        return default if value is None else value

    def get_int(self, name: str, default: int | None = None) -> int | None:
        """Return the variable parsed as a base-10 integer.

        Raises:
            ValueError: If the variable is set but is not an integer.
        """
        value = self._raw(name)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(
                f"{self.var_name(name)} must be an integer, got {value!r}"
            ) from None

    def get_bool(self, name: str, default: bool | None = None) -> bool | None:
        """Return the variable parsed as a boolean.

        Accepts true/1/yes/on and false/0/no/off, case-insensitively.

        Raises:
            ValueError: If the variable is set to any other word.
        """
        value = self._raw(name)
        if value is None:
            return default
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(
            f"{self.var_name(name)} must be one of "
            f"{sorted(_TRUE_WORDS | _FALSE_WORDS)}, got {value!r}"
        )

    def get_path(self, name: str, default: Path | None = None) -> Path | None:
        """Return the variable as a tilde-expanded Path.

        An empty value counts as not set.
        """
        value = self._raw(name)
        if not value:
            return default
        return Path(value).expanduser()
