"""Configuration management for common-extensions.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (COMMON_EXT_*)
3. Config file (~/.common-ext/config.toml)
4. Default values (lowest priority)
"""

from common_extensions.config.env import ENV_PREFIX, EnvReader
from common_extensions.config.loader import (
    get_config,
    get_default_config_path,
    load_config_file,
)
from common_extensions.config.models import (
    LOG_FORMATS,
    LOG_LEVELS,
    ExtensionsConfig,
    LineEndingsConfig,
    LoggingConfig,
    RenderingConfig,
)
from common_extensions.config.toml_parser import (
    TomlParseError,
    load_toml_file,
    parse_toml,
)

__all__ = [
    # Models
    "LOG_FORMATS",
    "LOG_LEVELS",
    "ExtensionsConfig",
    "LineEndingsConfig",
    "LoggingConfig",
    "RenderingConfig",
    # Loader
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Helpers
    "ENV_PREFIX",
    "EnvReader",
    "parse_toml",
    "load_toml_file",
    "TomlParseError",
]
