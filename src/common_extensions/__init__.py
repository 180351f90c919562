"""common-extensions: small helpers for collections, strings and classes."""

from common_extensions.core import *  # noqa: F403
from common_extensions.core import __all__ as _core_all

__version__ = "0.1.0"

__all__ = [*_core_all, "__version__"]
