"""Line ending detection and normalization.

Three terminator forms are recognized:

- Unix: ``\\n`` not preceded by ``\\r``
- Windows: ``\\r\\n``
- Mac: ``\\r`` not followed by ``\\n``

Classification tests whether each form occurs anywhere in the input;
it does not count occurrences. Normalization rewrites every terminator
in a single left-to-right pass, so the output holds only the target form.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from common_extensions.core.errors import (
    InvalidArgumentError,
    UnsupportedLineEndingStyleError,
)
from common_extensions.core.validation import ensure_not_none, ensure_str

logger = logging.getLogger(__name__)

# Pre-compiled terminator patterns
_UNIX_PATTERN = re.compile(r"(?<!\r)\n")
_WINDOWS_PATTERN = re.compile(r"\r\n")
_MAC_PATTERN = re.compile(r"\r(?!\n)")

# Any single terminator; \r\n is tried first so it is replaced as one unit
_TERMINATOR_PATTERN = re.compile(r"\r\n|\r|\n")


class LineEndingStyle(str, Enum):
    """Line terminator convention of a string."""

    NONE = "none"
    """No line terminators."""

    UNIX = "unix"
    """Unix-style ``\\n``."""

    WINDOWS = "windows"
    """Windows-style ``\\r\\n``."""

    MAC = "mac"
    """Classic Mac-style ``\\r``."""

    MIXED = "mixed"
    """Two or more terminator forms in the same string."""


_TERMINATORS: dict[LineEndingStyle, str] = {
    LineEndingStyle.NONE: "",
    LineEndingStyle.UNIX: "\n",
    LineEndingStyle.WINDOWS: "\r\n",
    LineEndingStyle.MAC: "\r",
}


def _coerce_style(style: LineEndingStyle | str) -> LineEndingStyle:
    ensure_not_none(style, "style")
    if isinstance(style, LineEndingStyle):
        return style
    if not isinstance(style, str):
        raise UnsupportedLineEndingStyleError(style)
    try:
        return LineEndingStyle(style.casefold())
    except ValueError as e:
        raise UnsupportedLineEndingStyleError(style) from e


def classify_line_endings(s: str) -> LineEndingStyle:
    """Determine which line ending convention s uses.

    Args:
        s: Text to analyze.

    Returns:
        MIXED if more than one terminator form occurs, the single form
        found otherwise, or NONE if s has no terminators (including "").

    Raises:
        ArgumentNoneError: If s is None.
    """
    ensure_str(s, "s")

    if not s:
        return LineEndingStyle.NONE

    found = [
        style
        for style, pattern in (
            (LineEndingStyle.UNIX, _UNIX_PATTERN),
            (LineEndingStyle.WINDOWS, _WINDOWS_PATTERN),
            (LineEndingStyle.MAC, _MAC_PATTERN),
        )
        if pattern.search(s)
    ]

    if len(found) > 1:
        return LineEndingStyle.MIXED
    if found:
        return found[0]
    return LineEndingStyle.NONE


def normalize_line_endings(
    s: str,
    style: LineEndingStyle | str,
    *,
    legacy_mixed: bool = False,
) -> str:
    """Rewrite every line terminator in s to the form given by style.

    Args:
        s: Text to normalize.
        style: Target convention. NONE removes all terminators. Plain
            strings such as "unix" are accepted.
        legacy_mixed: Accept MIXED as a target and treat it as UNIX.
            Older callers relied on this; MIXED is otherwise rejected
            because it does not name a single terminator.

    Returns:
        The normalized text. "" is returned unchanged.

    Raises:
        ArgumentNoneError: If s is None.
        InvalidArgumentError: If style is MIXED and legacy_mixed is False.
        UnsupportedLineEndingStyleError: If style is not a known style.
    """
    ensure_str(s, "s")
    style = _coerce_style(style)

    if style is LineEndingStyle.MIXED:
        if not legacy_mixed:
            raise InvalidArgumentError(
                "MIXED is not a valid normalization target", "style"
            )
        logger.warning(
            "Normalizing to MIXED is deprecated; treating it as UNIX "
            "for compatibility",
            extra={"style": LineEndingStyle.MIXED.value},
        )
        style = LineEndingStyle.UNIX

    if not s:
        return s

    return _TERMINATOR_PATTERN.sub(_TERMINATORS[style], s)
