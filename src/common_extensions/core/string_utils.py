"""Ordinal string utilities.

All comparisons are exact code-point comparisons: no locale-aware
collation and no case folding.

Every helper also accepts str subclasses ("strong strings", such as a
FilePath(str) type). When a helper produces a new value it is rebuilt
as ``type(s)(result)``, so the caller's type survives the round trip.
"""

from __future__ import annotations

from typing import TypeVar

from common_extensions.core.validation import ensure_str

S = TypeVar("S", bound=str)


def _rewrap(original: S, result: str) -> S:
    if type(original) is str:
        return result  # type: ignore[return-value]
    return type(original)(result)


def starts_with_exact(s: str, prefix: str) -> bool:
    """Return True if s starts with prefix (ordinal comparison).

    Raises:
        ArgumentNoneError: If s or prefix is None.
    """
    ensure_str(s, "s")
    ensure_str(prefix, "prefix")
    return s.startswith(prefix)


def ends_with_exact(s: str, suffix: str) -> bool:
    """Return True if s ends with suffix (ordinal comparison).

    Raises:
        ArgumentNoneError: If s or suffix is None.
    """
    ensure_str(s, "s")
    ensure_str(suffix, "suffix")
    return s.endswith(suffix)


def contains_exact(s: str, needle: str) -> bool:
    """Return True if needle occurs anywhere in s (ordinal comparison).

    Raises:
        ArgumentNoneError: If s or needle is None.
    """
    ensure_str(s, "s")
    ensure_str(needle, "needle")
    return needle in s


def strip_suffix(s: S, suffix: str) -> S:
    """Remove suffix from the end of s if present.

    Returns s unchanged if it does not end with suffix, or if either
    s or suffix is empty.

    Examples:
        >>> strip_suffix("filename.txt", ".txt")
        'filename'
        >>> strip_suffix("filename.txt", ".csv")
        'filename.txt'

    Raises:
        ArgumentNoneError: If s or suffix is None.
    """
    ensure_str(s, "s")
    ensure_str(suffix, "suffix")

    if not s or not suffix:
        return s
    if not ends_with_exact(s, suffix):
        return s
    return _rewrap(s, s[: len(s) - len(suffix)])


def strip_prefix(s: S, prefix: str) -> S:
    """Remove prefix from the start of s if present.

    Returns s unchanged if it does not start with prefix, or if either
    s or prefix is empty.

    Raises:
        ArgumentNoneError: If s or prefix is None.
    """
    ensure_str(s, "s")
    ensure_str(prefix, "prefix")

    if not s or not prefix:
        return s
    if not starts_with_exact(s, prefix):
        return s
    return _rewrap(s, s[len(prefix) :])


def replace_exact(s: S, old: str, new: str) -> S:
    """Replace every non-overlapping occurrence of old with new, left to right.

    Returns s unchanged if s or old is empty. An empty old would
    otherwise insert new between every character.

    Raises:
        ArgumentNoneError: If s, old or new is None.
    """
    ensure_str(s, "s")
    ensure_str(old, "old")
    ensure_str(new, "new")

    if not s or not old:
        return s
    if not contains_exact(s, old):
        return s
    return _rewrap(s, s.replace(old, new))
