"""Method lookup along a class's inheritance chain.

find_method() examines one class at a time, following the method
resolution order, and looks only at each class's own namespace. The
first class that declares an eligible method wins; reaching the end of
the chain means the method was not found.

Binding criteria map onto Python as follows:

- INSTANCE matches plain functions; STATIC matches staticmethod and
  classmethod members.
- PUBLIC matches names without a leading underscore; NON_PUBLIC matches
  underscored names (dunders included). A ``__private`` name is also
  looked up in its name-mangled ``_Class__private`` form.
- IGNORE_CASE compares names case-insensitively.

Only methods defined in Python are matched. Slot wrappers and method
descriptors of built-in types (dict.get, for example) are skipped.
"""

from __future__ import annotations

import inspect
import logging
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from enum import Flag
from typing import Any

from common_extensions.core.errors import AmbiguousMatchError, InvalidArgumentError
from common_extensions.core.validation import ensure_not_empty, ensure_not_none

logger = logging.getLogger(__name__)


class BindingFlags(Flag):
    """Criteria controlling which methods find_method() may return."""

    NONE = 0
    INSTANCE = 1
    STATIC = 2
    PUBLIC = 4
    NON_PUBLIC = 8
    IGNORE_CASE = 16
    DEFAULT = INSTANCE | STATIC | PUBLIC


@dataclass(frozen=True)
class MethodInfo:
    """A method located by find_method()."""

    name: str
    """Attribute name as declared (mangled for private names)."""

    owner: type
    """Class whose namespace declares the method."""

    function: Callable[..., Any]
    """Underlying function, unwrapped from staticmethod/classmethod."""

    kind: str
    """One of "instance", "static" or "class"."""

    def bind(self, target: Any = None) -> Callable[..., Any]:
        """Return a callable for this method.

        Args:
            target: Instance to bind an instance method to. For class
                methods, an instance or class to bind to (defaults to
                owner). Ignored for static methods.

        Raises:
            ArgumentNoneError: If target is None for an instance method.
        """
        if self.kind == "static":
            return self.function
        if self.kind == "class":
            if target is None:
                target = self.owner
            elif not isinstance(target, type):
                target = type(target)
            return types.MethodType(self.function, target)
        ensure_not_none(target, "target")
        return types.MethodType(self.function, target)


def _describe(member: Any) -> tuple[str, Callable[..., Any]] | None:
    """Return (kind, function) for a method-like class attribute."""
    if isinstance(member, staticmethod):
        return "static", member.__func__
    if isinstance(member, classmethod):
        return "class", member.__func__
    if inspect.isfunction(member):
        return "instance", member
    return None


def _candidate_names(level: type, name: str, ignore_case: bool) -> list[str]:
    wanted = {name}
    if name.startswith("__") and not name.endswith("__"):
        wanted.add(f"_{level.__name__.lstrip('_')}{name}")

    if not ignore_case:
        return [n for n in wanted if n in vars(level)]

    folded = {n.casefold() for n in wanted}
    return [n for n in vars(level) if n.casefold() in folded]


def _is_eligible(attr_name: str, kind: str, flags: BindingFlags) -> bool:
    if kind == "instance":
        if not flags & BindingFlags.INSTANCE:
            return False
    elif not flags & BindingFlags.STATIC:
        return False

    if attr_name.startswith("_"):
        return bool(flags & BindingFlags.NON_PUBLIC)
    return bool(flags & BindingFlags.PUBLIC)


def _match_level(level: type, name: str, flags: BindingFlags) -> MethodInfo | None:
    """Look up name in one class's own namespace."""
    matches: list[MethodInfo] = []
    ignore_case = bool(flags & BindingFlags.IGNORE_CASE)
    for attr_name in _candidate_names(level, name, ignore_case):
        described = _describe(vars(level)[attr_name])
        if described is None:
            continue
        kind, function = described
        if _is_eligible(attr_name, kind, flags):
            matches.append(MethodInfo(attr_name, level, function, kind))

    if len(matches) > 1:
        raise AmbiguousMatchError(level, name, sorted(m.name for m in matches))
    if not matches:
        return None

    match = matches[0]
    overloads = typing.get_overloads(match.function)
    if len(overloads) > 1:
        raise AmbiguousMatchError(
            level,
            name,
            [f"{match.name}{inspect.signature(o)}" for o in overloads],
        )
    return match


def find_method(
    cls: type, name: str, flags: BindingFlags = BindingFlags.DEFAULT
) -> MethodInfo | None:
    """Find a method by name on cls or the nearest ancestor declaring it.

    Args:
        cls: Class to start the search from.
        name: Method name to look for.
        flags: Binding criteria the method must satisfy.

    Returns:
        The first matching method along cls.__mro__, or None.

    Raises:
        ArgumentNoneError: If cls or name is None.
        EmptyArgumentError: If name is an empty string.
        InvalidArgumentError: If cls is not a class.
        AmbiguousMatchError: If one class declares more than one eligible
            method for name (case-insensitive collisions, or a method
            with several typing.overload signatures).
    """
    ensure_not_none(cls, "cls")
    ensure_not_empty(name, "name")
    if not isinstance(cls, type):
        raise InvalidArgumentError(
            f"expected a class, got {type(cls).__name__}", "cls"
        )

    for level in cls.__mro__:
        match = _match_level(level, name, flags)
        if match is not None:
            logger.debug(
                "Found %s.%s (%s)",
                level.__qualname__,
                match.name,
                match.kind,
                extra={"owner": level.__qualname__, "method": match.name},
            )
            return match

    logger.debug(
        "Method %r not found on %s or its ancestors",
        name,
        cls.__qualname__,
        extra={"owner": cls.__qualname__, "method": name},
    )
    return None


def try_find_method(
    cls: type, name: str, flags: BindingFlags = BindingFlags.DEFAULT
) -> tuple[bool, MethodInfo | None]:
    """Like find_method(), but return a (found, method) pair."""
    method = find_method(cls, name, flags)
    return method is not None, method
