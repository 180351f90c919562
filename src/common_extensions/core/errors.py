"""Exceptions raised by the extension helpers.

Every error derives from ExtensionsError and also from the closest builtin,
so callers may catch either the library type or the builtin it refines.
"""


class ExtensionsError(Exception):
    """Base exception for all extension helper errors."""

    def __init__(self, message: str) -> None:
        """Initialize extensions error.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class InvalidArgumentError(ExtensionsError, ValueError):
    """Raised when a required argument is missing or unusable.

    Argument errors are always raised before any mutation of a caller's
    container begins.
    """

    def __init__(self, message: str, param_name: str | None = None) -> None:
        """Initialize invalid argument error.

        Args:
            message: Human-readable error description.
            param_name: Name of the offending parameter.
        """
        self.param_name = param_name
        if param_name:
            message = f"{message} (parameter '{param_name}')"
        super().__init__(message)


class ArgumentNoneError(InvalidArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, param_name: str, message: str | None = None) -> None:
        """Initialize argument none error.

        Args:
            param_name: Name of the parameter that was None.
            message: Optional override for the default message.
        """
        super().__init__(message or f"{param_name} cannot be None", param_name)


class EmptyArgumentError(InvalidArgumentError):
    """Raised when a string argument is empty but must not be."""

    def __init__(self, param_name: str, message: str | None = None) -> None:
        """Initialize empty argument error.

        Args:
            param_name: Name of the parameter that was empty.
            message: Optional override for the default message.
        """
        super().__init__(message or f"{param_name} cannot be empty", param_name)


class InvalidOperationError(ExtensionsError, RuntimeError):
    """Raised when the data being processed violates the requested policy.

    For example, a None element found while rendering with
    NullItemPolicy.RAISE.
    """

    pass


class AmbiguousMatchError(ExtensionsError, LookupError):
    """Raised when a method lookup finds more than one match on one class."""

    def __init__(self, owner: type, name: str, candidates: list[str]) -> None:
        """Initialize ambiguous match error.

        Args:
            owner: Class on which the competing methods were found.
            name: Method name that was searched for.
            candidates: Descriptions of the competing matches.
        """
        self.owner = owner
        self.name = name
        self.candidates = candidates
        message = (
            f"Ambiguous match for '{name}' on {owner.__qualname__}: "
            f"{', '.join(candidates)}"
        )
        super().__init__(message)


class UnsupportedLineEndingStyleError(ExtensionsError, NotImplementedError):
    """Raised when a line ending style value is not recognized."""

    def __init__(self, style: object) -> None:
        """Initialize unsupported line ending style error.

        Args:
            style: The unrecognized style value.
        """
        self.style = style
        super().__init__(f"Unknown line ending style: {style!r}")
