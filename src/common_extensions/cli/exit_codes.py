"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (arguments, config)
    20-29: Target/file errors
    40-49: Operation errors
    50-59: Lookup errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for common-ext CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1

    # Validation errors (10-19)
    INVALID_ARGUMENT = 10
    CONFIG_ERROR = 11

    # Target/file errors (20-29)
    TARGET_NOT_FOUND = 20

    # Operation errors (40-49)
    OPERATION_FAILED = 40

    # Lookup errors (50-59)
    NOT_FOUND = 50
    AMBIGUOUS = 51
