"""CLI find-method command: locate a method along a class's MRO."""

import functools
import importlib
import json
import logging
import operator
import sys

import click

from common_extensions.cli.exit_codes import ExitCode
from common_extensions.core.errors import AmbiguousMatchError, InvalidArgumentError
from common_extensions.core.reflection_utils import BindingFlags, find_method
from common_extensions.logging.context import operation_context

logger = logging.getLogger(__name__)

_FLAG_CHOICES = [f.name.lower().replace("_", "-") for f in BindingFlags if f.name]


def _parse_flags(names: tuple[str, ...]) -> BindingFlags:
    if not names:
        return BindingFlags.DEFAULT
    members = [BindingFlags[n.upper().replace("-", "_")] for n in names]
    return functools.reduce(operator.or_, members, BindingFlags.NONE)


def _resolve_class(target: str) -> type:
    """Import "package.module:Class" (nested classes use dots)."""
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"expected MODULE:CLASS, got {target!r}")

    obj = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise ValueError(f"{target} is not a class")
    return obj


@click.command("find-method")
@click.argument("target")
@click.argument("name")
@click.option(
    "--flag",
    "-f",
    "flag_names",
    multiple=True,
    type=click.Choice(_FLAG_CHOICES, case_sensitive=False),
    help="Binding flag to apply (repeatable, default: instance, static, public).",
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON.")
def find_method_command(
    target: str,
    name: str,
    flag_names: tuple[str, ...],
    json_output: bool,
) -> None:
    """Find method NAME on the class TARGET or its nearest ancestor.

    TARGET is given as MODULE:CLASS, for example "logging:StreamHandler".
    Only methods defined in Python are found, not those of built-in types.

    Examples:

        common-ext find-method logging:StreamHandler flush

        common-ext find-method mypkg.models:User _validate -f instance -f non-public
    """
    try:
        cls = _resolve_class(target)
    except (ImportError, AttributeError, ValueError) as e:
        click.echo(f"Error: Cannot resolve {target}: {e}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    flags = _parse_flags(flag_names)

    with operation_context("find-method", target):
        logger.debug(
            "Looking up with %s",
            flags,
            extra={"owner": cls.__qualname__, "method": name},
        )
        try:
            method = find_method(cls, name, flags)
        except AmbiguousMatchError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(ExitCode.AMBIGUOUS)
        except InvalidArgumentError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(ExitCode.INVALID_ARGUMENT)

    if method is None:
        click.echo(f"Error: No method {name!r} found on {target}", err=True)
        sys.exit(ExitCode.NOT_FOUND)

    if json_output:
        data = {
            "owner": f"{method.owner.__module__}.{method.owner.__qualname__}",
            "name": method.name,
            "kind": method.kind,
        }
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(f"{method.owner.__qualname__}.{method.name} ({method.kind})")
