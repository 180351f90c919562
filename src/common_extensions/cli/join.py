"""CLI join command: render lines as a single separated string."""

import logging
import sys

import click

from common_extensions.cli.exit_codes import ExitCode
from common_extensions.config.models import ExtensionsConfig
from common_extensions.core.enumerable_utils import NullItemPolicy, join
from common_extensions.core.errors import InvalidOperationError
from common_extensions.logging.context import operation_context

logger = logging.getLogger(__name__)


def _read_items(stream) -> list[str | None]:
    """Read one item per line. Blank lines stand for missing items."""
    items: list[str | None] = []
    for line in stream:
        text = line.rstrip("\r\n")
        items.append(text if text else None)
    return items


@click.command("join")
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--separator",
    "-s",
    default=None,
    help="Separator placed between items (default: rendering.separator).",
)
@click.option(
    "--nulls",
    type=click.Choice([p.value for p in NullItemPolicy], case_sensitive=False),
    default=None,
    help="How blank lines are handled (default: rendering.null_policy).",
)
@click.pass_context
def join_command(
    ctx: click.Context,
    file,
    separator: str | None,
    nulls: str | None,
) -> None:
    """Join the lines of FILE (or stdin) with a separator.

    Blank lines are treated as missing items: "remove" drops them,
    "include" keeps them as empty fields and "raise" fails the command.

    Examples:

        printf 'a\\nb\\n\\nc\\n' | common-ext join -s ';'

        common-ext join --nulls include items.txt
    """
    config: ExtensionsConfig = ctx.obj["config"]
    sep = separator if separator is not None else config.rendering.separator
    policy = NullItemPolicy(nulls.lower()) if nulls else config.rendering.null_policy

    with operation_context("join", file.name):
        items = _read_items(file)
        logger.debug(
            "Joining %d items",
            len(items),
            extra={"count": len(items), "policy": policy.value},
        )

        try:
            result = join(items, sep, policy)
        except InvalidOperationError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(ExitCode.OPERATION_FAILED)

    click.echo(result)
