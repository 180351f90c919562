"""CLI line-endings commands: detect and normalize terminator styles."""

import json
import logging
import sys
from pathlib import Path

import click

from common_extensions.cli.exit_codes import ExitCode
from common_extensions.config.models import ExtensionsConfig
from common_extensions.core.errors import (
    InvalidArgumentError,
    UnsupportedLineEndingStyleError,
)
from common_extensions.core.line_endings import (
    LineEndingStyle,
    classify_line_endings,
    normalize_line_endings,
)
from common_extensions.logging.context import operation_context

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    # newline="" keeps \r and \r\n exactly as stored
    with path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


@click.group("line-endings")
def line_endings_group() -> None:
    """Detect and normalize line endings in text files."""
    pass


@line_endings_group.command("detect")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON.")
def detect_command(files: tuple[Path, ...], json_output: bool) -> None:
    """Report the line ending style of each FILE.

    Styles are none, unix, windows, mac, or mixed when a file uses more
    than one convention.
    """
    results: dict[str, str] = {}
    for path in files:
        if not path.exists():
            click.echo(f"Error: File not found: {path}", err=True)
            sys.exit(ExitCode.TARGET_NOT_FOUND)
        with operation_context("detect", path):
            try:
                style = classify_line_endings(_read_text(path))
            except (OSError, UnicodeDecodeError) as e:
                click.echo(f"Error: Could not read {path}: {e}", err=True)
                sys.exit(ExitCode.OPERATION_FAILED)
            logger.debug("Classified as %s", style.value, extra={"style": style.value})
        results[str(path)] = style.value

    if json_output:
        click.echo(json.dumps(results, indent=2))
    else:
        for name, style_value in results.items():
            click.echo(f"{name}: {style_value}")


@line_endings_group.command("normalize")
@click.argument("file", type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--style",
    "-s",
    type=click.Choice([s.value for s in LineEndingStyle], case_sensitive=False),
    default=None,
    help="Target style (default: line_endings.default_style from config).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write the result to this file instead of stdout.",
)
@click.option(
    "--in-place",
    "-i",
    is_flag=True,
    help="Rewrite FILE in place.",
)
@click.pass_context
def normalize_command(
    ctx: click.Context,
    file: Path,
    style: str | None,
    output: Path | None,
    in_place: bool,
) -> None:
    """Rewrite every line terminator in FILE to a single style."""
    config: ExtensionsConfig = ctx.obj["config"]

    if output is not None and in_place:
        click.echo("Error: --output and --in-place are mutually exclusive", err=True)
        sys.exit(ExitCode.INVALID_ARGUMENT)

    if not file.exists():
        click.echo(f"Error: File not found: {file}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    target = style or config.line_endings.default_style
    destination = file if in_place else output

    with operation_context("normalize", file):
        try:
            text = _read_text(file)
            before = classify_line_endings(text)
            result = normalize_line_endings(
                text,
                target,
                legacy_mixed=config.line_endings.legacy_mixed_target,
            )
        except (InvalidArgumentError, UnsupportedLineEndingStyleError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(ExitCode.INVALID_ARGUMENT)
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"Error: Could not read {file}: {e}", err=True)
            sys.exit(ExitCode.OPERATION_FAILED)

        if destination is None:
            # Text-mode stdout would translate \n on some platforms
            stdout = click.get_binary_stream("stdout")
            stdout.write(result.encode("utf-8"))
            stdout.flush()
            return

        try:
            _write_text(destination, result)
        except OSError as e:
            click.echo(f"Error: Could not write {destination}: {e}", err=True)
            sys.exit(ExitCode.OPERATION_FAILED)

        after = LineEndingStyle(target).value
        logger.info(
            "Normalized %s to %s",
            before.value,
            destination,
            extra={"style": after},
        )
    click.echo(f"{destination}: {before.value} -> {after}")
