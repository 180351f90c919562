"""CLI module for common-extensions."""

import logging
from pathlib import Path

import click

from common_extensions.cli.exit_codes import ExitCode
from common_extensions.config import get_config
from common_extensions.logging import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="common-extensions")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to config file (default: ~/.common-ext/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """common-ext - Line ending, rendering and reflection helpers."""
    ctx.ensure_object(dict)

    try:
        config = get_config(config_path=config_path)
        configure_logging(
            config.logging.with_overrides(
                level=log_level.lower() if log_level else None,
                file=log_file,
                format="json" if log_json else None,
            )
        )
    except ValueError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)

    logger.debug("Loaded configuration: %s", config)
    ctx.obj["config"] = config


# Defer import to avoid circular dependency
def _register_commands():
    from common_extensions.cli.find_method import find_method_command
    from common_extensions.cli.join import join_command
    from common_extensions.cli.line_endings import line_endings_group

    main.add_command(line_endings_group)
    main.add_command(join_command)
    main.add_command(find_method_command)


_register_commands()
