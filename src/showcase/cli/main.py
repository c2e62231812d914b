# topmark:header:start
#
#   project      : Showcase
#   file         : main.py
#   file_relpath : src/showcase/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Root Click group for the Showcase CLI.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Internal logging is configured from the ``SHOWCASE_LOG_LEVEL`` environment variable,
  independently from program-output verbosity.
- Subcommands read shared state through `showcase.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from showcase.cli.commands.check import check_command
from showcase.cli.commands.dump import dump_command
from showcase.cli.commands.init import init_command
from showcase.cli.commands.panels import panels_command
from showcase.cli.commands.steps import steps_command
from showcase.cli.commands.version import version_command
from showcase.cli.console import ClickConsole
from showcase.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from showcase.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from showcase.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug(
        "CLI state: verbosity=%d log_level=%s color=%s",
        ctx.obj["verbosity_level"],
        level_env,
        enable_color,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Showcase CLI: check and inspect panel/step content documents.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Showcase CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'showcase check DOCUMENT' to validate a content file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(init_command)

cli.add_command(check_command)

cli.add_command(panels_command)

cli.add_command(steps_command)

cli.add_command(dump_command)

if __name__ == "__main__":
    cli()
