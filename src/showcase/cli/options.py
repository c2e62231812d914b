# topmark:header:start
#
#   project      : Showcase
#   file         : options.py
#   file_relpath : src/showcase/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Showcase CLI.

This module centralizes reusable options (verbosity, color, output format,
content loading) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import ParamSpec, TypeVar

import click

from showcase.cli.cli_types import EnumChoiceParam, OutputFormat
from showcase.cli.errors import ShowcaseUsageError
from showcase.constants import DEFAULT_PALETTE

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, ``1`` or ``2`` when verbose.

    Raises:
        ShowcaseUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ShowcaseUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (mutually exclusive counts).

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report problems.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags, then FORCE_COLOR and NO_COLOR
        environment variables, and finally enables color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` with the values of `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def common_content_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the document argument and the options that control loading.

    Adds the ``DOCUMENT`` argument plus ``--strict/--no-strict``, ``--palette``
    and ``--default-palette``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--default-palette",
        "use_default_palette",
        is_flag=True,
        help=f"Restrict step colors to the built-in palette ({', '.join(DEFAULT_PALETTE)}).",
    )(f)
    f = click.option(
        "--palette",
        "palette",
        multiple=True,
        metavar="COLOR",
        help="Allowed step color (repeatable). Without it, any color is accepted.",
    )(f)
    f = click.option(
        "--strict/--no-strict",
        "strict",
        default=False,
        show_default=True,
        help="Fail on warnings (unknown keys) in addition to errors.",
    )(f)
    f = click.argument(
        "document",
        type=click.Path(dir_okay=False, path_type=str),
    )(f)
    return f


def resolve_palette(palette: tuple[str, ...], use_default_palette: bool) -> tuple[str, ...] | None:
    """Combine ``--palette`` values and ``--default-palette`` into one palette.

    Returns:
        The allowed colors, or None when no restriction was requested.
    """
    colors: list[str] = list(palette)
    if use_default_palette:
        colors.extend(c for c in DEFAULT_PALETTE if c not in colors)
    return tuple(colors) if colors else None
