# topmark:header:start
#
#   project      : Showcase
#   file         : cmd_common.py
#   file_relpath : src/showcase/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
reading shared state from the Click context, loading a document with the
library errors mapped onto CLI exceptions, and printing diagnostics.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from showcase.api import load_path
from showcase.cli.cli_types import OutputFormat
from showcase.cli.console import ClickConsole, get_console
from showcase.cli.errors import (
    ShowcaseFileNotFoundError,
    ShowcaseIOError,
    ShowcaseParseError,
    ShowcasePermissionDeniedError,
    ShowcaseValidationError,
)
from showcase.cli.options import resolve_palette
from showcase.config.logging import get_logger
from showcase.content.errors import ParseError, ValidationError
from showcase.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from showcase.cli.console import ConsoleLike
    from showcase.config.logging import ShowcaseLogger
    from showcase.content.registry import ContentRegistry
    from showcase.diagnostic.model import Diagnostic

logger: ShowcaseLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the root group (0 if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_console_and_format(
    output_format: OutputFormat | None,
) -> tuple[click.Context, ConsoleLike, OutputFormat]:
    """Return the current context, its console and the effective output format.

    Machine formats switch the console's color off so JSON never carries ANSI codes.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    console: ConsoleLike = get_console(ctx)
    if fmt.is_machine and isinstance(console, ClickConsole):
        console.enable_color = False
    return ctx, console, fmt


def load_registry_or_exit(
    document: str,
    *,
    strict: bool,
    palette: tuple[str, ...],
    use_default_palette: bool,
) -> ContentRegistry:
    """Load ``document`` and translate failures into CLI exceptions.

    Exit code mapping:
        FILE_NOT_FOUND → FileNotFoundError / IsADirectoryError
        PERMISSION_DENIED → PermissionError
        IO_ERROR → any other OSError
        PARSE_ERROR → ParseError
        VALIDATION_ERROR → ValidationError

    Args:
        document: Path of the TOML document.
        strict: Whether warnings fail the load.
        palette: Colors given with ``--palette``.
        use_default_palette: Whether ``--default-palette`` was given.

    Returns:
        The loaded registry.
    """
    allowed = resolve_palette(palette, use_default_palette)
    try:
        return load_path(document, strict=strict, palette=allowed)
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise ShowcaseFileNotFoundError(f"{document}: no such file") from exc
    except PermissionError as exc:
        raise ShowcasePermissionDeniedError(f"{document}: permission denied") from exc
    except OSError as exc:
        raise ShowcaseIOError(f"{document}: {exc.strerror or exc}") from exc
    except ParseError as exc:
        raise ShowcaseParseError(str(exc)) from exc
    except ValidationError as exc:
        lines = [f"{exc.source}: invalid content"]
        lines.extend(f"  {m}" for m in exc.messages)
        raise ShowcaseValidationError("\n".join(lines)) from exc


def print_diagnostics(console: ConsoleLike, diagnostics: Iterable[Diagnostic]) -> None:
    """Print each diagnostic on stderr, colored by level."""
    for diag in diagnostics:
        if diag.level is DiagnosticLevel.ERROR:
            console.error(f"{diag.level.value}: {diag}")
        else:
            console.warn(f"{diag.level.value}: {diag}")


def emit_json(console: ConsoleLike, payload: Any, *, ndjson: bool = False) -> None:
    """Print ``payload`` as one indented JSON document, or one object per line.

    With ``ndjson`` the payload must be iterable; each item is printed on its
    own line.
    """
    if ndjson:
        for item in payload:
            console.print(json.dumps(item, ensure_ascii=False))
    else:
        console.print(json.dumps(payload, indent=2, ensure_ascii=False))


def emit_object(console: ConsoleLike, obj: dict[str, Any], fmt: OutputFormat) -> None:
    """Print a single object in a machine format (compact on one line for NDJSON)."""
    if fmt == OutputFormat.NDJSON:
        emit_json(console, [obj], ndjson=True)
    else:
        emit_json(console, obj)
