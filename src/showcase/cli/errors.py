# topmark:header:start
#
#   project      : Showcase
#   file         : errors.py
#   file_relpath : src/showcase/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Showcase CLI.

Usage:
    Commands translate library errors (`ContentError`, `OSError`) into these
    Click exceptions so the process exits with the matching `ExitCode`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from showcase.cli.exit_codes import ExitCode


class ShowcaseError(click.ClickException):
    """Base class for all Showcase CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ShowcaseUsageError(ShowcaseError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ShowcaseParseError(ShowcaseError):
    """Error for documents that are not well-formed TOML."""

    exit_code = ExitCode.PARSE_ERROR


class ShowcaseValidationError(ShowcaseError):
    """Error for documents that violate the content schema."""

    exit_code = ExitCode.VALIDATION_ERROR


class ShowcaseFileNotFoundError(ShowcaseError):
    """Error when the document path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ShowcasePermissionDeniedError(ShowcaseError):
    """Error for insufficient permissions to read the document."""

    exit_code = ExitCode.PERMISSION_DENIED


class ShowcaseIOError(ShowcaseError):
    """Error for other I/O failures while reading the document."""

    exit_code = ExitCode.IO_ERROR
