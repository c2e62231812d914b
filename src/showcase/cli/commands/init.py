# topmark:header:start
#
#   project      : Showcase
#   file         : init.py
#   file_relpath : src/showcase/cli/commands/init.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase `init` command.

Prints the bundled starter document (three panels and a three-step pipeline)
to stdout, or writes it to a file with ``--output``. Intended as a starting
point for a project's own content.
"""

from __future__ import annotations

from pathlib import Path

import click

from showcase.cli.cmd_common import get_console_and_format, get_effective_verbosity
from showcase.cli.errors import ShowcaseIOError, ShowcasePermissionDeniedError, ShowcaseUsageError
from showcase.config.logging import get_logger
from showcase.content.loaders import load_starter_text

logger = get_logger(__name__)


@click.command(
    name="init",
    help="Display (or write) a starter content document.",
)
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the starter document to this file instead of stdout.",
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite the --output file if it already exists.",
)
def init_command(*, output: Path | None = None, force: bool = False) -> None:
    """Print or write the starter content document.

    Args:
        output (Path | None): Destination file; stdout when None.
        force (bool): Overwrite an existing destination.
    """
    ctx, console, _fmt = get_console_and_format(None)
    vlevel = get_effective_verbosity(ctx)
    text: str = load_starter_text()

    if output is None:
        if vlevel > 0:
            console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))
        console.print(text, nl=False)
        if vlevel > 0:
            console.print(console.styled("# === END ===", fg="cyan", dim=True))
        return

    if output.exists() and not force:
        raise ShowcaseUsageError(f"{output}: file exists (use --force to overwrite)")
    try:
        output.write_text(text, encoding="utf-8")
    except PermissionError as exc:
        raise ShowcasePermissionDeniedError(f"{output}: permission denied") from exc
    except OSError as exc:
        raise ShowcaseIOError(f"{output}: {exc.strerror or exc}") from exc
    logger.info("Wrote starter document to %s", output)
    if vlevel >= 0:
        console.print(console.styled(f"✅ Wrote {output}", fg="green"))
