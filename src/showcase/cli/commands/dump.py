# topmark:header:start
#
#   project      : Showcase
#   file         : dump.py
#   file_relpath : src/showcase/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase `dump` command.

Loads a content document and writes it back as normalized TOML: unknown keys
are dropped, ``checked = false`` is omitted, and bodies use multi-line
literal strings where possible. The output loads back into an equal registry.
"""

from __future__ import annotations

import click

from showcase.cli.cmd_common import (
    get_console_and_format,
    get_effective_verbosity,
    load_registry_or_exit,
)
from showcase.cli.options import common_content_options
from showcase.content.render import to_toml


@click.command(
    name="dump",
    help="Print a content document as normalized TOML.",
    epilog="With -v the output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@common_content_options
def dump_command(
    *,
    document: str,
    strict: bool,
    palette: tuple[str, ...],
    use_default_palette: bool,
) -> None:
    """Print the normalized TOML form of a document.

    Args:
        document (str): Path of the TOML document.
        strict (bool): Treat warnings as failures.
        palette (tuple[str, ...]): Allowed step colors given with ``--palette``.
        use_default_palette (bool): Whether to allow the built-in palette.
    """
    ctx, console, _fmt = get_console_and_format(None)
    vlevel = get_effective_verbosity(ctx)
    registry = load_registry_or_exit(
        document, strict=strict, palette=palette, use_default_palette=use_default_palette
    )

    if vlevel > 0:
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))
    console.print(to_toml(registry), nl=False)
    if vlevel > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
