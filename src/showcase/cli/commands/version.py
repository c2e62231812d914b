# topmark:header:start
#
#   project      : Showcase
#   file         : version.py
#   file_relpath : src/showcase/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase `version` command.

Prints the current Showcase version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from showcase.cli.cli_types import OutputFormat
from showcase.cli.cmd_common import emit_object, get_console_and_format, get_effective_verbosity
from showcase.cli.options import output_format_option
from showcase.constants import SHOWCASE_VERSION


@click.command(
    name="version",
    help="Show the current version of Showcase.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Showcase.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx, console, fmt = get_console_and_format(output_format)
    vlevel = get_effective_verbosity(ctx)

    if fmt.is_machine:
        emit_object(console, {"version": SHOWCASE_VERSION}, fmt)
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Showcase Version\n")
        console.print(f"**Showcase version: {SHOWCASE_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("Showcase version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SHOWCASE_VERSION, bold=True)}")
    else:
        console.print(console.styled(SHOWCASE_VERSION, bold=True))
