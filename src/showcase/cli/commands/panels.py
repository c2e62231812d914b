# topmark:header:start
#
#   project      : Showcase
#   file         : panels.py
#   file_relpath : src/showcase/cli/commands/panels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase `panels` command.

Lists the panels of a content document in declaration order, marking the
default panel. With ``--name`` or ``--default`` it prints a single panel's
body instead, which is handy when previewing one tab.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from showcase.cli.cli_types import OutputFormat
from showcase.cli.cmd_common import (
    emit_json,
    emit_object,
    get_console_and_format,
    get_effective_verbosity,
    load_registry_or_exit,
)
from showcase.cli.errors import ShowcaseError, ShowcaseUsageError
from showcase.cli.markdown import escape_cell, render_markdown_table
from showcase.cli.options import common_content_options, output_format_option
from showcase.content.errors import EmptyCollectionError

if TYPE_CHECKING:
    from showcase.cli.console import ConsoleLike
    from showcase.content.model import Panel


def _panel_dict(panel: Panel, *, is_default: bool) -> dict[str, Any]:
    return {
        "name": panel.name,
        "checked": panel.checked,
        "default": is_default,
        "content": panel.content,
    }


def _print_single(console: ConsoleLike, panel: Panel, fmt: OutputFormat, *, is_default: bool) -> None:
    if fmt.is_machine:
        emit_object(console, _panel_dict(panel, is_default=is_default), fmt)
    elif fmt == OutputFormat.MARKDOWN:
        console.print(f"## {panel.name}\n")
        console.print(panel.content)
    else:
        console.print(panel.content)


@click.command(
    name="panels",
    help="List the panels of a content document.",
)
@common_content_options
@click.option("--name", "panel_name", default=None, help="Print the body of the named panel.")
@click.option(
    "--default",
    "show_default",
    is_flag=True,
    help="Print the body of the panel shown first (the checked one, else the first).",
)
@output_format_option
def panels_command(
    *,
    document: str,
    strict: bool,
    palette: tuple[str, ...],
    use_default_palette: bool,
    panel_name: str | None = None,
    show_default: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List panels, or print one panel's body.

    Args:
        document (str): Path of the TOML document.
        strict (bool): Treat warnings as failures.
        palette (tuple[str, ...]): Allowed step colors given with ``--palette``.
        use_default_palette (bool): Whether to allow the built-in palette.
        panel_name (str | None): Name of a single panel to print.
        show_default (bool): Print the default panel.
        output_format (OutputFormat | None): Output format; ``default`` if None.
    """
    if panel_name is not None and show_default:
        raise ShowcaseUsageError("The '--name' and '--default' options are mutually exclusive.")

    ctx, console, fmt = get_console_and_format(output_format)
    vlevel = get_effective_verbosity(ctx)
    registry = load_registry_or_exit(
        document, strict=strict, palette=palette, use_default_palette=use_default_palette
    )

    default: Panel | None
    try:
        default = registry.default_panel()
    except EmptyCollectionError as exc:
        if show_default:
            raise ShowcaseError(f"{registry.source}: {exc}") from exc
        default = None
    default_name: str | None = default.name if default is not None else None

    if show_default and default is not None:
        _print_single(console, default, fmt, is_default=True)
        return

    if panel_name is not None:
        try:
            panel = registry.panel(panel_name)
        except KeyError as exc:
            raise ShowcaseError(f"{registry.source}: no panel named '{panel_name}'") from exc
        _print_single(console, panel, fmt, is_default=panel.name == default_name)
        return

    panels = registry.panels()
    if fmt == OutputFormat.JSON:
        emit_json(console, [_panel_dict(p, is_default=p.name == default_name) for p in panels])
        return
    if fmt == OutputFormat.NDJSON:
        emit_json(
            console, [_panel_dict(p, is_default=p.name == default_name) for p in panels], ndjson=True
        )
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print(f"# Panels in `{registry.source}`\n")
        rows = [
            [
                escape_cell(p.name),
                "**yes**" if p.name == default_name else "",
                str(len(p.content.splitlines())),
            ]
            for p in panels
        ]
        console.print(render_markdown_table(["Panel", "Default", "Lines"], rows, align={2: "right"}))
        return

    if not panels and vlevel >= 0:
        console.print(console.styled("No panels defined.", fg="blue"))
    for p in panels:
        marker = "*" if p.name == default_name else " "
        console.print(f"{marker} {console.styled(p.name, bold=True)}")
        if vlevel > 0:
            first_line = p.content.strip().splitlines()[0]
            console.print(f"    {first_line}")
