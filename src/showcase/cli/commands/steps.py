# topmark:header:start
#
#   project      : Showcase
#   file         : steps.py
#   file_relpath : src/showcase/cli/commands/steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase `steps` command.

Lists the pipeline steps of a content document in declaration order, with
their color tags. With ``--name`` it prints a single step's body.
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
from showcase.cli.errors import ShowcaseError
from showcase.cli.markdown import escape_cell, render_markdown_table
from showcase.cli.options import common_content_options, output_format_option

if TYPE_CHECKING:
    from showcase.content.model import Step


def _step_dict(step: Step, position: int) -> dict[str, Any]:
    return {
        "position": position,
        "name": step.name,
        "color": step.color,
        "content": step.content,
    }


@click.command(
    name="steps",
    help="List the pipeline steps of a content document.",
)
@common_content_options
@click.option("--name", "step_name", default=None, help="Print the body of the named step.")
@output_format_option
def steps_command(
    *,
    document: str,
    strict: bool,
    palette: tuple[str, ...],
    use_default_palette: bool,
    step_name: str | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """List steps, or print one step's body.

    Args:
        document (str): Path of the TOML document.
        strict (bool): Treat warnings as failures.
        palette (tuple[str, ...]): Allowed step colors given with ``--palette``.
        use_default_palette (bool): Whether to allow the built-in palette.
        step_name (str | None): Name of a single step to print.
        output_format (OutputFormat | None): Output format; ``default`` if None.
    """
    ctx, console, fmt = get_console_and_format(output_format)
    vlevel = get_effective_verbosity(ctx)
    registry = load_registry_or_exit(
        document, strict=strict, palette=palette, use_default_palette=use_default_palette
    )
    steps = registry.steps()

    if step_name is not None:
        try:
            step = registry.step(step_name)
        except KeyError as exc:
            raise ShowcaseError(f"{registry.source}: no step named '{step_name}'") from exc
        if fmt.is_machine:
            emit_object(console, _step_dict(step, steps.index(step) + 1), fmt)
        elif fmt == OutputFormat.MARKDOWN:
            console.print(f"## {step.name}\n")
            console.print(step.content)
        else:
            console.print(step.content)
        return

    if fmt == OutputFormat.JSON:
        emit_json(console, [_step_dict(s, i) for i, s in enumerate(steps, start=1)])
        return
    if fmt == OutputFormat.NDJSON:
        emit_json(console, [_step_dict(s, i) for i, s in enumerate(steps, start=1)], ndjson=True)
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print(f"# Steps in `{registry.source}`\n")
        rows = [
            [str(i), escape_cell(s.name), f"`{s.color}`" if s.color else ""]
            for i, s in enumerate(steps, start=1)
        ]
        console.print(render_markdown_table(["#", "Step", "Color"], rows, align={0: "right"}))
        return

    if not steps and vlevel >= 0:
        console.print(console.styled("No steps defined.", fg="blue"))
    for i, s in enumerate(steps, start=1):
        label = f"{i}. {console.styled(s.name, bold=True)}"
        if s.color:
            label += f" [{s.color}]"
        console.print(label)
        if vlevel > 0:
            console.print(f"    {s.content.strip().splitlines()[0]}")
