# topmark:header:start
#
#   project      : Showcase
#   file         : check.py
#   file_relpath : src/showcase/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase `check` command.

Loads a content document and reports whether it is valid. Problems that stop
the load (malformed TOML, schema violations, unreadable files) end the command
with the matching exit code; non-fatal findings are listed as warnings.

Output formats:
  * default: a one-line summary, plus warnings on stderr;
  * json: one summary object including every diagnostic;
  * ndjson: one line per diagnostic followed by a summary line;
  * markdown: a summary table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from showcase.cli.cli_types import OutputFormat
from showcase.cli.cmd_common import (
    emit_json,
    get_console_and_format,
    get_effective_verbosity,
    load_registry_or_exit,
    print_diagnostics,
)
from showcase.cli.markdown import render_markdown_table
from showcase.cli.options import common_content_options, output_format_option
from showcase.config.logging import get_logger

if TYPE_CHECKING:
    from showcase.config.logging import ShowcaseLogger
    from showcase.content.registry import ContentRegistry

logger: ShowcaseLogger = get_logger(__name__)


def _summary(registry: ContentRegistry) -> dict[str, Any]:
    default_panel: str | None = (
        registry.default_panel().name if registry.panel_entries else None
    )
    return {
        "source": registry.source,
        "ok": True,
        "panels": len(registry.panel_entries),
        "steps": len(registry.step_entries),
        "default_panel": default_panel,
        "diagnostics": registry.diagnostics.to_dict(),
    }


@click.command(
    name="check",
    help="Validate a content document.",
    epilog="""
Exit codes: 0 valid, 65 malformed TOML, 66 missing file, 74 read error,
77 permission denied, 78 invalid content.
""",
)
@common_content_options
@output_format_option
def check_command(
    *,
    document: str,
    strict: bool,
    palette: tuple[str, ...],
    use_default_palette: bool,
    output_format: OutputFormat | None = None,
) -> None:
    """Validate a content document.

    Args:
        document (str): Path of the TOML document to check.
        strict (bool): Treat warnings as failures.
        palette (tuple[str, ...]): Allowed step colors given with ``--palette``.
        use_default_palette (bool): Whether to allow the built-in palette.
        output_format (OutputFormat | None): Output format; ``default`` if None.
    """
    ctx, console, fmt = get_console_and_format(output_format)
    vlevel = get_effective_verbosity(ctx)

    registry = load_registry_or_exit(
        document, strict=strict, palette=palette, use_default_palette=use_default_palette
    )
    logger.debug("check: %s loaded with %d diagnostic(s)", document, len(registry.diagnostics))
    summary = _summary(registry)

    if fmt == OutputFormat.JSON:
        summary["messages"] = [d.to_dict() for d in registry.diagnostics]
        emit_json(console, summary)
        return

    if fmt == OutputFormat.NDJSON:
        lines: list[dict[str, Any]] = [
            {"kind": "diagnostic", **d.to_dict()} for d in registry.diagnostics
        ]
        lines.append({"kind": "summary", **summary})
        emit_json(console, lines, ndjson=True)
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print(f"# Content check: `{registry.source}`\n")
        counts = registry.diagnostics.to_dict()
        rows = [
            ["Panels", str(summary["panels"])],
            ["Steps", str(summary["steps"])],
            ["Default panel", summary["default_panel"] or ""],
            ["Warnings", str(counts["warning"])],
        ]
        console.print(render_markdown_table(["Item", "Value"], rows, align={1: "right"}))
        return

    print_diagnostics(console, registry.diagnostics)
    if vlevel >= 0:
        console.print(
            console.styled(
                f"✅ {registry.source}: {summary['panels']} panel(s), {summary['steps']} step(s)",
                fg="green",
            )
        )
    if vlevel > 0 and summary["default_panel"] is not None:
        console.print(f"   default panel: {summary['default_panel']}")
