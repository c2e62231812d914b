# topmark:header:start
#
#   project      : Showcase
#   file         : markdown.py
#   file_relpath : src/showcase/cli/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown utilities for Showcase."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def escape_cell(text: str) -> str:
    """Make ``text`` safe for a single Markdown table cell.

    Pipes are escaped and line breaks collapse to ``<br>``.
    """
    return text.replace("|", "\\|").replace("\r\n", "\n").replace("\n", "<br>")


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: A sequence of row sequences (each row same length as ``headers``).
        align: Optional mapping of column index to alignment:
            ``"left"`` (default), ``"right"``, or ``"center"``.

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    if any(len(r) != ncols for r in rows):
        raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{cells[i]:<{widths[i]}}" for i in range(ncols)) + " |"

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = widths[i]
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    lines: list[str] = [_line(headers), "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"
