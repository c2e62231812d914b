# topmark:header:start
#
#   project      : Showcase
#   file         : api.py
#   file_relpath : src/showcase/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points for loading content documents.

`load` is the one-shot operation that turns a document into a validated,
immutable `ContentRegistry`. It either succeeds completely or raises; there
is no partial result.

Accepted sources:
    * `pathlib.Path`: read from disk (one scoped read, handle always released);
    * `str`: TOML text;
    * `Mapping`: an already-parsed document (e.g. from another loader).

Use `load_path` when a path arrives as a plain string (e.g. from a CLI).
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from showcase.config.logging import get_logger
from showcase.content.builder import MutableContent
from showcase.content.loaders import STRING_SOURCE, load_document_dict, parse_document_text

if TYPE_CHECKING:
    from collections.abc import Collection

    from showcase.config.logging import ShowcaseLogger
    from showcase.content.registry import ContentRegistry
    from showcase.content.types import TomlTable

logger: ShowcaseLogger = get_logger(__name__)


def load(
    source: Path | str | Mapping[str, Any],
    *,
    strict: bool = False,
    palette: Collection[str] | None = None,
) -> ContentRegistry:
    """Load and validate a content document.

    Args:
        source: A path, TOML text, or an already-parsed mapping.
        strict: If True, warnings (unknown keys) fail the load as well.
        palette: Optional allowed step colors; None accepts any color string.

    Returns:
        The immutable registry snapshot.

    Raises:
        ParseError: If the document is not well-formed TOML.
        ValidationError: If the document violates the content schema.
        OSError: If a path cannot be read.
        TypeError: If ``source`` is none of the accepted kinds.
    """
    label: str
    data: TomlTable
    if isinstance(source, Path):
        label = str(source)
        data = load_document_dict(source)
    elif isinstance(source, str):
        label = STRING_SOURCE
        data = parse_document_text(source, source=label)
    elif isinstance(source, Mapping):
        label = "<mapping>"
        data = dict(source)
    else:
        raise TypeError(f"Unsupported content source: {type(source).__name__}")

    logger.debug("Loading content from %s (strict=%s)", label, strict)
    builder = MutableContent.from_mapping(data, source=label, palette=palette)
    return builder.freeze(strict=strict)


def load_path(
    path: str | Path,
    *,
    strict: bool = False,
    palette: Collection[str] | None = None,
) -> ContentRegistry:
    """Load a content document from a filesystem path.

    Args:
        path: Path to the TOML document, as ``str`` or ``Path``.
        strict: If True, warnings fail the load as well.
        palette: Optional allowed step colors.

    Returns:
        The immutable registry snapshot.
    """
    return load(Path(path), strict=strict, palette=palette)
