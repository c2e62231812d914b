# topmark:header:start
#
#   project      : Showcase
#   file         : loaders.py
#   file_relpath : src/showcase/content/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and parse TOML content documents.

This module provides the I/O half of loading:
- reading a document from disk as one scoped acquisition (open, read fully,
  release), and
- parsing TOML text with `tomlkit` into plain `dict` structures.

The bundled starter document is read through `importlib.resources` so it is
found whether the package is installed as a wheel or run from a checkout.

Unlike a config reader, nothing here falls back to an empty document: a
missing file raises the `OSError` as is, and malformed text raises
`ParseError`.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.exceptions import TOMLKitError

from showcase.config.logging import get_logger
from showcase.constants import STARTER_DOCUMENT_NAME, STARTER_DOCUMENT_PACKAGE
from showcase.content.errors import ParseError

if TYPE_CHECKING:
    from pathlib import Path

    from showcase.config.logging import ShowcaseLogger

    from .types import TomlTable

logger: ShowcaseLogger = get_logger(__name__)

#: Source label used for documents handed over as text.
STRING_SOURCE: str = "<string>"


def read_document_text(path: Path) -> str:
    """Read a content document from disk in a single scoped acquisition.

    The file handle is released on every exit path, including decode
    failures. A leading UTF-8 BOM is dropped.

    Args:
        path: Path to the TOML document.

    Returns:
        The decoded document text.

    Raises:
        ParseError: If the bytes are not valid UTF-8.
        OSError: If the file cannot be opened or read (propagated unchanged).
    """
    logger.debug("Reading content document %s", path)
    try:
        with path.open("rb") as fh:
            raw: bytes = fh.read()
    except OSError as exc:
        logger.error("Cannot read content document %s: %s", path, exc)
        raise
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.error("Content document %s is not valid UTF-8: %s", path, exc)
        raise ParseError(f"not valid UTF-8 ({exc.reason})", source=str(path)) from exc


def parse_document_text(text: str, *, source: str = STRING_SOURCE) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text: TOML document text.
        source: Label used in error messages (path or ``"<string>"``).

    Returns:
        The parsed document as a plain ``dict``.

    Raises:
        ParseError: If the text is not well-formed TOML (including duplicate keys
            and redefined tables, which ``tomlkit`` reports while parsing).
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", source, exc)
        raise ParseError(str(exc), source=source, line=exc.line, col=exc.col) from exc
    except TOMLKitError as exc:
        logger.error("Invalid TOML structure in %s: %s", source, exc)
        raise ParseError(str(exc), source=source) from exc

    data_any: Any = doc.unwrap()
    # A TOML document always unwraps to a dict; this guards custom tomlkit builds.
    if not isinstance(data_any, dict):
        raise ParseError("document root is not a table", source=source)
    logger.trace("Parsed %s: top-level keys %s", source, sorted(data_any))
    return cast("TomlTable", data_any)


def load_document_dict(path: Path) -> TomlTable:
    """Read and parse a TOML content document from the filesystem.

    Args:
        path: Path to the TOML document.

    Returns:
        The parsed document.
    """
    return parse_document_text(read_document_text(path), source=str(path))


def load_starter_text() -> str:
    """Return the bundled starter document (``overview.toml``) as text.

    The text keeps its comments and formatting, so it can be written out as
    a template for new content files.

    Returns:
        The starter document text.
    """
    resource = files(STARTER_DOCUMENT_PACKAGE).joinpath(STARTER_DOCUMENT_NAME)
    return resource.read_text(encoding="utf-8")
