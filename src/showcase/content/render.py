# topmark:header:start
#
#   project      : Showcase
#   file         : render.py
#   file_relpath : src/showcase/content/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a loaded registry back to TOML.

Rendering is the inverse of loading: `to_toml` writes ``[[panels]]`` and
``[[steps]]`` arrays of tables in declaration order, so that
``load(to_toml(registry))`` yields an equal registry.

Multi-line bodies are written as multi-line literal strings (``'''``), the
way authors write them by hand, whenever the text allows it; anything else
falls back to an escaped single-line basic string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.items import String

from showcase.config.keys import Toml
from showcase.config.logging import get_logger

if TYPE_CHECKING:
    from tomlkit.items import AoT, Table

    from showcase.config.logging import ShowcaseLogger
    from showcase.content.registry import ContentRegistry

    from .types import TomlTable

logger: ShowcaseLogger = get_logger(__name__)


def _fits_multiline_literal(text: str) -> bool:
    """Return True if ``text`` survives a ``'''...'''`` round trip unchanged."""
    if "\n" not in text or "'''" in text or text.endswith("'"):
        return False
    # The parser trims a newline right after the opening delimiter.
    if text.startswith("\n"):
        return False
    return not any((ord(c) < 0x20 and c not in "\t\n") or c == "\x7f" for c in text)


def _string_item(text: str) -> String:
    if _fits_multiline_literal(text):
        return tomlkit.string(text, literal=True, multiline=True)
    return tomlkit.string(text)


def _table_item(record: TomlTable) -> Table:
    table: Table = tomlkit.table()
    for key, value in record.items():
        if value is None:
            logger.debug("Ignoring `None` entry for key %s", key)
            continue
        table.add(key, _string_item(value) if key == Toml.KEY_CONTENT else value)
    return table


def document_to_toml(data: TomlTable) -> str:
    """Serialize a content mapping (``panels``/``steps`` arrays) to TOML text.

    Args:
        data: Mapping shaped like `ContentRegistry.to_toml_dict` output.

    Returns:
        The TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for array in (Toml.ARRAY_PANELS, Toml.ARRAY_STEPS):
        records: Any = data.get(array)
        if not records:
            continue
        aot: AoT = tomlkit.aot()
        for record in records:
            aot.append(_table_item(record))
        doc.add(array, aot)
    return tomlkit.dumps(doc)


def to_toml(registry: ContentRegistry) -> str:
    """Serialize a registry to TOML text.

    Args:
        registry: The registry to render.

    Returns:
        A TOML document that loads back into an equal registry.
    """
    return document_to_toml(registry.to_toml_dict())
