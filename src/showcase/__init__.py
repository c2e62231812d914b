# topmark:header:start
#
#   project      : Showcase
#   file         : __init__.py
#   file_relpath : src/showcase/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase package.

Showcase loads a declarative TOML document describing tabbed documentation
panels and a colored sequence of pipeline steps, validates it, and exposes
the result as an immutable registry for a page renderer to consume. It ships
a small CLI (``showcase``) for checking and inspecting content files.
"""

from __future__ import annotations

from showcase.api import load, load_path
from showcase.content import (
    ContentError,
    ContentRegistry,
    EmptyCollectionError,
    Panel,
    ParseError,
    Step,
    ValidationError,
    to_toml,
)
from showcase.content.holder import RegistryHolder

__all__ = [
    "ContentError",
    "ContentRegistry",
    "EmptyCollectionError",
    "Panel",
    "ParseError",
    "RegistryHolder",
    "Step",
    "ValidationError",
    "load",
    "load_path",
    "to_toml",
]
