# topmark:header:start
#
#   project      : Showcase
#   file         : __init__.py
#   file_relpath : src/showcase/content/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content model, validation and registry for panels and steps.

`RegistryHolder` lives in `showcase.content.holder` and is re-exported from
the top-level `showcase` package; it is not imported here because it depends
on `showcase.api`.
"""

from __future__ import annotations

from showcase.content.builder import MutableContent
from showcase.content.errors import (
    ContentError,
    EmptyCollectionError,
    ParseError,
    ValidationError,
)
from showcase.content.model import Panel, Step
from showcase.content.registry import ContentRegistry
from showcase.content.render import to_toml

__all__ = [
    "ContentError",
    "ContentRegistry",
    "EmptyCollectionError",
    "MutableContent",
    "Panel",
    "ParseError",
    "Step",
    "ValidationError",
    "to_toml",
]
