# topmark:header:start
#
#   project      : Showcase
#   file         : guards.py
#   file_relpath : src/showcase/content/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for values coming out of TOML parsing.

The builder receives plain Python data (``tomlkit`` documents are unwrapped
first), but callers may also hand over arbitrary mappings. These
`TypeGuard`-based predicates let Pyright narrow such values before the
builder reads them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeGuard

if TYPE_CHECKING:
    from .types import TomlTable


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping with string keys.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a mapping whose keys are all strings.
    """
    return isinstance(obj, Mapping) and all(isinstance(k, str) for k in obj)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value.

    Tuples are accepted as well, since callers building documents in code
    often use them for ordered records.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[list[Any]]: True if obj is a list or tuple.
    """
    return isinstance(obj, (list, tuple))


def is_non_empty_str(obj: object) -> TypeGuard[str]:
    """Type guard for a string with at least one non-whitespace character.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[str]: True if obj is a non-blank ``str``.
    """
    return isinstance(obj, str) and obj.strip() != ""


def type_label(obj: object) -> str:
    """Return a short TOML-flavored type name for diagnostics."""
    if isinstance(obj, bool):
        return "boolean"
    if isinstance(obj, str):
        return "string"
    if isinstance(obj, (int, float)):
        return "number"
    if isinstance(obj, Mapping):
        return "table"
    if isinstance(obj, (list, tuple)):
        return "array"
    return type(obj).__name__
