# topmark:header:start
#
#   project      : Showcase
#   file         : model.py
#   file_relpath : src/showcase/content/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable value objects for content display units.

`Panel` and `Step` are plain frozen dataclasses. They carry no behavior beyond
conversion back to a TOML-compatible mapping; ``content`` is an opaque body
(it may embed fenced code blocks) and is never interpreted here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from showcase.config.keys import Toml

if TYPE_CHECKING:
    from showcase.content.types import TomlTable


@dataclass(frozen=True, slots=True)
class Panel:
    """A named, selectable tab of documentation content.

    Attributes:
        name (str): Display label and tab identifier, unique among panels.
        content (str): Opaque rich-text body.
        checked (bool): Whether this panel is the initially active tab.
    """

    name: str
    content: str
    checked: bool = False

    def to_toml_dict(self) -> TomlTable:
        """Return the panel as a TOML table.

        ``checked`` is only written when true, matching how authors write it.
        """
        table: TomlTable = {Toml.KEY_NAME: self.name}
        if self.checked:
            table[Toml.KEY_CHECKED] = True
        table[Toml.KEY_CONTENT] = self.content
        return table


@dataclass(frozen=True, slots=True)
class Step:
    """A named, color-tagged stage in an illustrated pipeline.

    Attributes:
        name (str): Stage label, unique among steps.
        content (str): Opaque rich-text body.
        color (str | None): Presentation tag such as ``"blue"``; None when unset.
    """

    name: str
    content: str
    color: str | None = None

    def to_toml_dict(self) -> TomlTable:
        """Return the step as a TOML table (``color`` omitted when unset)."""
        table: TomlTable = {Toml.KEY_NAME: self.name}
        if self.color is not None:
            table[Toml.KEY_COLOR] = self.color
        table[Toml.KEY_CONTENT] = self.content
        return table
