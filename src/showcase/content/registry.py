# topmark:header:start
#
#   project      : Showcase
#   file         : registry.py
#   file_relpath : src/showcase/content/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable registry of loaded panels and steps.

A `ContentRegistry` is the in-memory snapshot of one content document. It is
produced by `MutableContent.freeze` (usually via `showcase.api.load`) and is
never mutated afterwards: collections are tuples of frozen dataclasses, so a
registry can be shared by any number of readers without locking.

Typical usage:
    ```python
    from pathlib import Path

    from showcase import load

    registry = load(Path("overview.toml"))
    for panel in registry.panels():
        print(panel.name, panel is registry.default_panel())
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from showcase.config.keys import Toml
from showcase.content.errors import EmptyCollectionError
from showcase.diagnostic.model import FrozenDiagnosticLog

if TYPE_CHECKING:
    from showcase.content.model import Panel, Step

    from .types import TomlTable


@dataclass(frozen=True, slots=True)
class ContentRegistry:
    """Read-only snapshot of a content document.

    Attributes:
        source (str): Label of the loaded document (path or ``"<string>"``).
        panel_entries (tuple[Panel, ...]): Panels in declaration order.
        step_entries (tuple[Step, ...]): Steps in declaration order.
        diagnostics (FrozenDiagnosticLog): Non-fatal findings from the load.
    """

    source: str
    panel_entries: tuple[Panel, ...] = ()
    step_entries: tuple[Step, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def panels(self) -> tuple[Panel, ...]:
        """Return the panels in declaration order."""
        return self.panel_entries

    def steps(self) -> tuple[Step, ...]:
        """Return the steps in declaration order."""
        return self.step_entries

    def default_panel(self) -> Panel:
        """Return the panel selected for initial display.

        This is the panel with ``checked = true``; if none is checked (whether
        ``checked`` is absent or ``false`` everywhere), the first panel.

        Raises:
            EmptyCollectionError: If the document defines no panels.
        """
        if not self.panel_entries:
            raise EmptyCollectionError(Toml.ARRAY_PANELS)
        for panel in self.panel_entries:
            if panel.checked:
                return panel
        return self.panel_entries[0]

    def panel(self, name: str) -> Panel:
        """Return the panel called ``name``.

        Raises:
            KeyError: If no panel has that name.
        """
        for panel in self.panel_entries:
            if panel.name == name:
                return panel
        raise KeyError(name)

    def step(self, name: str) -> Step:
        """Return the step called ``name``.

        Raises:
            KeyError: If no step has that name.
        """
        for step in self.step_entries:
            if step.name == name:
                return step
        raise KeyError(name)

    def panel_names(self) -> tuple[str, ...]:
        """Return panel names in declaration order."""
        return tuple(p.name for p in self.panel_entries)

    def step_names(self) -> tuple[str, ...]:
        """Return step names in declaration order."""
        return tuple(s.name for s in self.step_entries)

    @property
    def is_empty(self) -> bool:
        """Whether the document defines neither panels nor steps."""
        return not self.panel_entries and not self.step_entries

    def to_toml_dict(self) -> TomlTable:
        """Return the registry as a TOML-compatible mapping.

        Empty collections are omitted, so an empty registry maps to ``{}``.
        Field order inside each record follows the document schema.
        """
        out: TomlTable = {}
        if self.panel_entries:
            out[Toml.ARRAY_PANELS] = [p.to_toml_dict() for p in self.panel_entries]
        if self.step_entries:
            out[Toml.ARRAY_STEPS] = [s.to_toml_dict() for s in self.step_entries]
        return out
