# topmark:header:start
#
#   project      : Showcase
#   file         : builder.py
#   file_relpath : src/showcase/content/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable builder that turns a parsed document into a `ContentRegistry`.

The builder is the validation boundary. It walks every ``[[panels]]`` and
``[[steps]]`` record in declaration order and records each problem in a
`DiagnosticLog` instead of stopping at the first one:

- errors: a missing or empty ``name``/``content``, a field of the wrong type,
  a duplicate name within a collection, more than one checked panel, a color
  outside the palette (only when a palette is given);
- warnings: keys the schema does not know, at record or document level.

`MutableContent.freeze` then either raises `ValidationError` carrying every
diagnostic, or returns the immutable registry snapshot. Records are never
reordered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from showcase.config.keys import Toml
from showcase.config.logging import get_logger
from showcase.content.errors import ValidationError
from showcase.content.guards import is_any_list, is_non_empty_str, is_toml_table, type_label
from showcase.content.loaders import STRING_SOURCE
from showcase.content.model import Panel, Step
from showcase.content.registry import ContentRegistry
from showcase.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from showcase.config.logging import ShowcaseLogger

    from .types import TomlTable

logger: ShowcaseLogger = get_logger(__name__)


def _location(array: str, index: int, key: str | None = None) -> str:
    loc = f"{array}[{index}]"
    return f"{loc}.{key}" if key else loc


@dataclass
class MutableContent:
    """Mutable, validating builder for a content document.

    Attributes:
        source (str): Label of the document being built (path or ``"<string>"``).
        palette (frozenset[str] | None): Allowed step colors; None accepts any string.
        panels (list[Panel]): Panels accepted so far, in declaration order.
        steps (list[Step]): Steps accepted so far, in declaration order.
        diagnostics (DiagnosticLog): Everything found while building.
        seen_panel_names (set[str]): Well-formed panel names, including rejected records.
        seen_step_names (set[str]): Well-formed step names, including rejected records.
        checked_panels (list[str]): Labels of every record with ``checked = true``.
    """

    source: str = STRING_SOURCE
    palette: frozenset[str] | None = None
    panels: list[Panel] = field(default_factory=lambda: [])
    steps: list[Step] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    seen_panel_names: set[str] = field(default_factory=lambda: set[str]())
    seen_step_names: set[str] = field(default_factory=lambda: set[str]())
    checked_panels: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        source: str = STRING_SOURCE,
        palette: Collection[str] | None = None,
    ) -> MutableContent:
        """Build from an already-parsed document.

        Args:
            data: Parsed document with optional ``panels`` and ``steps`` arrays.
            source: Label used in diagnostics and errors.
            palette: Optional allowed step colors.

        Returns:
            A builder holding every valid record plus all diagnostics.
        """
        builder = cls(
            source=source,
            palette=frozenset(palette) if palette is not None else None,
        )
        builder.add_document(data)
        return builder

    def add_document(self, data: Mapping[str, Any]) -> None:
        """Validate and append all records of ``data``."""
        if not is_toml_table(data):
            self.diagnostics.add_error(
                f"document root must be a table, got {type_label(data)}",
            )
            return

        for key in data:
            if key not in Toml.DOCUMENT_KEYS:
                self.diagnostics.add_warning(f"unknown top-level key '{key}' ignored", location=key)

        for index, raw in enumerate(self._records(data, Toml.ARRAY_PANELS)):
            self.add_panel_record(index, raw)
        for index, raw in enumerate(self._records(data, Toml.ARRAY_STEPS)):
            self.add_step_record(index, raw)

        self._check_checked_panels()

    def _records(self, data: TomlTable, array: str) -> list[Any]:
        value: Any = data.get(array)
        if value is None:
            logger.debug("%s: no [[%s]] defined", self.source, array)
            return []
        if not is_any_list(value):
            self.diagnostics.add_error(
                f"expected an array of tables, got {type_label(value)}",
                location=array,
            )
            return []
        return list(value)

    def add_panel_record(self, index: int, raw: object) -> Panel | None:
        """Validate one ``[[panels]]`` record and append it when valid.

        Args:
            index: Position of the record in the ``panels`` array.
            raw: The record as parsed.

        Returns:
            The accepted panel, or None when the record had errors.
        """
        array = Toml.ARRAY_PANELS
        if not is_toml_table(raw):
            self.diagnostics.add_error(
                f"expected a table, got {type_label(raw)}", location=_location(array, index)
            )
            return None

        n_errors: int = self.diagnostics.stats().n_error
        self._warn_unknown_keys(raw, Toml.PANEL_KEYS, array, index)
        name = self._required_str(raw, Toml.KEY_NAME, array, index)
        content = self._required_str(raw, Toml.KEY_CONTENT, array, index)

        checked: Any = raw.get(Toml.KEY_CHECKED, False)
        if not isinstance(checked, bool):
            self.diagnostics.add_error(
                f"field '{Toml.KEY_CHECKED}' must be a boolean, got {type_label(checked)}",
                location=_location(array, index, Toml.KEY_CHECKED),
            )

        if checked is True:
            label: str = f"'{name}'" if name is not None else _location(array, index)
            self.checked_panels.append(label)

        if name is not None and name in self.seen_panel_names:
            self.diagnostics.add_error(
                f"duplicate panel name '{name}'",
                location=_location(array, index, Toml.KEY_NAME),
            )
        elif name is not None:
            self.seen_panel_names.add(name)

        if self.diagnostics.stats().n_error > n_errors or name is None or content is None:
            return None

        panel = Panel(name=name, content=content, checked=bool(checked))
        self.panels.append(panel)
        logger.trace("%s: accepted panel %r (checked=%s)", self.source, name, panel.checked)
        return panel

    def add_step_record(self, index: int, raw: object) -> Step | None:
        """Validate one ``[[steps]]`` record and append it when valid.

        Args:
            index: Position of the record in the ``steps`` array.
            raw: The record as parsed.

        Returns:
            The accepted step, or None when the record had errors.
        """
        array = Toml.ARRAY_STEPS
        if not is_toml_table(raw):
            self.diagnostics.add_error(
                f"expected a table, got {type_label(raw)}", location=_location(array, index)
            )
            return None

        n_errors: int = self.diagnostics.stats().n_error
        self._warn_unknown_keys(raw, Toml.STEP_KEYS, array, index)
        name = self._required_str(raw, Toml.KEY_NAME, array, index)
        content = self._required_str(raw, Toml.KEY_CONTENT, array, index)
        color = self._color(raw, index)

        if name is not None and name in self.seen_step_names:
            self.diagnostics.add_error(
                f"duplicate step name '{name}'",
                location=_location(array, index, Toml.KEY_NAME),
            )
        elif name is not None:
            self.seen_step_names.add(name)

        if self.diagnostics.stats().n_error > n_errors or name is None or content is None:
            return None

        step = Step(name=name, content=content, color=color)
        self.steps.append(step)
        logger.trace("%s: accepted step %r (color=%s)", self.source, name, color)
        return step

    def _required_str(self, raw: TomlTable, key: str, array: str, index: int) -> str | None:
        loc: str = _location(array, index, key)
        if key not in raw:
            self.diagnostics.add_error(f"missing required field '{key}'", location=loc)
            return None
        value: Any = raw[key]
        if not isinstance(value, str):
            self.diagnostics.add_error(
                f"field '{key}' must be a string, got {type_label(value)}", location=loc
            )
            return None
        if not is_non_empty_str(value):
            self.diagnostics.add_error(f"field '{key}' must not be empty", location=loc)
            return None
        return value

    def _color(self, raw: TomlTable, index: int) -> str | None:
        loc: str = _location(Toml.ARRAY_STEPS, index, Toml.KEY_COLOR)
        if Toml.KEY_COLOR not in raw:
            return None
        value: Any = raw[Toml.KEY_COLOR]
        if not isinstance(value, str):
            self.diagnostics.add_error(
                f"field '{Toml.KEY_COLOR}' must be a string, got {type_label(value)}",
                location=loc,
            )
            return None
        if not is_non_empty_str(value):
            self.diagnostics.add_error(f"field '{Toml.KEY_COLOR}' must not be empty", location=loc)
            return None
        if self.palette is not None and value not in self.palette:
            allowed: str = ", ".join(sorted(self.palette))
            self.diagnostics.add_error(
                f"color '{value}' is not in the palette ({allowed})", location=loc
            )
            return None
        return value

    def _warn_unknown_keys(
        self,
        raw: TomlTable,
        allowed: frozenset[str],
        array: str,
        index: int,
    ) -> None:
        for key in raw:
            if key not in allowed:
                self.diagnostics.add_warning(
                    f"unknown key '{key}' ignored", location=_location(array, index, key)
                )

    def _check_checked_panels(self) -> None:
        checked: list[str] = self.checked_panels
        if len(checked) > 1:
            names: str = ", ".join(checked)
            self.diagnostics.add_error(
                f"at most one panel may be checked, found {len(checked)}: {names}",
                location=Toml.ARRAY_PANELS,
            )

    def freeze(self, *, strict: bool = False) -> ContentRegistry:
        """Freeze this builder into an immutable `ContentRegistry`.

        Args:
            strict: If True, warnings fail the load as well as errors.

        Returns:
            The immutable registry snapshot.

        Raises:
            ValidationError: If any error (or, when strict, any warning) was recorded.
        """
        if self.diagnostics.has_error() or (strict and self.diagnostics.has_warning()):
            stats = self.diagnostics.stats()
            logger.error(
                "%s: content rejected (%d error(s), %d warning(s))",
                self.source,
                stats.n_error,
                stats.n_warning,
            )
            raise ValidationError(self.diagnostics.freeze(), source=self.source)

        registry = ContentRegistry(
            source=self.source,
            panel_entries=tuple(self.panels),
            step_entries=tuple(self.steps),
            diagnostics=self.diagnostics.freeze(),
        )
        logger.debug(
            "%s: loaded %d panel(s), %d step(s)",
            self.source,
            len(registry.panel_entries),
            len(registry.step_entries),
        )
        return registry
