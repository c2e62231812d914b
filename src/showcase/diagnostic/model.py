# topmark:header:start
#
#   project      : Showcase
#   file         : model.py
#   file_relpath : src/showcase/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic types collected while loading content documents.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic (level, message, location).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection used while a document is being built.
    * FrozenDiagnosticLog: immutable snapshot stored on a loaded registry.

Locations use a dotted/indexed path into the document, e.g. ``panels[2].name``,
so messages point content authors at the offending record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import TYPE_CHECKING

import click

from showcase.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from showcase.config.logging import ShowcaseLogger


logger: ShowcaseLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during loading.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the style function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.
        """
        fg: str = {
            DiagnosticLevel.INFO: "blue",
            DiagnosticLevel.WARNING: "yellow",
            DiagnosticLevel.ERROR: "bright_red",
        }[self]
        return partial(click.style, fg=fg)


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, message and optional location."""

    level: DiagnosticLevel
    message: str
    location: str | None = None

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping for machine output."""
        out: dict[str, str] = {"level": self.level.value, "message": self.message}
        if self.location:
            out["location"] = self.location
        return out


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics for a single document load.

    Validation does not stop at the first problem: every record is checked and
    all findings end up here, so an author sees the whole list at once.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %s", diagnostic.level.value, diagnostic)

    def add_info(self, message: str, *, location: str | None = None) -> None:
        """Add an ``info`` diagnostic.

        Args:
            message: The diagnostic message.
            location: Optional document path of the offending value.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message, location))

    def add_warning(self, message: str, *, location: str | None = None) -> None:
        """Add a ``warning`` diagnostic.

        Args:
            message: The diagnostic message.
            location: Optional document path of the offending value.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, location))

    def add_error(self, message: str, *, location: str | None = None) -> None:
        """Add an ``error`` diagnostic.

        Args:
            message: The diagnostic message.
            location: Optional document path of the offending value.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message, location))

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable diagnostic container stored on loaded registries and errors."""

    items: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)

    def of_level(self, level: DiagnosticLevel) -> tuple[Diagnostic, ...]:
        """Return the diagnostics at ``level``, in insertion order."""
        return tuple(d for d in self.items if d.level == level)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        stats: DiagnosticStats = self.stats()
        return {
            "info": stats.n_info,
            "warning": stats.n_warning,
            "error": stats.n_error,
        }


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: The diagnostics to count.

    Returns:
        Per-level counts.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
