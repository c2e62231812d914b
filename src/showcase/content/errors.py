# topmark:header:start
#
#   project      : Showcase
#   file         : errors.py
#   file_relpath : src/showcase/content/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the content registry.

All failures are reported synchronously to the caller of `load` (or of the
accessor that needs a non-empty collection). Nothing is retried and nothing
is partially loaded: either a whole document becomes a registry, or one of
these exceptions is raised and the caller keeps whatever snapshot it had.

Usage:
    ```python
    from showcase import ContentError, load

    try:
        registry = load(Path("overview.toml"))
    except ContentError as exc:
        ...
    ```
"""

from __future__ import annotations

from showcase.diagnostic.model import DiagnosticLevel, FrozenDiagnosticLog

#: Maximum number of problems quoted in a `ValidationError` message.
MAX_QUOTED_PROBLEMS: int = 3


class ContentError(Exception):
    """Base class for all content registry errors."""


class ParseError(ContentError):
    """The source document is not well-formed TOML.

    Attributes:
        source: Label of the document that failed (a path or ``"<string>"``).
        line: 1-based line reported by the TOML parser, if known.
        col: 1-based column reported by the TOML parser, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str,
        line: int | None = None,
        col: int | None = None,
    ) -> None:
        self.source = source
        self.line = line
        self.col = col
        super().__init__(f"{source}: {message}")


class ValidationError(ContentError):
    """A well-formed document violates the content schema.

    Raised for a missing or empty ``name``/``content``, a field of the wrong
    type, a name collision within ``panels`` or ``steps``, or more than one
    checked panel. Every problem found in the document is kept in
    ``diagnostics``; the message quotes the first few.

    Attributes:
        source: Label of the document that failed.
        diagnostics: All diagnostics recorded while validating the document.
    """

    def __init__(self, diagnostics: FrozenDiagnosticLog, *, source: str) -> None:
        self.source = source
        self.diagnostics = diagnostics
        problems: list[str] = self.messages
        summary: str = "; ".join(problems[:MAX_QUOTED_PROBLEMS])
        if len(problems) > MAX_QUOTED_PROBLEMS:
            summary += f" (and {len(problems) - MAX_QUOTED_PROBLEMS} more)"
        super().__init__(f"{source}: invalid content: {summary}")

    @property
    def messages(self) -> list[str]:
        """Return the failing problems as ``location: message`` strings.

        Only error-level diagnostics are listed unless the load was strict and
        failed on warnings alone, in which case the warnings are listed.
        """
        errors = self.diagnostics.of_level(DiagnosticLevel.ERROR)
        picked = errors or self.diagnostics.of_level(DiagnosticLevel.WARNING)
        return [str(d) for d in picked]


class EmptyCollectionError(ContentError):
    """An accessor that needs at least one entry was called on an empty collection."""

    def __init__(self, collection: str) -> None:
        self.collection = collection
        super().__init__(f"No {collection} defined")
