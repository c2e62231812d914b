# topmark:header:start
#
#   project      : Showcase
#   file         : holder.py
#   file_relpath : src/showcase/content/holder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Atomic replacement of the current registry snapshot.

`RegistryHolder` owns the reference that readers consult. A reload builds a
complete new `ContentRegistry` first and only then swaps the reference, so a
reader sees either the old document or the new one, never a mix. When the
new document fails to load, the previous snapshot stays in place and the
error propagates to whoever triggered the reload.

Deciding *when* to reload (file watchers, signals, admin endpoints) is left
to the application; the holder only guarantees the swap.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from showcase.api import load
from showcase.config.logging import get_logger
from showcase.content.errors import ContentError

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping
    from pathlib import Path

    from showcase.config.logging import ShowcaseLogger
    from showcase.content.registry import ContentRegistry

logger: ShowcaseLogger = get_logger(__name__)


class RegistryHolder:
    """Holds the current `ContentRegistry` and replaces it atomically.

    Reads (`current`) take no lock: rebinding a single attribute is atomic,
    and the registry itself is immutable. Writers are serialized so that two
    concurrent reloads cannot interleave their logging and generation count.

    Attributes:
        generation (int): Number of successful swaps since construction.
    """

    def __init__(self, registry: ContentRegistry | None = None) -> None:
        self._registry: ContentRegistry | None = registry
        self._write_lock = threading.Lock()
        self.generation: int = 0 if registry is None else 1

    @property
    def current(self) -> ContentRegistry:
        """Return the current snapshot.

        Raises:
            LookupError: If nothing has been loaded yet.
        """
        registry = self._registry
        if registry is None:
            raise LookupError("No content registry loaded yet")
        return registry

    @property
    def is_loaded(self) -> bool:
        """Whether a snapshot is available."""
        return self._registry is not None

    def replace(self, registry: ContentRegistry) -> ContentRegistry | None:
        """Swap in an already-built snapshot.

        Args:
            registry: The new snapshot.

        Returns:
            The previous snapshot, or None if there was none.
        """
        with self._write_lock:
            previous = self._registry
            self._registry = registry
            self.generation += 1
        logger.info(
            "Content registry replaced (generation %d, source %s)",
            self.generation,
            registry.source,
        )
        return previous

    def reload(
        self,
        source: Path | str | Mapping[str, Any],
        *,
        strict: bool = False,
        palette: Collection[str] | None = None,
    ) -> ContentRegistry:
        """Load ``source`` and swap it in if, and only if, it loads cleanly.

        Args:
            source: Anything `showcase.api.load` accepts.
            strict: If True, warnings fail the load.
            palette: Optional allowed step colors.

        Returns:
            The new current snapshot.

        Raises:
            ContentError: If loading fails; the previous snapshot is retained.
            OSError: If the source file cannot be read; the previous snapshot is retained.
        """
        try:
            registry = load(source, strict=strict, palette=palette)
        except (ContentError, OSError):
            logger.warning(
                "Reload failed; keeping generation %d",
                self.generation,
            )
            raise
        self.replace(registry)
        return registry
