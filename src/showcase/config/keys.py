# topmark:header:start
#
#   project      : Showcase
#   file         : keys.py
#   file_relpath : src/showcase/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML table and key names for Showcase content documents.

A content document holds two arrays of tables, ``[[panels]]`` and
``[[steps]]``. The names below are the external document schema; renaming
or removing one is a breaking change for every content file in the wild.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML array and key names used by Showcase content documents.

    The ordering mirrors the bundled ``overview.toml`` starter document.
    """

    # [[panels]]
    ARRAY_PANELS: Final[str] = "panels"

    # [[steps]]
    ARRAY_STEPS: Final[str] = "steps"

    # Record keys (shared)
    KEY_NAME: Final[str] = "name"
    KEY_CONTENT: Final[str] = "content"

    # Record keys (panels only)
    KEY_CHECKED: Final[str] = "checked"

    # Record keys (steps only)
    KEY_COLOR: Final[str] = "color"

    # Allowed keys per record kind; anything else is reported as a warning.
    PANEL_KEYS: Final[frozenset[str]] = frozenset({KEY_NAME, KEY_CHECKED, KEY_CONTENT})
    STEP_KEYS: Final[frozenset[str]] = frozenset({KEY_NAME, KEY_COLOR, KEY_CONTENT})

    # Allowed top-level keys.
    DOCUMENT_KEYS: Final[frozenset[str]] = frozenset({ARRAY_PANELS, ARRAY_STEPS})
