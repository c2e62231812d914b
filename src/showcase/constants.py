# topmark:header:start
#
#   project      : Showcase
#   file         : constants.py
#   file_relpath : src/showcase/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SHOWCASE_VERSION: str = get_version("showcase")

# Name of the bundled starter document inside the package `showcase.content`:
STARTER_DOCUMENT_PACKAGE: str = "showcase.content"
STARTER_DOCUMENT_NAME: str = "overview.toml"

#: Step colors used by the bundled starter document. Palette checking is opt-in;
#: this tuple is what `--default-palette` enforces.
DEFAULT_PALETTE: tuple[str, ...] = ("blue", "purple", "red", "green", "orange", "yellow")
