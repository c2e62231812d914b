# topmark:header:start
#
#   project      : Showcase
#   file         : __init__.py
#   file_relpath : src/showcase/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Showcase CLI package.

This package groups all Click command definitions and supporting utilities
for the Showcase command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        showcase = "showcase.cli.main:cli"

All subcommands live in `showcase.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
