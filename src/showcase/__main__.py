# topmark:header:start
#
#   project      : Showcase
#   file         : __main__.py
#   file_relpath : src/showcase/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Showcase via ``python -m showcase``.

Equivalent to running the ``showcase`` console script.

Examples:
    Check a content document::

        python -m showcase check docs/overview.toml
"""

from __future__ import annotations

from showcase.cli.main import cli

if __name__ == "__main__":
    cli()
