# topmark:header:start
#
#   project      : Showcase
#   file         : types.py
#   file_relpath : src/showcase/content/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared TOML-related type aliases for the content package."""

from __future__ import annotations

from typing import Any

TomlTable = dict[str, Any]
