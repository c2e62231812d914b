# topmark:header:start
#
#   project      : Showcase
#   file         : __init__.py
#   file_relpath : src/showcase/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for Showcase: logging setup and document key names."""

from __future__ import annotations

from showcase.config.keys import Toml
from showcase.config.logging import (
    TRACE_LEVEL,
    ShowcaseLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

__all__ = [
    "TRACE_LEVEL",
    "ShowcaseLogger",
    "Toml",
    "get_logger",
    "resolve_env_log_level",
    "setup_logging",
]
