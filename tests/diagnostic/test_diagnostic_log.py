# topmark:header:start
#
#   project      : Showcase
#   file         : test_diagnostic_log.py
#   file_relpath : tests/diagnostic/test_diagnostic_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic log collection, freezing and counting."""

from __future__ import annotations

import click

from showcase.diagnostic import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
)


def test_log_keeps_insertion_order_and_levels() -> None:
    log = DiagnosticLog()
    log.add_warning("w", location="panels[0].x")
    log.add_error("e")
    log.add_info("i")

    assert [d.level for d in log] == [
        DiagnosticLevel.WARNING,
        DiagnosticLevel.ERROR,
        DiagnosticLevel.INFO,
    ]
    assert len(log) == 3
    assert log.has_error() and log.has_warning()


def test_freeze_is_a_snapshot() -> None:
    log = DiagnosticLog()
    log.add_error("first")
    frozen = log.freeze()
    log.add_error("second")

    assert len(frozen) == 1
    assert isinstance(frozen, FrozenDiagnosticLog)
    assert [d.message for d in frozen] == ["first"]


def test_stats_and_dict() -> None:
    log = DiagnosticLog()
    log.add_info("a")
    log.add_warning("b")
    log.add_warning("c")

    stats = log.stats()

    assert (stats.n_info, stats.n_warning, stats.n_error, stats.total) == (1, 2, 0, 3)
    assert log.freeze().to_dict() == {"info": 1, "warning": 2, "error": 0}
    assert compute_diagnostic_stats([]).total == 0


def test_of_level_filters() -> None:
    log = DiagnosticLog()
    log.add_warning("w")
    log.add_error("e")

    assert [d.message for d in log.freeze().of_level(DiagnosticLevel.ERROR)] == ["e"]


def test_diagnostic_str_and_dict() -> None:
    located = Diagnostic(DiagnosticLevel.ERROR, "boom", "steps[1].name")
    bare = Diagnostic(DiagnosticLevel.INFO, "note")

    assert str(located) == "steps[1].name: boom"
    assert str(bare) == "note"
    assert located.to_dict() == {"level": "error", "message": "boom", "location": "steps[1].name"}
    assert bare.to_dict() == {"level": "info", "message": "note"}


def test_level_color_styles_text() -> None:
    styled = DiagnosticLevel.WARNING.color("careful")

    assert click.unstyle(styled) == "careful"
    assert styled != "careful"
