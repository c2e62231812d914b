# topmark:header:start
#
#   project      : Showcase
#   file         : test_dump_init_version.py
#   file_relpath : tests/cli/test_dump_init_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `dump`, `init` and `version` commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from showcase import load
from showcase.cli.exit_codes import ExitCode
from showcase.constants import SHOWCASE_VERSION
from showcase.content.loaders import load_starter_text
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import PIPELINE_DOC, ROUTING_DOC

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_dump_normalizes_and_round_trips(write_doc: Callable[[str], Path]) -> None:
    path = write_doc(
        'title = "x"\n\n[[panels]]\nname = "A"\nchecked = false\ncontent = "a"\nicon = "i"\n'
        + PIPELINE_DOC
    )

    result = run_cli(["--no-color", "dump", str(path)])

    assert_SUCCESS(result)
    assert "title" not in result.stdout
    assert "icon" not in result.stdout
    assert "checked" not in result.stdout
    again, original = load(result.stdout), load(path)
    assert again.panels() == original.panels()
    assert again.steps() == original.steps()


def test_dump_verbose_wraps_in_markers(write_doc: Callable[[str], Path]) -> None:
    path = write_doc(ROUTING_DOC)

    result = run_cli(["--no-color", "-v", "dump", str(path)])

    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert lines[0] == "# === BEGIN ==="
    assert lines[-1] == "# === END ==="


def test_dump_strict_rejects_warnings(write_doc: Callable[[str], Path]) -> None:
    path = write_doc('extra = 1\n' + ROUTING_DOC)

    assert_exit(run_cli(["dump", "--strict", str(path)]), ExitCode.VALIDATION_ERROR)


def test_init_prints_starter_document() -> None:
    result = run_cli(["--no-color", "init"])

    assert_SUCCESS(result)
    assert result.stdout == load_starter_text()


def test_init_writes_file_and_refuses_to_overwrite(tmp_path: Path) -> None:
    first = run_cli_in(tmp_path, ["--no-color", "init", "--output", "overview.toml"])
    second = run_cli_in(tmp_path, ["init", "-o", "overview.toml"])
    forced = run_cli_in(tmp_path, ["-q", "init", "-o", "overview.toml", "--force"])

    assert_SUCCESS(first)
    assert "Wrote overview.toml" in first.stdout
    assert_exit(second, ExitCode.USAGE_ERROR)
    assert "use --force" in second.output
    assert_SUCCESS(forced)
    assert forced.stdout == ""
    written = (tmp_path / "overview.toml").read_text(encoding="utf-8")
    assert load(written).default_panel().name == "Loading"


def test_version_plain() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == SHOWCASE_VERSION


def test_version_json_and_markdown() -> None:
    as_json = run_cli(["version", "--format", "json"])
    as_md = run_cli(["version", "--format", "markdown"])

    assert json.loads(as_json.stdout) == {"version": SHOWCASE_VERSION}
    assert as_md.stdout.startswith("# Showcase Version")
    assert f"**Showcase version: {SHOWCASE_VERSION}**" in as_md.stdout
