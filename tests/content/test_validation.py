# topmark:header:start
#
#   project      : Showcase
#   file         : test_validation.py
#   file_relpath : tests/content/test_validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema validation: every problem is collected, nothing loads partially."""

from __future__ import annotations

import pytest

from showcase import ValidationError, load
from showcase.content import MutableContent
from showcase.diagnostic import DiagnosticLevel
from tests.conftest import panel_toml, parametrize, step_toml


def _fail(text: str, **kwargs: object) -> ValidationError:
    with pytest.raises(ValidationError) as excinfo:
        load(text, **kwargs)  # type: ignore[arg-type]
    return excinfo.value


def test_two_checked_panels_are_rejected() -> None:
    err = _fail(panel_toml("A", checked=True) + panel_toml("B", checked=True))

    assert err.messages == ["panels: at most one panel may be checked, found 2: 'A', 'B'"]


@parametrize(
    "text, location",
    [
        ('[[panels]]\ncontent = "x"\n', "panels[0].name"),
        ('[[panels]]\nname = ""\ncontent = "x"\n', "panels[0].name"),
        ('[[panels]]\nname = "   "\ncontent = "x"\n', "panels[0].name"),
        ('[[steps]]\ncontent = "x"\n', "steps[0].name"),
        ('[[steps]]\nname = ""\ncontent = "x"\n', "steps[0].name"),
        ('[[panels]]\nname = "A"\n', "panels[0].content"),
        ('[[steps]]\nname = "S"\ncontent = ""\n', "steps[0].content"),
    ],
)
def test_missing_or_empty_required_field(text: str, location: str) -> None:
    err = _fail(text)

    assert len(err.messages) == 1
    assert err.messages[0].startswith(f"{location}: ")


@parametrize(
    "text, expected",
    [
        (
            '[[panels]]\nname = 3\ncontent = "x"\n',
            "panels[0].name: field 'name' must be a string, got number",
        ),
        (
            '[[panels]]\nname = "A"\nchecked = "yes"\ncontent = "x"\n',
            "panels[0].checked: field 'checked' must be a boolean, got string",
        ),
        (
            '[[steps]]\nname = "S"\ncolor = 1\ncontent = "x"\n',
            "steps[0].color: field 'color' must be a string, got number",
        ),
        (
            '[[steps]]\nname = "S"\ncontent = ["a"]\n',
            "steps[0].content: field 'content' must be a string, got array",
        ),
        ('panels = "nope"\n', "panels: expected an array of tables, got string"),
        ("panels = [1]\n", "panels[0]: expected a table, got number"),
    ],
)
def test_wrong_types_are_rejected(text: str, expected: str) -> None:
    assert _fail(text).messages == [expected]


def test_duplicate_panel_names_are_rejected() -> None:
    err = _fail(panel_toml("A") + panel_toml("B") + panel_toml("A"))

    assert err.messages == ["panels[2].name: duplicate panel name 'A'"]


def test_duplicate_step_names_are_rejected() -> None:
    err = _fail(step_toml("S", color="blue") + step_toml("S", color="red"))

    assert err.messages == ["steps[1].name: duplicate step name 'S'"]


def test_checked_collision_is_reported_alongside_record_errors() -> None:
    err = _fail(
        '[[panels]]\nname = "A"\nchecked = true\n\n'
        + panel_toml("B", content="y", checked=True)
    )

    assert err.messages == [
        "panels[0].content: missing required field 'content'",
        "panels: at most one panel may be checked, found 2: 'A', 'B'",
    ]


def test_checked_collision_counts_unnamed_records() -> None:
    err = _fail('[[panels]]\nchecked = true\ncontent = "x"\n\n' + panel_toml("B", checked=True))

    assert err.messages == [
        "panels[0].name: missing required field 'name'",
        "panels: at most one panel may be checked, found 2: panels[0], 'B'",
    ]


def test_duplicate_name_is_reported_when_first_record_is_rejected() -> None:
    err = _fail('[[steps]]\nname = "S"\n\n' + step_toml("S", content="y"))

    assert err.messages == [
        "steps[0].content: missing required field 'content'",
        "steps[1].name: duplicate step name 'S'",
    ]


def test_duplicate_panel_name_is_reported_when_first_record_is_rejected() -> None:
    err = _fail('[[panels]]\nname = "A"\ncontent = ""\n\n' + panel_toml("A"))

    assert err.messages == [
        "panels[0].content: field 'content' must not be empty",
        "panels[1].name: duplicate panel name 'A'",
    ]


def test_same_name_across_collections_is_allowed() -> None:
    registry = load(panel_toml("Shared") + step_toml("Shared"))

    assert registry.panel_names() == registry.step_names() == ("Shared",)


def test_all_problems_are_reported_together() -> None:
    text = (
        '[[panels]]\ncontent = "x"\n\n'
        + panel_toml("A", checked=True)
        + panel_toml("B", checked=True)
        + '[[steps]]\nname = "S"\n\n'
        + '[[steps]]\nname = "T"\ncontent = ""\n'
    )
    err = _fail(text)

    assert len(err.messages) == 4
    assert str(err).startswith("<string>: invalid content: ")
    assert str(err).endswith("(and 1 more)")
    assert err.diagnostics.stats().n_error == 4


def test_unknown_keys_only_warn() -> None:
    text = 'title = "Docs"\n\n[[panels]]\nname = "A"\ncontent = "x"\nicon = "star"\n'

    registry = load(text)

    assert registry.panel_names() == ("A",)
    warnings = registry.diagnostics.of_level(DiagnosticLevel.WARNING)
    assert [str(d) for d in warnings] == [
        "title: unknown top-level key 'title' ignored",
        "panels[0].icon: unknown key 'icon' ignored",
    ]


def test_strict_mode_fails_on_warnings() -> None:
    text = panel_toml("A") + '[[steps]]\nname = "S"\ncontent = "x"\nsize = 2\n'

    err = _fail(text, strict=True)

    assert err.messages == ["steps[0].size: unknown key 'size' ignored"]


def test_palette_restricts_colors() -> None:
    text = step_toml("S", color="blue") + step_toml("T", color="teal")

    err = _fail(text, palette=["blue", "red"])

    assert err.messages == ["steps[1].color: color 'teal' is not in the palette (blue, red)"]
    assert load(text).step("T").color == "teal"


def test_palette_does_not_require_a_color() -> None:
    registry = load(step_toml("S"), palette=["blue"])

    assert registry.step("S").color is None


def test_builder_keeps_valid_records_and_collects_errors() -> None:
    builder = MutableContent.from_mapping(
        {"panels": [{"name": "A", "content": "x"}, {"name": "", "content": "y"}]}
    )

    assert [p.name for p in builder.panels] == ["A"]
    assert builder.diagnostics.has_error()
    with pytest.raises(ValidationError):
        builder.freeze()


def test_builder_rejects_non_table_root() -> None:
    builder = MutableContent.from_mapping(["not", "a", "table"])  # type: ignore[arg-type]

    with pytest.raises(ValidationError, match="document root must be a table"):
        builder.freeze()
