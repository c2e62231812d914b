# topmark:header:start
#
#   project      : Showcase
#   file         : test_registry.py
#   file_relpath : tests/content/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry accessors: declaration order, default panel and lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from showcase import ContentRegistry, EmptyCollectionError, Panel, Step, load
from tests.conftest import PIPELINE_DOC, ROUTING_DOC, panel_toml, parametrize, step_toml

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_default_panel_is_the_checked_one() -> None:
    """A panel with ``checked = true`` is shown first."""
    registry = load(ROUTING_DOC)

    assert registry.default_panel().name == "Routing"


def test_default_panel_falls_back_to_first_declared() -> None:
    """Without any checked panel, the first declared panel is the default."""
    registry = load(panel_toml("A") + panel_toml("B"))

    assert registry.default_panel().name == "A"


def test_checked_later_panel_wins_over_declaration_order() -> None:
    registry = load(panel_toml("A") + panel_toml("B") + panel_toml("C", checked=True))

    assert registry.default_panel().name == "C"
    assert registry.panel_names() == ("A", "B", "C")


def test_checked_false_everywhere_is_same_as_absent() -> None:
    """``checked = false`` on all panels behaves like no ``checked`` at all."""
    explicit = load(panel_toml("A", checked=False) + panel_toml("B", checked=False))
    implicit = load(panel_toml("A") + panel_toml("B"))

    assert explicit.default_panel() == implicit.default_panel() == Panel("A", "Body.")


def test_default_panel_on_empty_collection_raises() -> None:
    registry = load(PIPELINE_DOC)

    with pytest.raises(EmptyCollectionError) as excinfo:
        registry.default_panel()

    assert excinfo.value.collection == "panels"
    assert str(excinfo.value) == "No panels defined"


def test_steps_keep_order_and_colors() -> None:
    """Validation, Processing, Response come back in order with their colors."""
    registry = load(PIPELINE_DOC)

    assert [(s.name, s.color) for s in registry.steps()] == [
        ("Validation", "blue"),
        ("Processing", "purple"),
        ("Response", "red"),
    ]


def test_panels_keep_declaration_order() -> None:
    names = ["Zeta", "Alpha", "Mu", "Beta"]
    registry = load("".join(panel_toml(n) for n in names))

    assert [p.name for p in registry.panels()] == names


def test_accessors_return_immutable_sequences() -> None:
    registry = load(ROUTING_DOC + PIPELINE_DOC)

    assert isinstance(registry.panels(), tuple)
    assert isinstance(registry.steps(), tuple)
    with pytest.raises(AttributeError):
        registry.panels()[0].name = "Other"  # type: ignore[misc]


def test_repeated_reads_are_identical() -> None:
    registry = load(ROUTING_DOC)

    assert registry.panels() is registry.panels()
    assert registry.default_panel() is registry.default_panel()


def test_lookup_by_name() -> None:
    registry = load(ROUTING_DOC + PIPELINE_DOC)

    assert registry.panel("Dynamic Params").content == "Capture path segments as parameters."
    assert registry.step("Processing") == Step("Processing", "Do the work.", "purple")
    with pytest.raises(KeyError):
        registry.panel("Missing")
    with pytest.raises(KeyError):
        registry.step("Missing")


@parametrize(
    "text, empty",
    [
        ("", True),
        (PIPELINE_DOC, False),
        (ROUTING_DOC, False),
    ],
)
def test_is_empty(text: str, empty: bool) -> None:
    assert load(text).is_empty is empty


def test_step_without_color_is_accepted() -> None:
    registry = load(step_toml("Plain"))

    assert registry.steps() == (Step("Plain", "Body."),)
    assert registry.steps()[0].color is None


def test_load_from_path_records_source(write_doc: Callable[[str], Path]) -> None:
    path = write_doc(ROUTING_DOC)

    registry = load(path)

    assert registry.source == str(path)
    assert registry.panel_names() == ("Routing", "Dynamic Params")


def test_load_from_mapping() -> None:
    registry = load(
        {
            "panels": [{"name": "A", "content": "x", "checked": True}],
            "steps": ({"name": "S", "content": "y"},),
        }
    )

    assert registry.source == "<mapping>"
    assert registry.default_panel() == Panel("A", "x", checked=True)
    assert registry.step_names() == ("S",)


def test_load_rejects_unsupported_source() -> None:
    with pytest.raises(TypeError, match="Unsupported content source"):
        load(42)  # type: ignore[arg-type]


def test_registry_equality_is_by_value() -> None:
    assert load(ROUTING_DOC) == load(ROUTING_DOC)
    assert load(ROUTING_DOC) != load(panel_toml("Routing"))


def test_to_toml_dict_omits_empty_collections_and_defaults() -> None:
    registry = load(panel_toml("A", checked=False) + step_toml("S"))

    assert registry.to_toml_dict() == {
        "panels": [{"name": "A", "content": "Body."}],
        "steps": [{"name": "S", "content": "Body."}],
    }
    assert ContentRegistry(source="<string>").to_toml_dict() == {}
