# topmark:header:start
#
#   project      : Showcase
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Showcase test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides small document builders shared by the content and CLI
tests.

Notes:
    Tests should respect the mutable/immutable split: validation happens on a
    `showcase.content.MutableContent` builder, and `freeze()` returns the
    immutable `showcase.content.ContentRegistry` that readers use.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from showcase.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_showcase_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Showcase's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Document builders ------------------------------------------------------

ROUTING_DOC: str = """\
[[panels]]
name = "Routing"
checked = true
content = "Define routes with decorators."

[[panels]]
name = "Dynamic Params"
content = "Capture path segments as parameters."
"""

PIPELINE_DOC: str = """\
[[steps]]
name = "Validation"
color = "blue"
content = "Check the request."

[[steps]]
name = "Processing"
color = "purple"
content = "Do the work."

[[steps]]
name = "Response"
color = "red"
content = "Send the result."
"""


def panel_toml(name: str, content: str = "Body.", *, checked: bool | None = None) -> str:
    """Return one ``[[panels]]`` record as TOML text."""
    lines: list[str] = ["[[panels]]", f'name = "{name}"']
    if checked is not None:
        lines.append(f"checked = {'true' if checked else 'false'}")
    lines.append(f'content = "{content}"')
    return "\n".join(lines) + "\n\n"


def step_toml(name: str, content: str = "Body.", *, color: str | None = None) -> str:
    """Return one ``[[steps]]`` record as TOML text."""
    lines: list[str] = ["[[steps]]", f'name = "{name}"']
    if color is not None:
        lines.append(f'color = "{color}"')
    lines.append(f'content = "{content}"')
    return "\n".join(lines) + "\n\n"


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[[str], Path]:
    """Return a function that writes TOML text to a file under ``tmp_path``.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        Callable[[str], Path]: Writer returning the path of the new document.
    """
    counter: list[int] = [0]

    def _write(text: str) -> Path:
        counter[0] += 1
        path: Path = tmp_path / f"doc{counter[0]}.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
