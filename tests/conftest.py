"""Pytest fixtures for Tessera tests."""

import io
import logging
from collections.abc import Callable

import pytest
from rich.console import Console
from rich.text import Text

from tessera.foundation.config import reset_config
from tessera.progress import ProgressBarCell, ProgressBarDefinition, ProgressState
from tessera.rendering import FLEXIBLE, ColumnWidth, TextAlign


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep real config files and TESSERA_* variables out of every test."""
    import os

    for key in list(os.environ):
        if key.startswith("TESSERA_"):
            monkeypatch.delenv(key)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """configure_logging() replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _text_cell(
    attr: str = "context",
    width: ColumnWidth = FLEXIBLE,
    align: TextAlign = TextAlign.RIGHT,
) -> ProgressBarCell[str]:
    """A cell rendering one state attribute as plain Text."""
    return ProgressBarCell(
        content=lambda state: Text(str(getattr(state, attr))),
        column_width=width,
        align=align,
    )


@pytest.fixture
def make_cell() -> Callable[..., ProgressBarCell[str]]:
    return _text_cell


@pytest.fixture
def three_cell_definition() -> ProgressBarDefinition[str]:
    """spinner / bar / percent stand-ins rendering plain Text."""
    return ProgressBarDefinition(
        cells=[
            ProgressBarCell(content=lambda s: Text("*")),
            ProgressBarCell(content=lambda s: Text(f"[{s.context}]")),
            ProgressBarCell(content=lambda s: Text(f"{int(s.completed)}%")),
        ],
        spacing=1,
        align_columns=False,
    )


@pytest.fixture
def states() -> list[ProgressState[str]]:
    return [
        ProgressState("taskA", total=100, completed=10),
        ProgressState("taskB", total=100, completed=55),
        ProgressState("taskC", total=100, completed=100),
    ]


@pytest.fixture
def console() -> Console:
    """Plain, fixed-width console writing to a buffer."""
    return Console(
        file=io.StringIO(),
        width=60,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
    )


def _rendered_lines(console: Console, widget) -> list[str]:
    """Render ``widget`` and return its lines without trailing spaces."""
    with console.capture() as capture:
        console.print(widget)
    return [line.rstrip() for line in capture.get().splitlines()]


@pytest.fixture
def render(console: Console) -> Callable[..., list[str]]:
    """Render a widget on the test console and return its stripped lines."""
    return lambda widget: _rendered_lines(console, widget)
