"""Shared fixtures for gridpaint tests."""

from pathlib import Path

import pytest

from gridpaint.core.canvas import Canvas
from gridpaint.editor.loop import EventLoop
from gridpaint.editor.state import EditorState, new_state


@pytest.fixture
def small_canvas() -> Canvas:
    """A 4x3 canvas with a little content."""
    return Canvas.from_rows(["ab  ", " #  ", "   z"])


@pytest.fixture
def canvas_file(tmp_path: Path, small_canvas: Canvas) -> Path:
    """A valid canvas file holding ``small_canvas``."""
    path = tmp_path / "small.txt"
    path.write_text("4 3\nab  \n #  \n   z\n", encoding="utf-8")
    return path


@pytest.fixture
def state() -> EditorState:
    """Fresh editor state with startup defaults."""
    return new_state()


@pytest.fixture
def loop(state: EditorState) -> EventLoop:
    return EventLoop(state)
