"""Editor state machine.

``update`` takes one event and applies it to the state. Most events
mutate the state directly. Confirming a command instead returns a
``Task``, which the caller runs and whose result event goes back on the
event queue.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridpaint.core.canvas import Canvas
from gridpaint.core.constants import COMMAND_CURSOR, COMMAND_TRIGGER, LINE_END
from gridpaint.editor.commands import interpret
from gridpaint.editor.events import (
    BrushChanged,
    CanvasLoaded,
    Event,
    Key,
    KeyEvent,
    MouseAction,
    MouseButton,
    MouseEvent,
    NoOp,
    Quit,
    ResultEvent,
)
from gridpaint.editor.state import EditorState, Mode
from gridpaint.render.text import TextRenderer

logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", "ctrl+c")


@dataclass(frozen=True)
class Task:
    """A typed command waiting to run against a snapshot of the canvas."""
    command: str
    canvas: Canvas

    def run(self) -> ResultEvent:
        return interpret(self.command, self.canvas)


def _handle_result(state: EditorState, event: ResultEvent) -> None:
    if isinstance(event, Quit):
        state.running = False
    elif isinstance(event, CanvasLoaded):
        state.canvas = event.canvas
    elif isinstance(event, BrushChanged):
        state.brush = event.brush


def _handle_mouse(state: EditorState, event: MouseEvent) -> None:
    if event.action == MouseAction.PRESS:
        paint = True
    elif event.action == MouseAction.MOTION:
        paint = event.button == MouseButton.LEFT
    else:
        paint = False

    if paint and state.canvas.contains(event.x, event.y):
        state.canvas.set(event.x, event.y, state.brush)


def _handle_command_key(state: EditorState, event: KeyEvent) -> Task | None:
    if event.key == Key.ENTER:
        command = state.command.close()
        return Task(command, state.canvas.copy())
    if event.key in (Key.CTRL_C, Key.ESCAPE):
        state.command.close()
    elif event.key == Key.BACKSPACE:
        state.command.erase()
    elif event.is_char:
        state.command.append(event.char)
    return None


def _handle_paint_key(state: EditorState, event: KeyEvent) -> None:
    name = event.name
    if name == COMMAND_TRIGGER:
        state.command.open()
    elif name in QUIT_KEYS:
        state.running = False
    elif name:
        state.brush = name[0]


def update(state: EditorState, event: Event) -> Task | None:
    """
    Apply one event to ``state``.

    Returns a ``Task`` when a command was confirmed, otherwise None.
    Events arriving after the editor stopped are ignored.
    """
    logger.debug("event %r mode=%s", event, state.mode.name)
    if not state.running:
        return None

    if isinstance(event, (Quit, CanvasLoaded, BrushChanged, NoOp)):
        _handle_result(state, event)
    elif isinstance(event, MouseEvent):
        _handle_mouse(state, event)
    elif isinstance(event, KeyEvent):
        if state.mode == Mode.COMMAND_ENTRY:
            return _handle_command_key(state, event)
        _handle_paint_key(state, event)
    else:
        raise TypeError(f"unsupported event {event!r}")
    return None


def view(state: EditorState) -> str:
    """Render the canvas, plus the command line while one is being typed."""
    text = TextRenderer().render(state.canvas)
    if state.mode == Mode.COMMAND_ENTRY:
        text += f"{COMMAND_TRIGGER}{state.command.buffer}{COMMAND_CURSOR}{LINE_END}"
    return text
