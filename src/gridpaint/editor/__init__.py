"""Editor core: state record, event types, command interpreter and event loop."""

from gridpaint.editor.commands import interpret, parse_brush, parse_command
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
from gridpaint.editor.loop import EventLoop
from gridpaint.editor.machine import Task, update, view
from gridpaint.editor.state import CommandLine, EditorState, Mode, new_state

__all__ = [
    "interpret",
    "parse_brush",
    "parse_command",
    "BrushChanged",
    "CanvasLoaded",
    "Event",
    "Key",
    "KeyEvent",
    "MouseAction",
    "MouseButton",
    "MouseEvent",
    "NoOp",
    "Quit",
    "ResultEvent",
    "EventLoop",
    "Task",
    "update",
    "view",
    "CommandLine",
    "EditorState",
    "Mode",
    "new_state",
]
