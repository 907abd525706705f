"""Events consumed by the editor state machine.

Input events (keys and mouse reports) come from the terminal; result
events are produced by running a typed command and are fed back into the
same queue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from gridpaint.core.canvas import Canvas


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    CTRL_C = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F10 = auto()
    F12 = auto()


KEY_NAMES: dict[Key, str] = {
    Key.ENTER: "enter",
    Key.ESCAPE: "esc",
    Key.BACKSPACE: "backspace",
    Key.CTRL_C: "ctrl+c",
    Key.PAGE_UP: "pgup",
    Key.PAGE_DOWN: "pgdown",
}


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None

    @property
    def name(self) -> str:
        """Textual form of the key: the character itself, or e.g. ``"enter"``."""
        if self.key is not None:
            return KEY_NAMES.get(self.key, self.key.name.lower())
        return self.char or ""


class MouseAction(Enum):
    PRESS = auto()
    RELEASE = auto()
    MOTION = auto()


class MouseButton(Enum):
    NONE = auto()
    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class MouseEvent:
    """A mouse report with 0-based cell coordinates."""
    x: int
    y: int
    action: MouseAction
    button: MouseButton = MouseButton.NONE


@dataclass(frozen=True)
class Quit:
    """Leave the editor."""


@dataclass(frozen=True)
class CanvasLoaded:
    """A canvas was read from disk and should replace the current one."""
    canvas: Canvas

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height


@dataclass(frozen=True)
class BrushChanged:
    brush: str


@dataclass(frozen=True)
class NoOp:
    """The command ran (or failed) without changing editor state."""


ResultEvent = Union[Quit, CanvasLoaded, BrushChanged, NoOp]
InputEvent = Union[KeyEvent, MouseEvent]
Event = Union[InputEvent, ResultEvent]
