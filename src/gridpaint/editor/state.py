"""Editor state record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from gridpaint.config import EditorConfig
from gridpaint.core.canvas import Canvas
from gridpaint.core.constants import DEFAULT_BRUSH, DEFAULT_HEIGHT, DEFAULT_WIDTH


class Mode(Enum):
    PAINTING = auto()
    COMMAND_ENTRY = auto()


@dataclass
class CommandLine:
    """The ``:`` command line and the text typed into it so far."""
    active: bool = False
    buffer: str = ""

    def open(self) -> None:
        self.active = True
        self.buffer = ""

    def close(self) -> str:
        """Deactivate and return whatever had been typed."""
        text = self.buffer
        self.active = False
        self.buffer = ""
        return text

    def append(self, text: str) -> None:
        self.buffer += text

    def erase(self) -> None:
        """Drop the last character; does nothing on an empty buffer."""
        self.buffer = self.buffer[:-1]


@dataclass
class EditorState:
    """
    Everything the editor knows: canvas, brush and command line.

    There is one instance per editor run. Only ``machine.update`` changes
    it; renderers just read it.
    """
    canvas: Canvas = field(
        default_factory=lambda: Canvas.create(DEFAULT_WIDTH, DEFAULT_HEIGHT)
    )
    brush: str = DEFAULT_BRUSH
    command: CommandLine = field(default_factory=CommandLine)
    running: bool = True

    @property
    def mode(self) -> Mode:
        return Mode.COMMAND_ENTRY if self.command.active else Mode.PAINTING

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height


def new_state(config: EditorConfig | None = None) -> EditorState:
    """Initial state: Painting, blank canvas, default brush."""
    config = config or EditorConfig()
    return EditorState(
        canvas=Canvas.create(config.width, config.height),
        brush=config.brush,
    )
