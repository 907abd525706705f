"""Interactive drawing editor application.

This module wires the terminal to the editor core:
- InputReader: raw key presses and mouse reports from stdin
- EventLoop: queues those events and runs them through the state machine
- view(): renders the current state, redrawn after every change

Controls:
    Mouse:
        Click: Paint the brush at the clicked cell
        Left-drag: Paint continuously
    Painting mode:
        Any character: Use that character as the brush
        q / Ctrl+C: Quit
        ':': Open the command line
    Command line:
        Enter: Run the command
        Backspace: Delete the last character
        Ctrl+C / Esc: Cancel

Commands:
    :q, :quit
    :s, :save <path>
    :l, :load <path>
    :b, :brush <char | \\uXXXX | u+XXXX>
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from gridpaint.cli.core.input import InputReader
from gridpaint.cli.core.terminal import Terminal
from gridpaint.config import EditorConfig
from gridpaint.core.constants import CSI, LINE_END
from gridpaint.editor.events import Event
from gridpaint.editor.loop import EventLoop
from gridpaint.editor.machine import Task, view
from gridpaint.editor.state import new_state

logger = logging.getLogger(__name__)


class EditorApp:
    """Terminal front end for one editing session."""

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        path: Optional[Path] = None,
        input_reader: Optional[InputReader] = None,
    ) -> None:
        """Initialize the editor.

        Args:
            config: Startup settings; defaults when omitted
            path: Optional canvas file to load on startup
            input_reader: Source of input events (stdin when omitted)
        """
        self.config = config or EditorConfig()
        self.loop = EventLoop(new_state(self.config))
        self._input = input_reader
        self._needs_redraw = True

        if path is not None:
            # Goes through the same command as ":load" so failures are handled alike
            self.loop.run_task(Task(f"load {path}", self.loop.state.canvas))
            self.loop.process()

    @property
    def input(self) -> InputReader:
        if self._input is None:
            self._input = InputReader()
        return self._input

    def handle(self, events: list[Event]) -> None:
        """Queue events and process them, marking the screen dirty if anything ran."""
        self.loop.post_all(events)
        if self.loop.process():
            self._needs_redraw = True

    def run(self) -> None:
        """Run the editor main loop."""
        logger.info(
            "starting editor %dx%d brush=%r",
            self.loop.state.width,
            self.loop.state.height,
            self.loop.state.brush,
        )

        with Terminal.managed_mode():
            Terminal.clear()

            while self.loop.running:
                if self._needs_redraw:
                    self._render()
                    self._needs_redraw = False

                self.handle(self.input.read_all(timeout=0.1))

        logger.info("editor stopped")

    def _render(self) -> None:
        """Draw the whole view in one write to minimize flicker."""
        lines = view(self.loop.state).split(LINE_END)
        # Raw mode has no output post-processing, so each line needs "\r\n"
        Terminal.move_to(1, 1)
        sys.stdout.write(f"{CSI}J")
        sys.stdout.write("\r\n".join(lines))
        sys.stdout.flush()


def run_editor(config: Optional[EditorConfig] = None, path: Optional[Path] = None) -> None:
    """Launch the editor application.

    Args:
        config: Startup settings
        path: Optional canvas file to open
    """
    app = EditorApp(config, path)
    app.run()
