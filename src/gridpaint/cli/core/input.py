"""Keyboard and mouse input handling with event abstraction."""

from __future__ import annotations

import os
import re
import select
import sys
import time
from typing import Optional, Union

from gridpaint.editor.events import (
    Key,
    KeyEvent,
    MouseAction,
    MouseButton,
    MouseEvent,
)

InputEvent = Union[KeyEvent, MouseEvent]

# SGR mouse report body (after the leading ESC): [<button;col;row then M or m
MOUSE_REPORT = re.compile(r"\[<(\d+);(\d+);(\d+)([Mm])")
PARTIAL_MOUSE_REPORT = re.compile(r"\x1b(\[(<[\d;]*)?)?$")

MOUSE_MOTION_BIT = 32
MOUSE_WHEEL_BIT = 64

MOUSE_BUTTONS: dict[int, MouseButton] = {
    0: MouseButton.LEFT,
    1: MouseButton.MIDDLE,
    2: MouseButton.RIGHT,
    3: MouseButton.NONE,
}


def decode_mouse(code: int, col: int, row: int, final: str) -> MouseEvent:
    """
    Build a MouseEvent from the fields of an SGR report.

    Terminal coordinates are 1-based; events use 0-based cells. Wheel
    reports count as presses with no button.
    """
    if code & MOUSE_WHEEL_BIT:
        button = MouseButton.NONE
    else:
        button = MOUSE_BUTTONS[code & 0b11]

    if final == 'm':
        action = MouseAction.RELEASE
    elif code & MOUSE_MOTION_BIT:
        action = MouseAction.MOTION
    else:
        action = MouseAction.PRESS

    return MouseEvent(x=col - 1, y=row - 1, action=action, button=button)


class InputReader:
    """
    Non-blocking keyboard and mouse input reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
        '[2~': Key.INSERT,
        '[3~': Key.DELETE,
        # Function keys
        'OP': Key.F1,
        'OQ': Key.F2,
        'OR': Key.F3,
        'OS': Key.F4,
        '[15~': Key.F5,
        '[21~': Key.F10,
        '[24~': Key.F12,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
        '\x03': Key.CTRL_C,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def feed(self, data: str) -> None:
        """Append raw terminal input to the pending buffer."""
        self._buffer += data

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        """
        Read a single input event.

        Returns None if no input available within timeout.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        # Read all available input using os.read to bypass Python buffering
        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def read_all(self, timeout: float = 0.1) -> list[InputEvent]:
        """Wait up to ``timeout`` for input, then return every event decoded from it."""
        events: list[InputEvent] = []
        event = self.read(timeout)
        if event is not None:
            events.append(event)
        while self._buffer:
            event = self._process_buffer()
            if event is not None:
                events.append(event)
        return events

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        try:
            # Read up to 1024 bytes at once - gets everything available
            data = os.read(self._fd, 1024)
            self._buffer += data.decode('utf-8', errors='replace')
        except (OSError, BlockingIOError):
            pass

        # A bare escape or a cut-off mouse report may still be arriving
        if PARTIAL_MOUSE_REPORT.search(self._buffer):
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + 0.1  # 100ms total wait

        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            wait_time = min(remaining, 0.025)  # 25ms intervals

            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                try:
                    data = os.read(self._fd, 1024)
                    self._buffer += data.decode('utf-8', errors='replace')
                except (OSError, BlockingIOError):
                    pass

                if not PARTIAL_MOUSE_REPORT.search(self._buffer):
                    return

    def _process_buffer(self) -> Optional[InputEvent]:
        """Process buffered input and return next input event."""
        if not self._buffer:
            return None

        # Simple keys
        if self._buffer[0] in self.SIMPLE_KEYS:
            key = self.SIMPLE_KEYS[self._buffer[0]]
            raw = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(key=key, raw=raw)

        # Escape sequence
        if self._buffer[0] == '\x1b':
            return self._parse_escape_sequence()

        # Printable character
        if self._buffer[0].isprintable():
            ch = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> InputEvent:
        """Parse an escape sequence from the buffer."""
        # Buffer starts with \x1b
        if len(self._buffer) == 1:
            # Just escape, no sequence
            self._buffer = ""
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        rest = self._buffer[1:]

        match = MOUSE_REPORT.match(rest)
        if match:
            self._buffer = rest[match.end():]
            code, col, row, final = match.groups()
            return decode_mouse(int(code), int(col), int(row), final)

        # Find where this sequence ends; SS3 is always 'O' plus one character
        if rest.startswith('O') and len(rest) > 1:
            end_idx = 2
        else:
            end_idx = self._sequence_end(rest)

        if end_idx == 0:
            # Escape immediately followed by another escape
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        raw = '\x1b' + seq
        self._buffer = self._buffer[1 + end_idx:]
        return KeyEvent(key=self.SEQUENCES.get(seq), raw=raw)

    @staticmethod
    def _sequence_end(rest: str) -> int:
        """Length of the CSI sequence at the start of ``rest`` (after ESC)."""
        end_idx = 0
        for i, ch in enumerate(rest):
            if ch == '\x1b':
                # Start of next escape sequence
                return i
            if ch.isalpha() or ch == '~':
                # End of this sequence
                return i + 1
            end_idx = i + 1
        return end_idx

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
