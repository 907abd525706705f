"""Low-level terminal operations - platform-independent abstraction."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator

from gridpaint.core.constants import CSI, RESET

# Report presses, releases and all motion (1003) in SGR encoding (1006)
MOUSE_ON = f"{CSI}?1003h{CSI}?1006h"
MOUSE_OFF = f"{CSI}?1006l{CSI}?1003l"


class Terminal:
    """Terminal I/O abstraction for TUI applications."""

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        sys.stdout.write(f'{CSI}2J{CSI}H')
        sys.stdout.flush()

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        sys.stdout.write(RESET)
        sys.stdout.flush()

    @staticmethod
    def hide_cursor() -> None:
        """Hide the cursor."""
        sys.stdout.write(f'{CSI}?25l')
        sys.stdout.flush()

    @staticmethod
    def show_cursor() -> None:
        """Show the cursor."""
        sys.stdout.write(f'{CSI}?25h')
        sys.stdout.flush()

    @staticmethod
    def move_to(row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        sys.stdout.write(f'{CSI}{row};{col}H')
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        sys.stdout.write(f'{CSI}?1049h')
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write(f'{CSI}?1049l')
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def mouse_tracking() -> Iterator[None]:
        """Ask the terminal to report mouse presses, releases and motion."""
        sys.stdout.write(MOUSE_ON)
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write(MOUSE_OFF)
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def managed_mode(mouse: bool = True) -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input, mouse."""
        with Terminal.alternate_screen():
            Terminal.hide_cursor()
            try:
                with Terminal.raw_mode():
                    if mouse:
                        with Terminal.mouse_tracking():
                            yield
                    else:
                        yield
            finally:
                Terminal.show_cursor()
                Terminal.reset()
