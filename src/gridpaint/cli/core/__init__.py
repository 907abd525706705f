"""Core TUI infrastructure - terminal I/O and input handling."""

from gridpaint.cli.core.terminal import Terminal
from gridpaint.cli.core.input import InputReader, decode_mouse

__all__ = [
    "Terminal",
    "InputReader",
    "decode_mouse",
]
