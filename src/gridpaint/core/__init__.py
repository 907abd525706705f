"""Core data structures for the drawing canvas."""

from gridpaint.core.canvas import Canvas
from gridpaint.core.errors import (
    ConfigError,
    FormatError,
    GridPaintError,
    OutOfBoundsError,
)

__all__ = [
    "Canvas",
    "GridPaintError",
    "FormatError",
    "OutOfBoundsError",
    "ConfigError",
]
