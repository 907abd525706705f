"""
gridpaint: paint character art in the terminal

A fixed-size grid of characters painted with the mouse, plus a small
vim-style command line for saving, loading and picking the brush.

Quick Start:
    >>> import gridpaint as gp
    >>> canvas = gp.Canvas.create(80, 50)
    >>> canvas[5, 5] = "#"
    >>> gp.save(canvas, "drawing.txt")
    >>> gp.load("drawing.txt") == canvas
    True

Features:
    - Plain-text canvas files: a "<width> <height>" header, then one line per row
    - Mouse painting with click and drag
    - Commands: :q, :save <path>, :load <path>, :brush <char|\\uXXXX|u+XXXX>
"""

__version__ = "0.1.0"

# Core types
from gridpaint.core.canvas import Canvas
from gridpaint.core.errors import FormatError, GridPaintError, OutOfBoundsError

# Convenience functions
from gridpaint.io.reader import load
from gridpaint.io.writer import save

# Editor
from gridpaint.config import EditorConfig
from gridpaint.editor.state import EditorState, new_state

__all__ = [
    # Version
    "__version__",
    # Core types
    "Canvas",
    "GridPaintError",
    "FormatError",
    "OutOfBoundsError",
    # I/O
    "load",
    "save",
    # Editor
    "EditorConfig",
    "EditorState",
    "new_state",
]
