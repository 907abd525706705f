"""Render a canvas to plain text."""

from gridpaint.core.canvas import Canvas
from gridpaint.core.constants import LINE_END


class TextRenderer:
    """Render a Canvas to plain text, one line per row."""

    def render(self, canvas: Canvas) -> str:
        """Render canvas to text; every line, including the last, ends in a newline."""
        return "".join("".join(row) + LINE_END for row in canvas.rows())
