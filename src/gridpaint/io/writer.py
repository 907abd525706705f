"""Save canvas files."""

from pathlib import Path

from gridpaint.core.canvas import Canvas
from gridpaint.core.constants import FILE_ENCODING, LINE_END
from gridpaint.io.codec import encode, write_header


def save(canvas: Canvas, path: str | Path) -> None:
    """
    Save a canvas to disk, replacing any existing file.

    A failure part-way through leaves a partially written file behind.
    """
    path = Path(path).expanduser()

    with open(path, "w", encoding=FILE_ENCODING, newline=LINE_END) as f:
        write_header(canvas, f)
        encode(canvas, f)
