"""Text codec for the canvas file format.

A canvas file is a header line followed by one line per row::

    <width> <height>
    <row 0, exactly width characters>
    ...
    <row height-1>

Every line ends with a single newline. One decoded character is one cell,
whatever its display width.
"""

from __future__ import annotations

import re
from typing import TextIO

from gridpaint.core.canvas import Canvas
from gridpaint.core.constants import LINE_END
from gridpaint.core.errors import FormatError

# two base-10 integers separated by a single space
_HEADER = re.compile(r"([0-9]+) ([0-9]+)")


def _parse_header(line: str) -> tuple[int, int]:
    if not line.endswith(LINE_END):
        raise FormatError("missing header line")

    match = _HEADER.fullmatch(line.rstrip(" " + LINE_END))
    if match is None:
        raise FormatError(f"header must be '<width> <height>', got {line!r}")

    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        raise FormatError(f"canvas size must be positive, got {width}x{height}")
    return width, height


def decode(stream: TextIO) -> Canvas:
    """
    Read a canvas (header and body) from a text stream.

    Each row is read one character at a time up to ``width`` characters,
    then everything up to and including the next newline is consumed.
    Characters past ``width`` on a line are dropped, not rejected.

    Raises:
        FormatError: The header is malformed, a row is short, or a line
            terminator is missing.
    """
    width, height = _parse_header(stream.readline())

    rows: list[str] = []
    for y in range(height):
        row: list[str] = []
        for x in range(width):
            ch = stream.read(1)
            if not ch:
                raise FormatError(f"unexpected end of data in row {y} at column {x}")
            if ch == LINE_END:
                raise FormatError(f"row {y} has {x} cells, expected {width}")
            row.append(ch)

        if not stream.readline().endswith(LINE_END):
            raise FormatError(f"missing line terminator after row {y}")
        rows.append("".join(row))

    return Canvas.from_rows(rows)


def write_header(canvas: Canvas, stream: TextIO) -> None:
    """Write the ``"<width> <height>"`` header line."""
    stream.write(f"{canvas.width} {canvas.height}{LINE_END}")


def encode(canvas: Canvas, stream: TextIO) -> None:
    """
    Write the canvas body: one line of ``width`` cells per row.

    The header is not written; see ``write_header``. Write failures from
    the stream propagate as ``OSError``.
    """
    for row in canvas.rows():
        stream.write("".join(row))
        stream.write(LINE_END)
