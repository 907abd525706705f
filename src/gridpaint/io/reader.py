"""Load canvas files."""

from pathlib import Path

from gridpaint.core.canvas import Canvas
from gridpaint.core.constants import FILE_ENCODING, LINE_END
from gridpaint.core.errors import FormatError
from gridpaint.io.codec import decode


def load(path: str | Path) -> Canvas:
    """
    Load a canvas file from disk.

    Raises:
        OSError: The file cannot be opened or read.
        FormatError: The contents are not a valid canvas file.
    """
    path = Path(path).expanduser()

    # only "\n" terminates a line; "\r" is cell content
    with open(path, "r", encoding=FILE_ENCODING, newline=LINE_END) as f:
        try:
            return decode(f)
        except UnicodeDecodeError as e:
            raise FormatError(f"{path} is not valid {FILE_ENCODING}: {e}") from e
