"""Canvas - fixed-size 2D grid of character cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from gridpaint.core.constants import BLANK
from gridpaint.core.errors import OutOfBoundsError


@dataclass
class Canvas:
    """
    A width x height grid of single-character cells.

    Row index is y (0 at the top), column index is x (0 at the left).
    Every row always holds exactly ``width`` cells and there are always
    exactly ``height`` rows; the canvas never grows or shrinks.
    """
    width: int
    height: int
    _buffer: list[list[str]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Fill an empty buffer with blank cells."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"canvas size must be positive, got {self.width}x{self.height}"
            )
        if not self._buffer:
            self._buffer = [[BLANK] * self.width for _ in range(self.height)]

    @classmethod
    def create(cls, width: int, height: int) -> Canvas:
        """Create a blank canvas with every cell set to a space."""
        return cls(width, height)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Canvas:
        """Build a canvas from equal-length strings, one per row."""
        buffer = [list(row) for row in rows]
        if not buffer or not buffer[0]:
            raise ValueError("canvas needs at least one non-empty row")
        width = len(buffer[0])
        for y, row in enumerate(buffer):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
        return cls(width, len(buffer), buffer)

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the canvas."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) out of bounds (size={self.width}x{self.height})"
            )

    def get(self, x: int, y: int) -> str:
        """Get the cell at position (x, y)."""
        self._check(x, y)
        return self._buffer[y][x]

    def set(self, x: int, y: int, value: str) -> None:
        """Set the cell at position (x, y)."""
        self._check(x, y)
        if len(value) != 1:
            raise ValueError(f"cell value must be one character, got {value!r}")
        self._buffer[y][x] = value

    def __getitem__(self, pos: tuple[int, int]) -> str:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], value: str) -> None:
        """Set cell using indexing: canvas[x, y] = value."""
        x, y = pos
        self.set(x, y, value)

    def rows(self) -> Iterator[list[str]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Iterate over all cells as (x, y, value) tuples."""
        for y, row in enumerate(self._buffer):
            for x, value in enumerate(row):
                yield x, y, value

    def copy(self) -> Canvas:
        """Create an independent copy of this canvas."""
        return Canvas(self.width, self.height, [row[:] for row in self._buffer])

    def painted(self) -> int:
        """Count cells that differ from a blank space."""
        return sum(1 for _, _, value in self.cells() if value != BLANK)
