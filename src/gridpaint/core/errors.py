"""Exception types raised by gridpaint."""


class GridPaintError(Exception):
    """Base class for all gridpaint errors."""


class FormatError(GridPaintError, ValueError):
    """Persisted canvas data is malformed or truncated."""


class OutOfBoundsError(GridPaintError, IndexError):
    """A cell access fell outside the canvas.

    Callers are expected to bounds-check before touching a cell, so this
    always indicates a bug rather than bad user input.
    """


class ConfigError(GridPaintError, ValueError):
    """A configuration value could not be used."""
