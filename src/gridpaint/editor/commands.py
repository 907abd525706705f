"""Command interpreter for the ``:`` command line.

Commands take the form ``<verb>`` or ``<verb> <argument>``; the first
space separates the two and the argument may itself contain spaces::

    q, quit             leave the editor
    s, save <path>      write the canvas to a file
    l, load <path>      replace the canvas with a file's contents
    b, brush <char>     change the brush; also accepts \\uXXXX and u+XXXX
"""

from __future__ import annotations

import logging
import re
import unicodedata
from pathlib import Path
from typing import Callable, Optional

from gridpaint.core.canvas import Canvas
from gridpaint.core.errors import FormatError
from gridpaint.editor.events import BrushChanged, CanvasLoaded, NoOp, Quit, ResultEvent
from gridpaint.io.reader import load
from gridpaint.io.writer import save

logger = logging.getLogger(__name__)

CODE_POINT_PREFIXES = ("\\u", "u+")
_HEX = re.compile(r"[0-9a-f]+")
# control characters and surrogates
UNPAINTABLE = ("Cc", "Cs")

Handler = Callable[[str, Canvas], ResultEvent]


def _strip_controls(text: str) -> str:
    start, end = 0, len(text)
    while start < end and unicodedata.category(text[start]) == "Cc":
        start += 1
    while end > start and unicodedata.category(text[end - 1]) == "Cc":
        end -= 1
    return text[start:end]


def parse_command(text: str) -> tuple[str, str]:
    """Split a command into ``(verb, argument)``; the argument may be empty."""
    verb, _, argument = text.partition(" ")
    return verb, argument


def parse_brush(argument: str) -> Optional[str]:
    """
    Decode a brush argument.

    ``\\u2588`` and ``u+2588`` (any case) name a code point in hex;
    anything else selects the first character of the lower-cased
    argument. Control characters and surrogates cannot be named this
    way. Returns None for an empty argument.
    """
    argument = argument.lower()
    if argument.startswith(CODE_POINT_PREFIXES) and _HEX.fullmatch(argument[2:]):
        code_point = int(argument[2:], 16)
        if code_point <= 0x10FFFF and unicodedata.category(chr(code_point)) not in UNPAINTABLE:
            return chr(code_point)
    return argument[:1] or None


def _quit(argument: str, canvas: Canvas) -> ResultEvent:
    return Quit()


def _save(argument: str, canvas: Canvas) -> ResultEvent:
    if not argument:
        logger.warning("save: missing path")
        return NoOp()

    path = Path(argument)
    try:
        save(canvas, path)
    except (OSError, UnicodeError) as e:
        logger.error("save to %s failed: %s", path, e)
        return NoOp()

    logger.info("saved %dx%d canvas to %s", canvas.width, canvas.height, path)
    return NoOp()


def _load(argument: str, canvas: Canvas) -> ResultEvent:
    if not argument:
        logger.warning("load: missing path")
        return NoOp()

    path = Path(argument)
    try:
        loaded = load(path)
    except (OSError, FormatError) as e:
        logger.error("load from %s failed: %s", path, e)
        return NoOp()

    logger.info("loaded %dx%d canvas from %s", loaded.width, loaded.height, path)
    return CanvasLoaded(loaded)


def _brush(argument: str, canvas: Canvas) -> ResultEvent:
    brush = parse_brush(argument)
    if brush is None:
        logger.warning("brush: missing character")
        return NoOp()
    return BrushChanged(brush)


COMMANDS: dict[str, Handler] = {
    "q": _quit,
    "quit": _quit,
    "s": _save,
    "save": _save,
    "l": _load,
    "load": _load,
    "b": _brush,
    "brush": _brush,
}


def interpret(command: str, canvas: Canvas) -> ResultEvent:
    """
    Run a typed command against ``canvas`` and report what happened.

    File errors are logged and turned into ``NoOp``; they never escape.
    """
    command = _strip_controls(command)
    if command in ("q", "quit"):
        return Quit()

    verb, argument = parse_command(command)
    handler = COMMANDS.get(verb)
    if handler is None:
        logger.warning("unknown command %r", command)
        return NoOp()
    return handler(argument, canvas)
