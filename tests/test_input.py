"""Tests for decoding raw terminal input."""

import pytest

from gridpaint.cli.core.input import InputReader, decode_mouse
from gridpaint.editor.events import Key, KeyEvent, MouseAction, MouseButton, MouseEvent


@pytest.fixture
def reader() -> InputReader:
    # never touches a real fd; input is fed directly
    return InputReader(fd=-1)


def decode_all(reader: InputReader, data: str) -> list:
    reader.feed(data)
    return reader.read_all(timeout=0)


class TestKeys:
    """Tests for key decoding."""

    def test_printable(self, reader: InputReader) -> None:
        events = decode_all(reader, "a:")
        assert events == [KeyEvent(char="a", raw="a"), KeyEvent(char=":", raw=":")]

    def test_unicode_character(self, reader: InputReader) -> None:
        assert decode_all(reader, "█") == [KeyEvent(char="█", raw="█")]

    @pytest.mark.parametrize("raw, key", [
        ("\r", Key.ENTER),
        ("\n", Key.ENTER),
        ("\x7f", Key.BACKSPACE),
        ("\x08", Key.BACKSPACE),
        ("\x03", Key.CTRL_C),
        ("\x1b", Key.ESCAPE),
        ("\x1b[A", Key.UP),
        ("\x1bOD", Key.LEFT),
        ("\x1b[3~", Key.DELETE),
    ])
    def test_named_keys(self, reader: InputReader, raw: str, key: Key) -> None:
        [event] = decode_all(reader, raw)
        assert event.key == key

    def test_unknown_sequence(self, reader: InputReader) -> None:
        [event] = decode_all(reader, "\x1b[99~")
        assert event.key is None
        assert event.char is None
        assert event.name == ""

    def test_unknown_control_skipped(self, reader: InputReader) -> None:
        assert decode_all(reader, "\x01x") == [KeyEvent(char="x", raw="x")]

    def test_key_names(self) -> None:
        assert KeyEvent(key=Key.CTRL_C).name == "ctrl+c"
        assert KeyEvent(key=Key.ENTER).name == "enter"
        assert KeyEvent(key=Key.UP).name == "up"
        assert KeyEvent(char="x").name == "x"


class TestMouse:
    """Tests for SGR mouse report decoding."""

    def test_left_press(self, reader: InputReader) -> None:
        [event] = decode_all(reader, "\x1b[<0;6;6M")
        assert event == MouseEvent(5, 5, MouseAction.PRESS, MouseButton.LEFT)

    def test_release(self, reader: InputReader) -> None:
        [event] = decode_all(reader, "\x1b[<0;1;1m")
        assert event.action == MouseAction.RELEASE

    def test_left_drag(self, reader: InputReader) -> None:
        [event] = decode_all(reader, "\x1b[<32;10;3M")
        assert event == MouseEvent(9, 2, MouseAction.MOTION, MouseButton.LEFT)

    def test_hover(self) -> None:
        event = decode_mouse(35, 1, 1, "M")
        assert event.action == MouseAction.MOTION
        assert event.button == MouseButton.NONE

    def test_right_press(self) -> None:
        assert decode_mouse(2, 1, 1, "M").button == MouseButton.RIGHT

    def test_wheel(self) -> None:
        event = decode_mouse(64, 4, 4, "M")
        assert event == MouseEvent(3, 3, MouseAction.PRESS, MouseButton.NONE)

    def test_mixed_stream(self, reader: InputReader) -> None:
        events = decode_all(reader, "\x1b[<0;2;2M\x1b[<32;3;2Mx\x1b[<0;3;2m")
        assert [type(e) for e in events] == [MouseEvent, MouseEvent, KeyEvent, MouseEvent]
        assert events[1] == MouseEvent(2, 1, MouseAction.MOTION, MouseButton.LEFT)
        assert events[2].char == "x"
