"""Tests for the canvas file codec and path helpers."""

import io
from pathlib import Path

import pytest

from gridpaint.core.canvas import Canvas
from gridpaint.core.errors import FormatError
from gridpaint.io.codec import decode, encode, write_header
from gridpaint.io.reader import load
from gridpaint.io.writer import save


def _dump(canvas: Canvas) -> str:
    out = io.StringIO()
    write_header(canvas, out)
    encode(canvas, out)
    return out.getvalue()


class TestEncode:
    """Tests for writing canvases."""

    def test_encode_body_only(self, small_canvas: Canvas) -> None:
        out = io.StringIO()
        encode(small_canvas, out)
        assert out.getvalue() == "ab  \n #  \n   z\n"

    def test_header(self, small_canvas: Canvas) -> None:
        out = io.StringIO()
        write_header(small_canvas, out)
        assert out.getvalue() == "4 3\n"

    def test_blank_canvas(self) -> None:
        out = io.StringIO()
        encode(Canvas.create(3, 2), out)
        assert out.getvalue() == "   \n   \n"

    def test_write_failure_propagates(self, small_canvas: Canvas) -> None:
        class BrokenStream(io.StringIO):
            def write(self, s: str) -> int:
                raise OSError("disk full")

        with pytest.raises(OSError):
            encode(small_canvas, BrokenStream())


class TestDecode:
    """Tests for reading canvases."""

    def test_decode(self, small_canvas: Canvas) -> None:
        canvas = decode(io.StringIO("4 3\nab  \n #  \n   z\n"))
        assert canvas.width == 4
        assert canvas.height == 3
        assert canvas == small_canvas

    def test_round_trip(self) -> None:
        canvas = Canvas.create(6, 4)
        for i, ch in enumerate("#@*░█é"):
            canvas[i, i % 4] = ch
        assert decode(io.StringIO(_dump(canvas))) == canvas

    def test_multibyte_counts_as_one_cell(self) -> None:
        canvas = decode(io.StringIO("3 1\n█▓░\n"))
        assert canvas[0, 0] == '█'
        assert canvas[2, 0] == '░'

    def test_header_trailing_spaces(self) -> None:
        canvas = decode(io.StringIO("2 1   \nab\n"))
        assert (canvas.width, canvas.height) == (2, 1)

    def test_long_row_extra_is_dropped(self) -> None:
        canvas = decode(io.StringIO("2 2\nabXYZ\ncd\n"))
        assert canvas == Canvas.from_rows(["ab", "cd"])

    @pytest.mark.parametrize("data", [
        "",
        "4 3",
        "4\n",
        "four three\n",
        "4 x\n",
        "0 3\n",
        "4 -1\n",
        "1_0 1\n",
        "2  1\n",
        "+5 1\n",
        " 2 1\n",
        "2 1x\n",
        "\u0663 1\n",
    ])
    def test_bad_header(self, data: str) -> None:
        with pytest.raises(FormatError):
            decode(io.StringIO(data))

    def test_short_row(self) -> None:
        rows = "".join("0123456789\n" for _ in range(10))
        rows = rows.replace("0123456789\n", "012345678\n", 1)
        with pytest.raises(FormatError):
            decode(io.StringIO("10 10\n" + rows))

    def test_truncated_body(self) -> None:
        with pytest.raises(FormatError):
            decode(io.StringIO("3 3\nabc\ndef\n"))

    def test_stream_ends_mid_row(self) -> None:
        with pytest.raises(FormatError):
            decode(io.StringIO("3 1\nab"))

    def test_missing_final_newline(self) -> None:
        with pytest.raises(FormatError):
            decode(io.StringIO("3 1\nabc"))


class TestFiles:
    """Tests for load/save on disk."""

    def test_save_writes_header_and_body(self, tmp_path: Path, small_canvas: Canvas) -> None:
        path = tmp_path / "out.txt"
        save(small_canvas, path)
        assert path.read_text(encoding="utf-8") == "4 3\nab  \n #  \n   z\n"

    def test_load(self, canvas_file: Path, small_canvas: Canvas) -> None:
        assert load(canvas_file) == small_canvas

    def test_save_replaces_longer_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.txt"
        save(Canvas.create(10, 10), path)
        save(Canvas.create(2, 1), path)
        assert path.read_text(encoding="utf-8") == "2 1\n  \n"

    def test_carriage_return_is_a_cell(self, tmp_path: Path) -> None:
        path = tmp_path / "cr.txt"
        path.write_bytes(b"2 1\n\ra\n")
        assert load(path)[0, 0] == '\r'

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load(tmp_path / "nope.txt")

    def test_load_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"2 1\n\xff\xfe\n")
        with pytest.raises(FormatError):
            load(path)
