"""File I/O for canvas files."""

from gridpaint.io.codec import decode, encode, write_header
from gridpaint.io.reader import load
from gridpaint.io.writer import save

__all__ = ["decode", "encode", "write_header", "load", "save"]
