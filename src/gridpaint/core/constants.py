"""Shared constants for the editor and the canvas file format."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Startup defaults
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 50
DEFAULT_BRUSH = "#"
BLANK = " "

# Canvas file format
LINE_END = "\n"
FILE_ENCODING = "utf-8"

# Command line
COMMAND_TRIGGER = ":"
COMMAND_CURSOR = "█"  # full block
LOG_FILE_NAME = "gridpaint.log"
