"""Logging helpers.

The terminal belongs to the editor while it runs, so log records go to a
file instead of stderr.
"""
from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    path: Path,
    level: int = logging.INFO,
    *,
    force: bool = True,
) -> Path:
    """Send root logger output to ``path`` (appending) and return the path."""

    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(path),
        filemode="a",
        encoding="utf-8",
        level=level,
        format=LOG_FORMAT,
        force=force,
    )
    return path


__all__ = ["setup_logging", "LOG_FORMAT"]
