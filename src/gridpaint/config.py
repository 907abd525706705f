"""Editor configuration."""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from gridpaint.core.constants import (
    DEFAULT_BRUSH,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    LOG_FILE_NAME,
)
from gridpaint.core.errors import ConfigError

ENV_LOG_FILE = "GRIDPAINT_LOG_FILE"
ENV_LOG_LEVEL = "GRIDPAINT_LOG_LEVEL"


def default_log_path() -> Path:
    return Path(tempfile.gettempdir()) / LOG_FILE_NAME


@dataclass(frozen=True)
class EditorConfig:
    """
    Startup settings for an editor session.

    Values come from the defaults below, then the environment
    (``GRIDPAINT_LOG_FILE``, ``GRIDPAINT_LOG_LEVEL``), then CLI options.
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    brush: str = DEFAULT_BRUSH
    log_path: Path = field(default_factory=default_log_path)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(
                f"canvas size must be positive, got {self.width}x{self.height}"
            )
        if len(self.brush) != 1:
            raise ConfigError(f"brush must be a single character, got {self.brush!r}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"unknown log level {self.log_level!r}")

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EditorConfig:
        """Build a config from environment variables, defaulting the rest."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if log_file := env.get(ENV_LOG_FILE):
            values["log_path"] = Path(log_file).expanduser()
        if log_level := env.get(ENV_LOG_LEVEL):
            values["log_level"] = log_level
        return cls(**values)

    def override(self, **changes: Any) -> EditorConfig:
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
