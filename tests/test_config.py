"""Tests for editor configuration and logging setup."""

import logging
from pathlib import Path

import pytest

from gridpaint.config import EditorConfig
from gridpaint.core.errors import ConfigError
from gridpaint.logging_utils import setup_logging


class TestEditorConfig:
    """Tests for EditorConfig."""

    def test_defaults(self) -> None:
        config = EditorConfig()
        assert (config.width, config.height, config.brush) == (80, 50, "#")
        assert config.log_path.name == "gridpaint.log"
        assert config.level == logging.INFO

    def test_from_env(self, tmp_path: Path) -> None:
        config = EditorConfig.from_env({
            "GRIDPAINT_LOG_FILE": str(tmp_path / "edit.log"),
            "GRIDPAINT_LOG_LEVEL": "debug",
        })
        assert config.log_path == tmp_path / "edit.log"
        assert config.level == logging.DEBUG

    def test_from_env_empty(self) -> None:
        assert EditorConfig.from_env({}) == EditorConfig()

    def test_override_skips_none(self) -> None:
        config = EditorConfig().override(width=10, height=None, brush="*")
        assert (config.width, config.height, config.brush) == (10, 50, "*")

    @pytest.mark.parametrize("changes", [
        {"width": 0},
        {"height": -5},
        {"brush": ""},
        {"brush": "ab"},
        {"log_level": "chatty"},
    ])
    def test_invalid(self, changes: dict) -> None:
        with pytest.raises(ConfigError):
            EditorConfig(**changes)


class TestLogging:
    """Tests for log-file redirection."""

    def test_setup_logging_writes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "logs" / "gridpaint.log"
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            assert setup_logging(path, logging.DEBUG) == path
            logging.getLogger("gridpaint.test").debug("hello log")
            for handler in root.handlers:
                handler.flush()
            assert "hello log" in path.read_text(encoding="utf-8")
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])
