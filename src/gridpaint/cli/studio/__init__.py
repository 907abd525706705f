"""Interactive editor application."""

from gridpaint.cli.studio.editor import EditorApp, run_editor

__all__ = ["EditorApp", "run_editor"]
