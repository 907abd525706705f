"""Renderers for outputting a canvas."""

from gridpaint.render.text import TextRenderer

__all__ = ["TextRenderer"]
