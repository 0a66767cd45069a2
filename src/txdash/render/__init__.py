"""Rendering layer for txdash."""

from txdash.render.base import Renderer
from txdash.render.console import ConsoleRenderer
from txdash.render.frame import FrameRenderer

__all__ = ["Renderer", "ConsoleRenderer", "FrameRenderer"]
