"""Terminal display for Micemen."""

from .base import Renderer
from .terminal import TerminalRenderer

__all__ = ["Renderer", "TerminalRenderer"]
