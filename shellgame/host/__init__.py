"""
Host collaborators - Input, rendering and ticks around the engine.

The engine never draws, reads pointers or keeps time itself. These thin
pieces do it for the CLI and for any other host.
"""

from .input import PointerInput, hit_test, SHELL_SIZE
from .render import FrameRenderer, TextRenderer, status_lines
from .schemas import CircleCommand, Frame, RectCommand, TextCommand
from .ticks import TickSource, advance

__all__ = [
    "PointerInput",
    "hit_test",
    "SHELL_SIZE",
    "FrameRenderer",
    "TextRenderer",
    "status_lines",
    "CircleCommand",
    "Frame",
    "RectCommand",
    "TextCommand",
    "TickSource",
    "advance",
]
