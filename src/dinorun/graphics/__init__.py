"""Render commands and the glyph console that replays them."""

from dinorun.graphics.commands import (
    Frame,
    RenderCommand,
    ClearScreen,
    ClearScreenBackground,
    SetGlyph,
    PrintText,
    PrintCentered,
    RequestQuit,
)

__all__ = [
    "Frame",
    "RenderCommand",
    "ClearScreen",
    "ClearScreenBackground",
    "SetGlyph",
    "PrintText",
    "PrintCentered",
    "RequestQuit",
]
