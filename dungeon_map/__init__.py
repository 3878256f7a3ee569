"""
Dungeon Map

Render context for the dungeon minimap overlay: settings, style-derived
geometry, color and icon lookups, and the cached map bitmap lifecycle.
"""

from .core import (
    IconKind,
    MapStyle,
    RenderContext,
    RenderContextError,
    RoomType,
    TickStyle,
)

__all__ = [
    "IconKind",
    "MapStyle",
    "RenderContext",
    "RenderContextError",
    "RoomType",
    "TickStyle",
]
