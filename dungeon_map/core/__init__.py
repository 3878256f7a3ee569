"""
Dungeon Map - Core Module

Settings normalization, style tables and the render context. No host
rendering library is imported here.
"""

from .constants import (
    CurrentRoomInfo,
    IconKind,
    MapStyle,
    PuzzleNames,
    RoomType,
    ScoreInfoUnderMap,
    TickStyle,
)
from .errors import (
    ContextDestroyedError,
    RenderContextError,
    UnknownIconKindError,
    UnknownMapStyleError,
    UnknownRoomTypeError,
    UnknownTickStyleError,
)
from .render_context import MapDimensions, RenderContext
from .settings import ContextSettings, add_missing
from .ticks import ImageAsset

__all__ = [
    'ContextDestroyedError',
    'ContextSettings',
    'CurrentRoomInfo',
    'IconKind',
    'ImageAsset',
    'MapDimensions',
    'MapStyle',
    'PuzzleNames',
    'RenderContext',
    'RenderContextError',
    'RoomType',
    'ScoreInfoUnderMap',
    'TickStyle',
    'UnknownIconKindError',
    'UnknownMapStyleError',
    'UnknownRoomTypeError',
    'UnknownTickStyleError',
    'add_missing',
]
