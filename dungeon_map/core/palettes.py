"""
Dungeon Map - Color Palettes and Geometry

Room colors and per-style cell geometry for each map style. Tables are
read-only views built once at import time.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from .constants import MapStyle, RoomType

# Type alias for RGBA color
RGBAColor = Tuple[int, int, int, int]


class StyleGeometry(NamedTuple):
    """Pixel dimensions of one room cell."""

    room_size: int
    room_gap: int
    door_width: int

    @property
    def block_size(self) -> int:
        return self.room_size + self.room_gap


HYPIXEL_COLORS: Mapping[RoomType, RGBAColor] = MappingProxyType({
    RoomType.SPAWN: (0, 124, 0, 255),
    RoomType.NORMAL: (114, 67, 27, 255),
    RoomType.NORMAL_CONNECTION: (114, 67, 27, 255),
    RoomType.PUZZLE: (178, 76, 216, 255),
    RoomType.MINIBOSS: (229, 229, 51, 255),
    RoomType.FAIRY: (242, 127, 165, 255),
    RoomType.BLOOD: (255, 0, 0, 255),
    RoomType.TRAP: (216, 127, 51, 255),
    RoomType.UNKNOWN: (65, 65, 65, 255),
    RoomType.BLACK: (0, 0, 0, 255),
})

LEGAL_MAP_COLORS: Mapping[RoomType, RGBAColor] = MappingProxyType({
    RoomType.SPAWN: (20, 133, 0, 255),
    RoomType.NORMAL: (107, 58, 17, 255),
    RoomType.NORMAL_CONNECTION: (92, 52, 14, 255),
    RoomType.PUZZLE: (117, 0, 133, 255),
    RoomType.MINIBOSS: (254, 223, 0, 255),
    RoomType.FAIRY: (224, 0, 255, 255),
    RoomType.BLOOD: (255, 0, 0, 255),
    RoomType.TRAP: (216, 127, 51, 255),
    RoomType.UNKNOWN: (65, 65, 65, 255),
    RoomType.BLACK: (0, 0, 0, 255),
})

# Tenios has no palette of its own yet and shares the hypixel table
STYLE_COLOR_TABLES: Mapping[MapStyle, Mapping[RoomType, RGBAColor]] = MappingProxyType({
    MapStyle.LEGAL: LEGAL_MAP_COLORS,
    MapStyle.HYPIXEL: HYPIXEL_COLORS,
    MapStyle.TENIOS: HYPIXEL_COLORS,
})

STYLE_GEOMETRY: Mapping[MapStyle, StyleGeometry] = MappingProxyType({
    MapStyle.LEGAL: StyleGeometry(room_size=24, room_gap=8, door_width=8),  # gap is 1/3 room
    MapStyle.HYPIXEL: StyleGeometry(room_size=24, room_gap=6, door_width=10),
    # Placeholder values; door width is exaggerated to make the style visibly different
    MapStyle.TENIOS: StyleGeometry(room_size=24, room_gap=6, door_width=15),
})
