"""
Dungeon Map - Tick Assets

Descriptors for the check-mark and status icons drawn over room cells, and
the hand-tuned base size of each icon.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .constants import IconKind, TickStyle


@dataclass(frozen=True)
class ImageAsset:
    """An icon image: local cache filename plus the URL it is fetched from."""

    filename: str
    url: str


HYPIXEL_TICKS: Mapping[IconKind, ImageAsset] = MappingProxyType({
    IconKind.GREEN_CHECK: ImageAsset("greenCheckVanilla.png", "https://i.imgur.com/h2WM1LO.png"),
    IconKind.WHITE_CHECK: ImageAsset("whiteCheckVanilla.png", "https://i.imgur.com/hwEAcnI.png"),
    IconKind.FAILED_ROOM: ImageAsset("failedRoomVanilla.png", "https://i.imgur.com/WqW69z3.png"),
    IconKind.QUESTION_MARK: ImageAsset("questionMarkVanilla.png", "https://i.imgur.com/1jyxH9I.png"),
})

LEGAL_MAP_TICKS: Mapping[IconKind, ImageAsset] = MappingProxyType({
    IconKind.GREEN_CHECK: ImageAsset("BloomMapGreenCheck.png", "https://i.imgur.com/GQfTfmp.png"),
    IconKind.WHITE_CHECK: ImageAsset("BloomMapWhiteCheck.png", "https://i.imgur.com/9cZ28bJ.png"),
    IconKind.FAILED_ROOM: ImageAsset("BloomMapFailedRoom.png", "https://i.imgur.com/qAb4O9H.png"),
    IconKind.QUESTION_MARK: ImageAsset("BloomMapQuestionMark.png", "https://i.imgur.com/kp92Inw.png"),
})

# TickStyle.SECRETS has no asset set
TICK_TABLES: Mapping[TickStyle, Mapping[IconKind, ImageAsset]] = MappingProxyType({
    TickStyle.DEFAULT: LEGAL_MAP_TICKS,
    TickStyle.HYPIXEL: HYPIXEL_TICKS,
})

# (width, height) in pixels at icon scale 8
BASE_ICON_SIZES: Mapping[TickStyle, Mapping[IconKind, Tuple[int, int]]] = MappingProxyType({
    TickStyle.DEFAULT: MappingProxyType({
        IconKind.QUESTION_MARK: (16, 16),
        IconKind.WHITE_CHECK: (16, 16),
        IconKind.GREEN_CHECK: (16, 16),
        IconKind.FAILED_ROOM: (16, 16),
    }),
    TickStyle.HYPIXEL: MappingProxyType({
        IconKind.QUESTION_MARK: (10, 16),
        IconKind.WHITE_CHECK: (10, 10),
        IconKind.GREEN_CHECK: (10, 10),
        IconKind.FAILED_ROOM: (14, 14),
    }),
})
