"""
Dungeon Map - Constants

Enumerations for every user-selectable option plus the room types used as
color-table keys, and the default settings record.
"""

from enum import Enum, IntEnum


class MapStyle(str, Enum):
    """Overall visual theme: room size, spacing, door width and palette."""

    LEGAL = "legalmap"
    HYPIXEL = "hypixelmap"
    TENIOS = "teniosmap"


class TickStyle(str, Enum):
    """Asset set used for room status ticks."""

    HYPIXEL = "hypixel"
    DEFAULT = "default"
    SECRETS = "secrets"


class PuzzleNames(str, Enum):
    NONE = "none"
    TEXT = "text"
    ICON = "icon"


class CurrentRoomInfo(str, Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


class ScoreInfoUnderMap(str, Enum):
    NONE = "none"
    LEGALMAP = "legalmap"
    SIMPLIFIED = "simplified"


class IconKind(str, Enum):
    """Icons drawn on top of room cells."""

    GREEN_CHECK = "greenCheck"
    WHITE_CHECK = "whiteCheck"
    FAILED_ROOM = "failedRoom"
    QUESTION_MARK = "questionMark"


class RoomType(IntEnum):
    """Room classification used to pick a fill color."""

    SPAWN = 0
    NORMAL = 1
    PUZZLE = 2
    MINIBOSS = 3
    FAIRY = 4
    BLOOD = 5
    UNKNOWN = 6
    TRAP = 7
    BLACK = 8  # Wither doors
    NORMAL_CONNECTION = 9  # Connectors between normal rooms


# Icon scale that renders icons at their base pixel size
ICON_SCALE_REFERENCE = 8

# Rooms per side of the dungeon grid
GRID_ROOMS = 6

DEFAULT_SETTINGS = {
    "map_style": MapStyle.LEGAL,
    "pos_x": 0,
    "pos_y": 0,
    "size": 100,
    "head_scale": 8,
    "icon_scale": 8,
    "tick_style": TickStyle.DEFAULT,
    "puzzle_names": PuzzleNames.NONE,
    "head_border": False,
    "player_names": True,
    "current_room_info": CurrentRoomInfo.NONE,
    "score_info_under_map": ScoreInfoUnderMap.SIMPLIFIED,
    "force_paul": False,
    "dev_info": False,
}

# Keys used by persisted settings from the scripting-host version of the map
CAMEL_CASE_KEYS = {
    "mapStyle": "map_style",
    "posX": "pos_x",
    "posY": "pos_y",
    "size": "size",
    "headScale": "head_scale",
    "iconScale": "icon_scale",
    "tickStyle": "tick_style",
    "puzzleNames": "puzzle_names",
    "headBorder": "head_border",
    "playerNames": "player_names",
    "currentRoomInfo": "current_room_info",
    "scoreInfoUnderMap": "score_info_under_map",
    "forcePaul": "force_paul",
    "devInfo": "dev_info",
}
