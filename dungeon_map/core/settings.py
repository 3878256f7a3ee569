"""
Dungeon Map - Context Settings

The flat record of user-facing map options. Partial input is merged over
the defaults so every field always holds a value.
"""

import logging
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, Union

from .constants import (
    CAMEL_CASE_KEYS,
    DEFAULT_SETTINGS,
    CurrentRoomInfo,
    MapStyle,
    PuzzleNames,
    ScoreInfoUnderMap,
    TickStyle,
)

logger = logging.getLogger(__name__)


@dataclass
class ContextSettings:
    """User-configurable rendering options for one map."""

    map_style: Union[MapStyle, str] = DEFAULT_SETTINGS["map_style"]
    pos_x: float = DEFAULT_SETTINGS["pos_x"]
    pos_y: float = DEFAULT_SETTINGS["pos_y"]
    size: float = DEFAULT_SETTINGS["size"]
    head_scale: float = DEFAULT_SETTINGS["head_scale"]
    icon_scale: float = DEFAULT_SETTINGS["icon_scale"]
    tick_style: Union[TickStyle, str] = DEFAULT_SETTINGS["tick_style"]
    puzzle_names: Union[PuzzleNames, str] = DEFAULT_SETTINGS["puzzle_names"]
    head_border: bool = DEFAULT_SETTINGS["head_border"]
    player_names: bool = DEFAULT_SETTINGS["player_names"]
    current_room_info: Union[CurrentRoomInfo, str] = DEFAULT_SETTINGS["current_room_info"]
    score_info_under_map: Union[ScoreInfoUnderMap, str] = DEFAULT_SETTINGS["score_info_under_map"]
    force_paul: bool = DEFAULT_SETTINGS["force_paul"]
    dev_info: bool = DEFAULT_SETTINGS["dev_info"]

    def to_dict(self, camel_case: bool = False) -> Dict[str, Any]:
        """
        Serialize settings to a flat dict of plain values.

        Args:
            camel_case: Use the persisted camelCase keys instead of field names

        Returns:
            Dict with one entry per field, enum members as their string values
        """
        data = {
            key: value.value if isinstance(value, Enum) else value
            for key, value in asdict(self).items()
        }
        if camel_case:
            field_to_camel = {field: camel for camel, field in CAMEL_CASE_KEYS.items()}
            data = {field_to_camel[key]: value for key, value in data.items()}
        return data


_ENUM_FIELDS: Dict[str, Type[Enum]] = {
    "map_style": MapStyle,
    "tick_style": TickStyle,
    "puzzle_names": PuzzleNames,
    "current_room_info": CurrentRoomInfo,
    "score_info_under_map": ScoreInfoUnderMap,
}

_FIELD_NAMES = frozenset(f.name for f in fields(ContextSettings))


def _coerce(enum_type: Type[Enum], value: Any) -> Any:
    """Convert a raw value to its enum member, leaving unknown values untouched."""
    try:
        return enum_type(value)
    except ValueError:
        return value


def add_missing(
    settings: Union[Mapping[str, Any], ContextSettings, None] = None,
) -> ContextSettings:
    """
    Build a fully populated settings record from a partial mapping.

    Accepts field names (map_style) and persisted camelCase keys (mapStyle).
    Keys that match neither are dropped. Enum strings are coerced to their
    members; invalid enum strings are kept as given and fail later, at the
    lookup that needs them.

    Args:
        settings: Partial settings mapping, an existing ContextSettings
            (copied), or None for all defaults

    Returns:
        ContextSettings with every field set
    """
    if isinstance(settings, ContextSettings):
        settings = settings.to_dict()

    values: Dict[str, Any] = {}
    for key, value in (settings or {}).items():
        name = CAMEL_CASE_KEYS.get(key, key)
        if name not in _FIELD_NAMES:
            logger.debug("Dropping unrecognized setting %r", key)
            continue
        if name in _ENUM_FIELDS:
            value = _coerce(_ENUM_FIELDS[name], value)
        values[name] = value

    return ContextSettings(**values)
