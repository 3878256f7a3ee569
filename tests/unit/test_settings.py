"""Unit tests for settings normalization."""

import pytest

from dungeon_map.core.constants import (
    DEFAULT_SETTINGS,
    CurrentRoomInfo,
    MapStyle,
    PuzzleNames,
    ScoreInfoUnderMap,
    TickStyle,
)
from dungeon_map.core.settings import ContextSettings, add_missing


class TestAddMissingDefaults:
    """Tests for filling absent settings from defaults."""

    @pytest.mark.parametrize("partial", [None, {}])
    def test_empty_input_gives_all_defaults(self, partial):
        """No input should produce the documented default for every field."""
        settings = add_missing(partial)
        assert settings.to_dict() == {
            key: value.value if hasattr(value, "value") else value
            for key, value in DEFAULT_SETTINGS.items()
        }

    def test_documented_defaults(self):
        """Spot-check the defaults a fresh map renders with."""
        settings = add_missing()
        assert settings.map_style is MapStyle.LEGAL
        assert settings.tick_style is TickStyle.DEFAULT
        assert settings.size == 100
        assert settings.head_scale == 8
        assert settings.icon_scale == 8
        assert settings.player_names is True
        assert settings.head_border is False
        assert settings.score_info_under_map is ScoreInfoUnderMap.SIMPLIFIED

    def test_partial_input_keeps_given_and_defaults_rest(self):
        """Given fields override defaults, others fall back."""
        settings = add_missing({"pos_x": 40, "dev_info": True})
        assert settings.pos_x == 40
        assert settings.dev_info is True
        assert settings.pos_y == DEFAULT_SETTINGS["pos_y"]
        assert settings.map_style == DEFAULT_SETTINGS["map_style"]

    def test_every_field_overridable(self, full_settings):
        """Each recognized field should take the input value."""
        settings = add_missing(full_settings)
        assert settings.to_dict() == full_settings

    def test_input_mapping_not_mutated(self):
        """Normalization should not write back into the caller's mapping."""
        partial = {"size": 50, "bogus": 1}
        add_missing(partial)
        assert partial == {"size": 50, "bogus": 1}


class TestAddMissingKeys:
    """Tests for key handling."""

    def test_unrecognized_keys_dropped(self):
        """Unknown keys should be silently ignored."""
        settings = add_missing({"not_a_setting": 5, "size": 80})
        assert settings.size == 80
        assert "not_a_setting" not in settings.to_dict()

    def test_camel_case_keys_accepted(self):
        """Persisted camelCase keys should map onto fields."""
        settings = add_missing({"mapStyle": "hypixelmap", "iconScale": 12, "forcePaul": True})
        assert settings.map_style is MapStyle.HYPIXEL
        assert settings.icon_scale == 12
        assert settings.force_paul is True

    def test_camel_case_round_trip(self, full_settings):
        """Serializing with camelCase keys should load back identically."""
        original = add_missing(full_settings)
        reloaded = add_missing(original.to_dict(camel_case=True))
        assert reloaded == original

    def test_camel_case_output_keys(self):
        data = add_missing().to_dict(camel_case=True)
        assert "scoreInfoUnderMap" in data
        assert "score_info_under_map" not in data


class TestEnumCoercion:
    """Tests for converting enum strings to members."""

    def test_strings_become_members(self):
        settings = add_missing({
            "tick_style": "secrets",
            "puzzle_names": "text",
            "current_room_info": "left",
            "score_info_under_map": "none",
        })
        assert settings.tick_style is TickStyle.SECRETS
        assert settings.puzzle_names is PuzzleNames.TEXT
        assert settings.current_room_info is CurrentRoomInfo.LEFT
        assert settings.score_info_under_map is ScoreInfoUnderMap.NONE

    def test_members_compare_equal_to_strings(self):
        assert add_missing({"map_style": "teniosmap"}).map_style == "teniosmap"

    def test_invalid_enum_value_kept_without_error(self):
        """Normalization never fails; bad values surface at lookup time."""
        settings = add_missing({"map_style": "sketchmap", "tick_style": 3})
        assert settings.map_style == "sketchmap"
        assert settings.tick_style == 3

    def test_to_dict_uses_plain_strings(self):
        data = add_missing({"map_style": MapStyle.HYPIXEL}).to_dict()
        assert data["map_style"] == "hypixelmap"
        assert type(data["map_style"]) is str


class TestContextSettings:
    """Tests for the settings dataclass itself."""

    def test_default_construction_matches_add_missing(self):
        assert ContextSettings() == add_missing()

    def test_records_are_independent(self):
        first = add_missing()
        second = add_missing()
        first.size = 10
        assert second.size == 100

    def test_add_missing_copies_existing_record(self, full_settings):
        """An existing record is accepted and copied, not shared."""
        original = add_missing(full_settings)
        copy = add_missing(original)
        assert copy == original
        assert copy is not original
        assert copy.map_style is MapStyle.TENIOS
        copy.size = 1
        assert original.size == full_settings["size"]
