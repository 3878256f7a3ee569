"""Shared pytest fixtures for render context tests."""

import pytest

from dungeon_map.core.render_context import RenderContext


@pytest.fixture
def context():
    """Create a render context with default settings."""
    ctx = RenderContext()
    yield ctx
    ctx.destroy()


@pytest.fixture
def hypixel_context():
    """Create a render context using the hypixel map and tick styles."""
    ctx = RenderContext({"map_style": "hypixelmap", "tick_style": "hypixel"})
    yield ctx
    ctx.destroy()


@pytest.fixture
def full_settings():
    """Every setting set to a non-default value, using field names."""
    return {
        "map_style": "teniosmap",
        "pos_x": 12,
        "pos_y": 34,
        "size": 150,
        "head_scale": 10,
        "icon_scale": 16,
        "tick_style": "hypixel",
        "puzzle_names": "icon",
        "head_border": True,
        "player_names": False,
        "current_room_info": "right",
        "score_info_under_map": "legalmap",
        "force_paul": True,
        "dev_info": True,
    }


class FakeTexture:
    """Texture handle that records how often it was deleted."""

    def __init__(self):
        self.delete_calls = 0

    def delete(self):
        self.delete_calls += 1


class FakeImage:
    """Map image exposing a FakeTexture."""

    def __init__(self, texture=None):
        self.texture = texture

    def get_texture(self):
        return self.texture


@pytest.fixture
def fake_texture():
    return FakeTexture()


@pytest.fixture
def fake_image(fake_texture):
    return FakeImage(fake_texture)
