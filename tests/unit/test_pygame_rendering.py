"""Unit tests for the pygame rendering backend."""

import pygame
import pytest
from pygame import Surface

from dungeon_map.core.constants import RoomType
from dungeon_map.core.render_context import RenderContext
from dungeon_map.rendering.pygame_rendering import (
    SurfaceMapImage,
    SurfaceTexture,
    new_surface_image,
    pygame_color,
    scale_icon,
)


class TestPygameColor:
    """Tests for the pygame color factory."""

    def test_builds_pygame_color(self):
        color = pygame_color((114, 67, 27, 255))
        assert isinstance(color, pygame.Color)
        assert (color.r, color.g, color.b, color.a) == (114, 67, 27, 255)

    def test_as_context_color_factory(self):
        ctx = RenderContext({"map_style": "hypixelmap"}, color_factory=pygame_color)
        assert ctx.color_map[RoomType.SPAWN] == pygame.Color(0, 124, 0, 255)


class TestSurfaceTexture:
    """Tests for surface-backed textures."""

    def test_delete_is_idempotent(self):
        texture = SurfaceTexture(Surface((4, 4)))
        assert not texture.deleted
        texture.delete()
        texture.delete()
        assert texture.deleted
        assert texture.surface is None


class TestSurfaceMapImage:
    """Tests for the cached map surface."""

    def test_new_image_sized_for_style(self):
        ctx = RenderContext({"map_style": "hypixelmap"})
        image = new_surface_image(ctx)
        assert isinstance(image, SurfaceMapImage)
        assert image.surface.get_size() == (ctx.get_image_size(), ctx.get_image_size())

    def test_new_image_is_transparent(self):
        image = new_surface_image(RenderContext())
        assert image.surface.get_at((0, 0)).a == 0

    def test_destroy_releases_surface(self):
        ctx = RenderContext()
        image = new_surface_image(ctx)
        ctx.store_image(image)
        ctx.destroy()
        assert image.get_texture().deleted
        assert image.surface is None
        assert ctx.image is None


class TestScaleIcon:
    """Tests for scaling icon surfaces to the configured size."""

    @pytest.mark.parametrize("icon_scale,expected", [(8, (10, 16)), (16, (20, 32))])
    def test_scales_to_icon_size(self, icon_scale, expected):
        ctx = RenderContext({"tick_style": "hypixel", "icon_scale": icon_scale})
        scaled = scale_icon(ctx, "questionMark", Surface((64, 64)))
        assert scaled.get_size() == expected

    def test_never_scales_to_zero(self):
        ctx = RenderContext({"icon_scale": 0})
        scaled = scale_icon(ctx, "greenCheck", Surface((16, 16)))
        assert scaled.get_size() == (1, 1)
