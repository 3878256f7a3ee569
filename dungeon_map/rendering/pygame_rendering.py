"""
Dungeon Map - Pygame Rendering

Pygame implementations of the host capabilities: color construction, the
cached map surface and its texture handle, and icon scaling.
"""

from typing import Any, Optional

import pygame
from pygame import Surface

from dungeon_map.core.render_context import RenderContext


def pygame_color(rgba: tuple[int, int, int, int]) -> pygame.Color:
    """Color factory producing pygame colors from RGBA tuples."""
    return pygame.Color(*rgba)


class SurfaceTexture:
    """Texture handle for a pygame surface. Deleting drops the pixel buffer."""

    def __init__(self, surface: Surface):
        self.surface: Optional[Surface] = surface

    @property
    def deleted(self) -> bool:
        return self.surface is None

    def delete(self):
        self.surface = None


class SurfaceMapImage:
    """Cached map bitmap backed by a pygame surface."""

    def __init__(self, surface: Surface):
        self._texture = SurfaceTexture(surface)

    @property
    def surface(self) -> Optional[Surface]:
        """The backing surface, or None once the texture is deleted."""
        return self._texture.surface

    def get_texture(self) -> SurfaceTexture:
        return self._texture


def new_surface_image(context: RenderContext) -> SurfaceMapImage:
    """Allocate a transparent map surface sized for the context's style."""
    size = context.get_image_size()
    surf = Surface((size, size), pygame.SRCALPHA)
    surf.fill((0, 0, 0, 0))
    return SurfaceMapImage(surf)


def scale_icon(context: RenderContext, kind: Any, icon: Surface) -> Surface:
    """Scale a tick icon surface to the context's size for that icon kind."""
    width, height = context.get_icon_size(kind)
    return pygame.transform.scale(icon, (max(1, round(width)), max(1, round(height))))
