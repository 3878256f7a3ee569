"""
Dungeon Map - PIL Rendering

PIL-backed map bitmap for headless use (tools, tests) and a swatch renderer
that lays out one cell per room type using a context's style.
Mirrors the pygame backend but produces PIL images.
"""

from typing import Optional

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from dungeon_map.core.constants import RoomType
from dungeon_map.core.errors import UnknownMapStyleError
from dungeon_map.core.palettes import STYLE_COLOR_TABLES
from dungeon_map.core.render_context import RenderContext


class PILTexture:
    """Texture handle for a PIL image. Deleting closes the image."""

    def __init__(self, image: Image.Image):
        self.image: Optional[Image.Image] = image

    @property
    def deleted(self) -> bool:
        return self.image is None

    def delete(self):
        if self.image is None:
            return
        self.image.close()
        self.image = None


class PILMapImage:
    """Cached map bitmap backed by a PIL RGBA image."""

    def __init__(self, image: Image.Image):
        self._texture = PILTexture(image)

    @property
    def image(self) -> Optional[Image.Image]:
        """The backing image, or None once the texture is deleted."""
        return self._texture.image

    def get_texture(self) -> PILTexture:
        return self._texture


def new_pil_image(context: RenderContext) -> PILMapImage:
    """Allocate a transparent RGBA map image sized for the context's style."""
    size = context.get_image_size()
    return PILMapImage(Image.new("RGBA", (size, size), (0, 0, 0, 0)))


def render_style_swatch(context: RenderContext) -> Image.Image:
    """
    Render every room type as a row of connected cells.

    Cells are room_size square, separated by room_gap, and joined by a
    door_width tall connector in the normal-connection color.

    Args:
        context: Render context whose map style selects geometry and colors.
            Colors come from the style's RGBA table, whatever color
            factory the context uses

    Returns:
        PIL RGBA image
    """
    room_size = context.room_size
    room_gap = context.room_gap
    block_size = context.block_size
    door_width = context.door_width
    # Raw RGBA tables; context.color_map may hold host colors from a color factory
    try:
        colors = STYLE_COLOR_TABLES[context.map_style]
    except (KeyError, TypeError):
        raise UnknownMapStyleError(context.map_style) from None

    room_types = list(RoomType)
    width = block_size * len(room_types) + room_gap
    height = block_size + room_gap

    img = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    connector = colors[RoomType.NORMAL_CONNECTION]
    door_top = room_gap + (room_size - door_width) // 2

    for i, room_type in enumerate(room_types):
        x = room_gap + i * block_size
        draw.rectangle(
            [x, room_gap, x + room_size - 1, room_gap + room_size - 1],
            fill=colors[room_type],
        )

        # Connector into the next cell
        if i < len(room_types) - 1:
            draw.rectangle(
                [x + room_size, door_top, x + block_size - 1, door_top + door_width - 1],
                fill=connector,
            )

    return img
