"""
Dungeon Map - Render Context

Holds the normalized map settings and exposes the geometry, colors and icon
assets derived from them. Owns the cached map bitmap that the per-frame
renderer draws into, and the hooks that run when the map is torn down.
"""

import logging
import time
from contextlib import ExitStack
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

from .capabilities import AssetResolver, ColorFactory, MapImage, TextureHandle
from .constants import GRID_ROOMS, ICON_SCALE_REFERENCE, IconKind, RoomType
from .errors import (
    ContextDestroyedError,
    UnknownIconKindError,
    UnknownMapStyleError,
    UnknownRoomTypeError,
    UnknownTickStyleError,
)
from .palettes import STYLE_COLOR_TABLES, STYLE_GEOMETRY, StyleGeometry
from .settings import ContextSettings, add_missing
from .ticks import BASE_ICON_SIZES, TICK_TABLES, ImageAsset

logger = logging.getLogger(__name__)


class MapDimensions(NamedTuple):
    """Settings most renderers need: screen position, size and head scale."""

    x: float
    y: float
    size: float
    head_scale: float


class RenderContext:
    """Settings, derived geometry and cached bitmap for one dungeon map."""

    def __init__(
        self,
        settings: Union[Mapping[str, Any], ContextSettings, None] = None,
        *,
        color_factory: Optional[ColorFactory] = None,
        asset_resolver: Optional[AssetResolver] = None,
    ):
        """
        Initialize render context.

        Args:
            settings: Partial settings mapping; missing keys use defaults
            color_factory: Converts RGBA tuples into host colors (optional)
            asset_resolver: Turns ImageAsset descriptors into bitmaps (optional)
        """
        self.settings: ContextSettings = add_missing(settings)

        self.image: Optional[MapImage] = None
        self.image_last_update: float = 0

        self.padding_top = 0
        self.padding_left = 0

        self.border_width = 2

        self._color_factory = color_factory
        self._asset_resolver = asset_resolver
        self._converted_colors: Dict[int, Mapping[RoomType, Any]] = {}
        self._resolved_images: Dict[ImageAsset, Any] = {}

        self._destroy_hooks: List[Callable[[], None]] = []
        self._destroyed = False

    def set_settings(self, settings: Union[Mapping[str, Any], ContextSettings, None]):
        """Replace all settings, filling anything missing from defaults."""
        self.settings = add_missing(settings)

    # Settings passthrough

    @property
    def pos_x(self):
        return self.settings.pos_x

    @property
    def pos_y(self):
        return self.settings.pos_y

    @property
    def size(self):
        return self.settings.size

    @property
    def head_scale(self):
        return self.settings.head_scale

    @property
    def icon_scale(self):
        return self.settings.icon_scale

    @property
    def tick_style(self):
        return self.settings.tick_style

    @property
    def puzzle_names(self):
        return self.settings.puzzle_names

    @property
    def head_border(self):
        return self.settings.head_border

    @property
    def player_names(self):
        return self.settings.player_names

    @property
    def map_style(self):
        return self.settings.map_style

    @property
    def current_room_info(self):
        return self.settings.current_room_info

    @property
    def score_info_under_map(self):
        return self.settings.score_info_under_map

    @property
    def force_paul(self):
        return self.settings.force_paul

    @property
    def dev_info(self):
        return self.settings.dev_info

    # Geometry

    def _geometry(self) -> StyleGeometry:
        try:
            return STYLE_GEOMETRY[self.map_style]
        except (KeyError, TypeError):
            raise UnknownMapStyleError(self.map_style) from None

    @property
    def room_size(self) -> int:
        return self._geometry().room_size

    @property
    def room_gap(self) -> int:
        return self._geometry().room_gap

    @property
    def block_size(self) -> int:
        """Pixel span of one room cell including its gap."""
        return self.room_size + self.room_gap

    @property
    def door_width(self) -> int:
        return self._geometry().door_width

    def get_image_size(self) -> int:
        """Side length in pixels of the square cached map bitmap."""
        return self.padding_left * 2 + self.block_size * GRID_ROOMS + self.room_gap

    def get_map_dimensions(self) -> MapDimensions:
        """Shortcut for the settings most rendering calls need."""
        return MapDimensions(
            x=self.pos_x,
            y=self.pos_y,
            size=self.size,
            head_scale=self.head_scale,
        )

    # Colors

    @property
    def color_map(self) -> Mapping[RoomType, Any]:
        """
        Room type to fill color table for the current map style.

        Without a color factory the shared RGBA table is returned as-is.
        With one, each table is converted once and reused, so styles that
        share a palette still share the converted table.
        """
        try:
            table = STYLE_COLOR_TABLES[self.map_style]
        except (KeyError, TypeError):
            raise UnknownMapStyleError(self.map_style) from None

        if self._color_factory is None:
            return table

        converted = self._converted_colors.get(id(table))
        if converted is None:
            converted = MappingProxyType(
                {room_type: self._color_factory(rgba) for room_type, rgba in table.items()}
            )
            self._converted_colors[id(table)] = converted
        return converted

    def get_room_color(self, room_type: Any) -> Any:
        """Fill color for a single room type."""
        try:
            room_type = RoomType(room_type)
        except ValueError:
            raise UnknownRoomTypeError(room_type) from None
        return self.color_map[room_type]

    # Icons

    @staticmethod
    def _icon_kind(kind: Any) -> IconKind:
        try:
            return IconKind(kind)
        except ValueError:
            raise UnknownIconKindError(kind) from None

    def _tick_entry(self, tables: Mapping[Any, Mapping[IconKind, Any]], kind: Any) -> Any:
        icon_kind = self._icon_kind(kind)
        try:
            table = tables[self.tick_style]
        except (KeyError, TypeError):
            raise UnknownTickStyleError(
                self.tick_style, "no tick assets for this style"
            ) from None
        try:
            return table[icon_kind]
        except KeyError:
            raise UnknownIconKindError(kind, "no asset for the current tick style") from None

    def get_image(self, kind: Any) -> Any:
        """
        Get the image to render on top of the map, e.g. a check mark.

        Args:
            kind: IconKind or its string value ("greenCheck", ...)

        Returns:
            The resolved bitmap when an asset resolver is set, otherwise the
            ImageAsset descriptor

        Raises:
            UnknownIconKindError: If kind is not an icon kind
            UnknownTickStyleError: If the tick style has no asset set
        """
        asset: ImageAsset = self._tick_entry(TICK_TABLES, kind)
        if self._asset_resolver is None:
            return asset

        if asset not in self._resolved_images:
            self._resolved_images[asset] = self._asset_resolver(asset)
        return self._resolved_images[asset]

    def get_icon_size(self, kind: Any) -> Tuple[float, float]:
        """
        Get the width and height of an icon, scaled by icon_scale.

        An icon_scale of 8 gives the base size of the icon.
        """
        base_w, base_h = self._tick_entry(BASE_ICON_SIZES, kind)
        scale = self.icon_scale / ICON_SCALE_REFERENCE
        return (base_w * scale, base_h * scale)

    # Cached image

    @property
    def needs_rerender(self) -> bool:
        return self.image is None or self.image_last_update == 0

    def store_image(self, image: MapImage, timestamp: Optional[float] = None):
        """Record a freshly rendered map bitmap."""
        self.image = image
        self.image_last_update = time.time() if timestamp is None else timestamp

    def mark_rerender(self):
        """
        Mark this image as needing a re-render.

        It will be re-rendered on the next game frame.
        """
        self.image_last_update = 0

    # Teardown

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def on_destroy(self, callback: Callable[[], None]):
        """Register a callback to run once when this context is destroyed."""
        if self._destroyed:
            raise ContextDestroyedError("Cannot register a destroy hook on a destroyed context")
        self._destroy_hooks.append(callback)

    def destroy(self):
        """
        Prepare this render context for garbage collection.

        Releases the cached map image and its texture, then runs every
        destroy hook in registration order. Later calls do nothing.

        Every hook runs even if the texture release or an earlier hook
        raises; the exception propagates once all hooks have run.
        """
        if self._destroyed:
            logger.debug("RenderContext already destroyed, ignoring")
            return
        self._destroyed = True

        logger.debug("Running %d destroy hook(s)", len(self._destroy_hooks))
        with ExitStack() as hooks:
            # ExitStack unwinds last-in first-out
            for callback in reversed(self._destroy_hooks):
                hooks.callback(callback)

            image, self.image = self.image, None
            self._resolved_images.clear()
            if image is not None:
                get_texture = getattr(image, "get_texture", None)
                texture: Optional[TextureHandle] = get_texture() if get_texture is not None else None
                if texture is not None:
                    texture.delete()
