"""
Dungeon Map - Host Capabilities

Narrow interfaces the render context calls into. Implementations live with
the host rendering API (see dungeon_map.rendering), never in the core.
"""

from typing import Any, Optional, Protocol

from .ticks import ImageAsset


class ColorFactory(Protocol):
    """Builds a host color value from 0-255 RGBA components."""

    def __call__(self, rgba: tuple[int, int, int, int]) -> Any: ...


class AssetResolver(Protocol):
    """Turns an asset descriptor into a drawable bitmap.

    Implementations own the local cache lookup and remote URL fallback.
    """

    def __call__(self, asset: ImageAsset) -> Any: ...


class TextureHandle(Protocol):
    """Native resource behind a bitmap. delete() must be safe to call twice."""

    def delete(self) -> None: ...


class MapImage(Protocol):
    """Cached map bitmap owned by a render context."""

    def get_texture(self) -> Optional[TextureHandle]: ...
