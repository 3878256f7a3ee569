"""
Dungeon Map - Errors

Raised at the point of lookup when a style or icon value has no table entry.
"""

from typing import Any


class RenderContextError(Exception):
    """Base class for render context failures."""

    pass


class _UnknownValueError(RenderContextError, ValueError):
    """Lookup failed because the value is not part of a closed enumeration."""

    label = "value"

    def __init__(self, value: Any, detail: str = ""):
        self.value = value
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"Unknown {self.label}: {self.value!r}"
        if self.detail:
            message += f" ({self.detail})"
        return message


class UnknownMapStyleError(_UnknownValueError):
    """Raised when map_style is not one of the recognized map styles."""

    label = "map style"


class UnknownTickStyleError(_UnknownValueError):
    """Raised when tick_style has no tick asset table."""

    label = "tick style"


class UnknownIconKindError(_UnknownValueError):
    """Raised when an icon kind has no asset or size entry."""

    label = "icon kind"


class UnknownRoomTypeError(_UnknownValueError):
    """Raised when a room type has no color entry."""

    label = "room type"


class ContextDestroyedError(RenderContextError):
    """Raised when a destroyed render context is asked to take new hooks."""

    pass
