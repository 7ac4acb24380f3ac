"""Immutable value objects carried by :class:`identicon.state.ImageState`."""

from .cell import GridCell
from .point import Point
from .rect import Rect

__all__ = [
    "GridCell",
    "Point",
    "Rect",
]
