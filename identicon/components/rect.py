"""Rectangle component.

Axis-aligned tile on the canvas. ``bottom_right`` is exclusive: a tile from
``(0, 0)`` to ``(50, 50)`` covers pixels 0..49 on both axes.
"""

from dataclasses import dataclass

from identicon.components.point import Point
from identicon.types import Box


@dataclass(frozen=True)
class Rect:
    """Tile to paint.

    Attributes:
        top_left: Inclusive upper-left corner.
        bottom_right: Exclusive lower-right corner.
    """

    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def as_box(self) -> Box:
        """Return ``(x0, y0, x1, y1)``."""
        return (
            self.top_left.x,
            self.top_left.y,
            self.bottom_right.x,
            self.bottom_right.y,
        )
