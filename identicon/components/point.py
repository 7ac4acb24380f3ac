"""Point component.

Integer pixel coordinates on the canvas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Pixel coordinate.

    Attributes:
        x: Horizontal offset (0 at left).
        y: Vertical offset (0 at top).
    """

    x: int
    y: int
