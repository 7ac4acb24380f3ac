"""Pixel map system.

Turns each surviving grid cell into a 50x50 tile. Row and column come from
the cell's original index, so gaps left by filtering stay gaps.
"""

from dataclasses import replace

from pyrsistent import pvector

from identicon.components import GridCell, Point, Rect
from identicon.constants import CELL_SIZE
from identicon.state import ImageState


def cell_to_rect(cell: GridCell) -> Rect:
    """Return the canvas tile covered by ``cell``."""
    horizontal = cell.column * CELL_SIZE
    vertical = cell.row * CELL_SIZE
    return Rect(
        top_left=Point(horizontal, vertical),
        bottom_right=Point(horizontal + CELL_SIZE, vertical + CELL_SIZE),
    )


def pixel_map_system(state: ImageState) -> ImageState:
    """Set ``pixel_map`` to one ``Rect`` per cell of ``grid``, same order."""
    return replace(state, pixel_map=pvector(cell_to_rect(cell) for cell in state.grid))
