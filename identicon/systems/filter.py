"""Filter system.

Drops grid cells whose value is odd. Surviving cells keep their original
``index``; renumbering them would shift tiles on the canvas.
"""

from dataclasses import replace

from pyrsistent import pvector

from identicon.state import ImageState


def filter_system(state: ImageState) -> ImageState:
    """Keep only cells with an even ``value`` (0 included), in order."""
    grid = pvector(cell for cell in state.grid if cell.value % 2 == 0)
    return replace(state, grid=grid)
