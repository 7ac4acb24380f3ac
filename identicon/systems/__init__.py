"""Pure pipeline stages.

Each module exposes one ``*_system`` function. Apart from
:func:`identicon.systems.hash.hash_system`, which seeds a fresh state from
the input text, every system takes an :class:`identicon.state.ImageState`
and returns a new one.
"""

from .color import color_system
from .filter import filter_system
from .grid import grid_system, mirror_row
from .hash import hash_system
from .pixel_map import pixel_map_system

__all__ = [
    "color_system",
    "filter_system",
    "grid_system",
    "hash_system",
    "mirror_row",
    "pixel_map_system",
]
