"""Immutable ``ImageState`` dataclass.

One ``ImageState`` is threaded through the identicon pipeline. Every stage
is a pure function that takes the previous state and returns a *new* state
with exactly one field populated or replaced; nothing is mutated in place.

Field ownership:

* ``hash_bytes`` is produced by :func:`identicon.systems.hash.hash_system`.
* ``color`` is produced by :func:`identicon.systems.color.color_system`.
* ``grid`` is produced by :func:`identicon.systems.grid.grid_system` (25
  cells) and narrowed by :func:`identicon.systems.filter.filter_system`.
* ``pixel_map`` is produced by
  :func:`identicon.systems.pixel_map.pixel_map_system`, parallel to ``grid``.

Sequences are persistent vectors (``pyrsistent.PVector``) so that states can
be compared by value and safely shared between stages.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from identicon.components import GridCell, Rect
from identicon.types import ByteValue, Color


@dataclass(frozen=True)
class ImageState:
    """Immutable identicon build state.

    Attributes:
        hash_bytes (PVector[int]): The 16 digest bytes, in digest order.
        color (Color | None): ``(r, g, b)`` taken from the first three bytes.
        grid (PVector[GridCell]): Mirrored grid cells, possibly filtered.
        pixel_map (PVector[Rect]): One tile per cell in ``grid``, same order.
    """

    hash_bytes: PVector[ByteValue] = pvector()
    color: Optional[Color] = None
    grid: PVector[GridCell] = pvector()
    pixel_map: PVector[Rect] = pvector()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Field name to value for every non-empty field.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or (isinstance(value, type(pvector())) and not value):
                continue
            description = description.set(field, value)
        return description
