"""Grid system.

Expands the hash into a left-right symmetric 5x5 grid. The 16 hash bytes
are split into five complete chunks of three (the trailing byte is unused),
each chunk ``[a, b, c]`` is mirrored into the row ``[a, b, c, b, a]``, and
the flattened 25 values are paired with their row-major position.
"""

from dataclasses import replace
from typing import List, Sequence

from pyrsistent import pvector

from identicon.components import GridCell
from identicon.constants import HASH_LENGTH, SOURCE_COLUMNS
from identicon.state import ImageState
from identicon.types import ByteValue


def mirror_row(row: Sequence[ByteValue]) -> List[ByteValue]:
    """Append the second and first elements to ``row`` in that order.

    >>> mirror_row([20, 196, 176])
    [20, 196, 176, 196, 20]
    """
    first, second = row[0], row[1]
    return [*row, second, first]


def grid_system(state: ImageState) -> ImageState:
    """Populate ``grid`` with the 25 mirrored cells.

    Args:
        state (ImageState): State with ``hash_bytes`` set.

    Returns:
        ImageState: New state whose ``grid`` holds ``GridCell(value, index)``
            for indices 0..24 in order.

    Raises:
        ValueError: If the state does not carry a full hash.
    """
    if len(state.hash_bytes) != HASH_LENGTH:
        raise ValueError(
            f"Expected {HASH_LENGTH} hash bytes, got {len(state.hash_bytes)}"
        )
    hash_bytes = list(state.hash_bytes)
    usable = len(hash_bytes) - len(hash_bytes) % SOURCE_COLUMNS
    values: List[ByteValue] = []
    for start in range(0, usable, SOURCE_COLUMNS):
        values.extend(mirror_row(hash_bytes[start : start + SOURCE_COLUMNS]))
    grid = pvector(GridCell(value, index) for index, value in enumerate(values))
    return replace(state, grid=grid)
