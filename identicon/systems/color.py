"""Color system: the first three hash bytes are the fill color."""

from dataclasses import replace

from identicon.constants import HASH_LENGTH
from identicon.state import ImageState
from identicon.types import Color


def color_system(state: ImageState) -> ImageState:
    """Set ``color`` to ``(r, g, b)`` from ``hash_bytes[0:3]``.

    The remaining bytes are left untouched for grid construction.

    Raises:
        ValueError: If the state does not carry a full hash.
    """
    if len(state.hash_bytes) != HASH_LENGTH:
        raise ValueError(
            f"Expected {HASH_LENGTH} hash bytes, got {len(state.hash_bytes)}"
        )
    r, g, b = state.hash_bytes[:3]
    color: Color = (r, g, b)
    return replace(state, color=color)
