"""Deterministic identicon generation.

``identicon.main("username")`` writes ``username.png``: a 250x250 image of
mirrored 50x50 tiles in a color derived from the MD5 of the input.
"""

from identicon.components import GridCell, Point, Rect
from identicon.errors import (
    IdenticonError,
    ImageWriteError,
    InputEncodingError,
    UnsafeFilenameError,
)
from identicon.pipeline import build_state, generate, main, save_image
from identicon.renderer import render, render_image
from identicon.state import ImageState

__all__ = [
    "GridCell",
    "IdenticonError",
    "ImageState",
    "ImageWriteError",
    "InputEncodingError",
    "Point",
    "Rect",
    "UnsafeFilenameError",
    "build_state",
    "generate",
    "main",
    "render",
    "render_image",
    "save_image",
]
