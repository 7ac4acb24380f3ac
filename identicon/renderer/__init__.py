"""Rendering subpackage.

Turns a fully built :class:`identicon.state.ImageState` into pixels. This is
the only part of the pipeline that touches an image library:

* A transparent 250x250 RGBA canvas is held as a NumPy array.
* Every tile of ``pixel_map`` is filled, in order, with the state's color.
* Pillow converts the canvas to an image and encodes it as PNG.

See :mod:`identicon.renderer.canvas` for the drawing routines.
"""

from .canvas import render, render_image

__all__ = ["render", "render_image"]
