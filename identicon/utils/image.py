import io

import numpy as np
import numpy.typing as npt
from PIL import Image
from typing import Tuple

from identicon.constants import BACKGROUND, IMAGE_FORMAT
from identicon.types import Box, Color

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]


def new_canvas(
    width: int, height: int, background: Tuple[int, int, int, int] = BACKGROUND
) -> UInt8Array:
    """
    Return an RGBA canvas of shape (height, width, 4) filled with ``background``.
    """
    canvas: UInt8Array = np.empty((height, width, 4), dtype=np.uint8)
    canvas[...] = background
    return canvas


def fill_box(canvas: UInt8Array, box: Box, color: Color) -> UInt8Array:
    """
    Paint the half-open box (x0, y0, x1, y1) opaque ``color`` in place and
    return the canvas. Later fills overwrite earlier ones.
    """
    x0, y0, x1, y1 = box
    canvas[y0:y1, x0:x1] = (*color, 255)
    return canvas


def canvas_to_image(canvas: UInt8Array) -> Image.Image:
    return Image.fromarray(canvas)


def encode_image(image: Image.Image, image_format: str = IMAGE_FORMAT) -> bytes:
    """
    Encode ``image`` losslessly to bytes in ``image_format``.
    """
    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    return buffer.getvalue()

