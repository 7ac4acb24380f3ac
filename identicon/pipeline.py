"""Pipeline orchestration.

Wires the pure systems together and persists the result:

1. ``hash_system`` digests the input text.
2. ``color_system`` picks the fill color from the first three bytes.
3. ``grid_system`` builds the mirrored 5x5 grid.
4. ``filter_system`` keeps the even cells.
5. ``pixel_map_system`` maps cells to 50x50 tiles.
6. :func:`identicon.renderer.render` paints and encodes the PNG.
7. :func:`save_image` writes ``<text>.png`` atomically.

Steps 1-6 have no side effects; only the final write can fail with an
:class:`identicon.errors.ImageWriteError`.
"""

import logging
from pathlib import Path
from typing import Optional

from identicon.renderer import render
from identicon.state import ImageState
from identicon.systems import (
    color_system,
    filter_system,
    grid_system,
    hash_system,
    pixel_map_system,
)
from identicon.utils.io import atomic_write_bytes
from identicon.utils.path import PathLike, output_path

logger = logging.getLogger(__name__)


def build_state(text: str) -> ImageState:
    """Run the pure stages for ``text`` and return the final state.

    Args:
        text (str): Identity string to fingerprint.

    Returns:
        ImageState: State with hash, color, filtered grid and pixel map set.

    Raises:
        InputEncodingError: If ``text`` cannot be encoded.
    """
    state = hash_system(text)
    state = color_system(state)
    state = grid_system(state)
    state = filter_system(state)
    state = pixel_map_system(state)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built identicon state for %r: %s", text, dict(state.description))
    return state


def save_image(data: bytes, filename: str, directory: Optional[PathLike] = None) -> Path:
    """Write encoded image ``data`` to ``<directory>/<filename>.png``.

    Raises:
        UnsafeFilenameError: If ``filename`` contains a separator or NUL.
        ImageWriteError: If the file cannot be written.
    """
    return _write_image(output_path(filename, directory), data)


def generate(text: str, directory: Optional[PathLike] = None) -> Path:
    """Build, render and save the identicon for ``text``.

    The output name is checked before any work is done so that an unusable
    input fails without rendering.

    Returns:
        Path: Location of the written PNG.
    """
    path = output_path(text, directory)
    data = render(build_state(text))
    return _write_image(path, data)


def _write_image(path: Path, data: bytes) -> Path:
    atomic_write_bytes(path, data)
    logger.info("Saved identicon to %s", path)
    return path


def main(text: str, directory: Optional[PathLike] = None) -> bool:
    """Create ``<text>.png`` for ``text``.

    Returns ``True`` once the file is written. Failures are raised as
    :class:`identicon.errors.IdenticonError` subclasses rather than reported
    through the return value.

    >>> main("username")  # doctest: +SKIP
    True
    """
    generate(text, directory)
    return True
