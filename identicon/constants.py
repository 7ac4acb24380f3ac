"""Fixed geometry and output constants.

Identicons are always a 5x5 grid of 50 pixel cells, so nothing here is meant
to be overridden at runtime.
"""

from typing import Tuple

HASH_LENGTH = 16
INPUT_ENCODING = "utf-8"

GRID_SIZE = 5
SOURCE_COLUMNS = 3
CELL_SIZE = 50
IMAGE_SIZE = GRID_SIZE * CELL_SIZE

BACKGROUND: Tuple[int, int, int, int] = (0, 0, 0, 0)

IMAGE_FORMAT = "PNG"
IMAGE_EXTENSION = ".png"
