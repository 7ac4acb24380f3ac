"""Common type aliases."""

from typing import Tuple

ByteValue = int
CellIndex = int

Color = Tuple[ByteValue, ByteValue, ByteValue]
Box = Tuple[int, int, int, int]
