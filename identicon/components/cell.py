"""Grid cell component.

A cell pairs a hash-derived byte with its row-major position in the 5x5
matrix. The ``index`` is assigned once over the full 25-cell grid and is
never renumbered, so filtered grids keep gaps in their index sequence.
"""

from dataclasses import dataclass

from identicon.constants import GRID_SIZE
from identicon.types import ByteValue, CellIndex


@dataclass(frozen=True)
class GridCell:
    """One position of the identicon grid.

    Attributes:
        value: Byte taken from the hash (0-255).
        index: Row-major position (0 top-left, 24 bottom-right).
    """

    value: ByteValue
    index: CellIndex

    @property
    def row(self) -> int:
        return self.index // GRID_SIZE

    @property
    def column(self) -> int:
        return self.index % GRID_SIZE
