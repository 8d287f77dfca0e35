"""Board presets for the quick cash grid."""

from dataclasses import dataclass
from typing import Final

from quick_cash.config import GRID_COLUMNS, GRID_ROWS


@dataclass(frozen=True)
class GridSpec:
    """Dimensions of a rectangular board of cells."""

    rows: int
    columns: int

    @property
    def size(self) -> int:
        return self.rows * self.columns


GRID_STANDARD: Final[GridSpec] = GridSpec(rows=GRID_ROWS, columns=GRID_COLUMNS)

__all__ = [
    "GridSpec",
    "GRID_STANDARD",
]
