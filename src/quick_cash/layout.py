"""Rectangular board topology with four-way adjacency."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from quick_cash.boards.board_specs import GRID_STANDARD, GridSpec


def neighbor_coords_4(row: int, column: int) -> list[tuple[int, int]]:
    """Return up/down/left/right coordinates without bounds filtering."""

    return [(row - 1, column), (row + 1, column), (row, column - 1), (row, column + 1)]


@dataclass(frozen=True)
class GridTopology:
    """Row-major indexed grid; neighbour sets are computed once on creation."""

    rows: int
    columns: int
    _neighbors: tuple[frozenset[int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.rows < 1 or self.columns < 1:
            raise ValueError("Grid needs at least one row and one column.")

        neighbors = []
        for index in range(self.rows * self.columns):
            row, column = divmod(index, self.columns)
            neighbors.append(
                frozenset(
                    self.index_of(r, c)
                    for r, c in neighbor_coords_4(row, column)
                    if self.in_bounds(r, c)
                )
            )
        object.__setattr__(self, "_neighbors", tuple(neighbors))

    @classmethod
    def from_spec(cls, spec: GridSpec = GRID_STANDARD) -> "GridTopology":
        return cls(rows=spec.rows, columns=spec.columns)

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def index_of(self, row: int, column: int) -> int:
        return row * self.columns + column

    def coord_of(self, index: int) -> tuple[int, int]:
        return divmod(index, self.columns)

    def neighbors(self, index: int) -> frozenset[int]:
        return self._neighbors[index]

    def is_connected(self, indices) -> bool:
        """True when ``indices`` form a single four-connected region."""

        cells = set(indices)
        if not cells:
            return True

        start = next(iter(cells))
        reached = {start}
        queue = deque([start])
        while queue:
            index = queue.popleft()
            for neighbor in self._neighbors[index]:
                if neighbor in cells and neighbor not in reached:
                    reached.add(neighbor)
                    queue.append(neighbor)
        return reached == cells


__all__ = [
    "GridTopology",
    "neighbor_coords_4",
]
