"""Board presets and cell allocation helpers."""

from .board_specs import GRID_STANDARD, GridSpec
from .clustering import allocate_cluster, free_cells

__all__ = [
    "GRID_STANDARD",
    "GridSpec",
    "allocate_cluster",
    "free_cells",
]
