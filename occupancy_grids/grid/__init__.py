"""Occupancy grid data model and the algorithms that build it."""

from .base import CellState, OccupancyGrid, is_occupied, physical_size, sdf
from .coords import cell_to_world, unpack_point, world_to_cell
from .dense import DenseOccupancyGrid
from .distance_field import compute_sdf
from .inflation import inflate, inflation_cells, negate

__all__ = [
    "CellState",
    "OccupancyGrid",
    "DenseOccupancyGrid",
    "is_occupied",
    "sdf",
    "physical_size",
    "world_to_cell",
    "cell_to_world",
    "unpack_point",
    "inflate",
    "inflation_cells",
    "negate",
    "compute_sdf",
]
