"""Static 2D occupancy grids loaded from PGM maps.

Quick use::

    from occupancy_grids import IncludedGrid, load_grid

    grid = load_grid(IncludedGrid.SIMPLE_ROOM, inflation=0.2, compute_sdf=True)
    grid.is_occupied(1.0, 0.5)   # x -> column, y -> row
    grid.sdf((1.0, 0.5))         # meters to the nearest obstacle (4-connected)
    grid.physical_size()         # (width_m, height_m)
"""

from .errors import (
    BoundsError,
    ConfigError,
    FormatError,
    OccupancyGridError,
    UnavailableFeatureError,
)
from .formats import decode_pgm, encode_pgm, load_pgm, save_pgm
from .grid import (
    CellState,
    DenseOccupancyGrid,
    OccupancyGrid,
    compute_sdf,
    inflate,
    is_occupied,
    physical_size,
    sdf,
)
from .loading import INCLUDED_GRIDS, GridInfo, IncludedGrid, build_grid, load_grid, load_grid_info

__all__ = [
    "OccupancyGridError",
    "FormatError",
    "ConfigError",
    "BoundsError",
    "UnavailableFeatureError",
    "decode_pgm",
    "encode_pgm",
    "load_pgm",
    "save_pgm",
    "CellState",
    "OccupancyGrid",
    "DenseOccupancyGrid",
    "compute_sdf",
    "inflate",
    "is_occupied",
    "physical_size",
    "sdf",
    "GridInfo",
    "IncludedGrid",
    "INCLUDED_GRIDS",
    "build_grid",
    "load_grid",
    "load_grid_info",
]
