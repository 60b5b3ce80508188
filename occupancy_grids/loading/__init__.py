"""Grid metadata loading and the grid factory."""

from .factory import INCLUDED_GRIDS, IncludedGrid, build_grid, load_grid
from .info import GridInfo, load_grid_data, load_grid_info

__all__ = [
    "GridInfo",
    "IncludedGrid",
    "INCLUDED_GRIDS",
    "build_grid",
    "load_grid",
    "load_grid_data",
    "load_grid_info",
]
