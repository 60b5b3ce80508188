"""Dense-matrix occupancy grid backend."""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import numpy as np

from ..constants import DEFAULT_FREE_THRESHOLD, DEFAULT_OCCUPIED_THRESHOLD
from ..errors import UnavailableFeatureError
from .base import OccupancyGrid
from .coords import cell_to_world, physical_size, unpack_point, world_to_cell
from .distance_field import compute_sdf as _sdf_field
from .inflation import inflate, negate

logger = logging.getLogger(__name__)


def _frozen_copy(arr: np.ndarray) -> np.ndarray:
    out = np.array(arr, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out


class DenseOccupancyGrid(OccupancyGrid):
    """Occupancy grid stored as a dense float matrix.

    Grid convention: ``data[row - 1, col - 1]`` covers
    x in [(col-1)*res, col*res) and y in [(row-1)*res, row*res), so rows
    follow y and columns follow x. Higher values mean more likely occupied.

    Args:
        data: 2D array in [0, 1]; copied and made read-only.
        resolution: meters per cell, > 0.
        occupied_threshold: values above this are definitely occupied.
        free_threshold: values above this count as occupied for ``is_occupied``
            and seed the distance field.
        sdf: optional precomputed distance field, same shape as ``data``.
    """

    def __init__(
        self,
        data: np.ndarray,
        resolution: float,
        occupied_threshold: float = DEFAULT_OCCUPIED_THRESHOLD,
        free_threshold: float = DEFAULT_FREE_THRESHOLD,
        sdf: Optional[np.ndarray] = None,
    ) -> None:
        data = np.asarray(data)
        if data.ndim != 2 or data.size == 0:
            raise ValueError(f"data must be a non-empty 2D matrix, got shape {data.shape}")
        if not resolution > 0.0:
            raise ValueError(f"resolution must be > 0, got {resolution}")
        if not 0.0 <= free_threshold <= occupied_threshold <= 1.0:
            raise ValueError(
                "thresholds must satisfy 0 <= free <= occupied <= 1, "
                f"got free={free_threshold} occupied={occupied_threshold}"
            )
        if np.any(data < 0.0) or np.any(data > 1.0):
            raise ValueError("data values must lie in [0, 1]")
        if sdf is not None and np.shape(sdf) != data.shape:
            raise ValueError(f"sdf shape {np.shape(sdf)} != data shape {data.shape}")

        self._data = _frozen_copy(data)
        self._sdf = None if sdf is None else _frozen_copy(sdf)
        self.grid_resolution = float(resolution)
        self.inv_resolution = 1.0 / self.grid_resolution
        self.occupied_threshold = float(occupied_threshold)
        self.free_threshold = float(free_threshold)

    @classmethod
    def from_raster(
        cls,
        raster: np.ndarray,
        resolution: float,
        occupied_threshold: float = DEFAULT_OCCUPIED_THRESHOLD,
        free_threshold: float = DEFAULT_FREE_THRESHOLD,
        *,
        inflation: float = 0.0,
        negate_input: bool = True,
        compute_sdf: bool = False,
    ) -> "DenseOccupancyGrid":
        """Build a grid from a decoded raster: negate -> inflate -> SDF.

        ``negate_input`` flips polarity so dark pixels become obstacles; pass
        False for rasters that already store occupancy (1 = occupied).
        """
        data = np.asarray(raster, dtype=np.float64)
        if negate_input:
            data = negate(data)
        if inflation > 0.0:
            data = inflate(data, inflation, resolution)
        field = _sdf_field(data, free_threshold, resolution) if compute_sdf else None
        grid = cls(data, resolution, occupied_threshold, free_threshold, sdf=field)
        logger.debug(
            "Built dense grid shape=%s res=%.3f negate=%s inflation=%.3f sdf=%s",
            grid.shape,
            grid.grid_resolution,
            negate_input,
            inflation,
            field is not None,
        )
        return grid

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def sdf_matrix(self) -> Optional[np.ndarray]:
        return self._sdf

    @property
    def has_sdf(self) -> bool:
        return self._sdf is not None

    @property
    def resolution(self) -> float:
        return self.grid_resolution

    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self._data.shape
        return int(rows), int(cols)

    def world_to_cell(self, x: Any, y: Optional[float] = None) -> Tuple[int, int]:
        """1-based (row, col) of the cell containing (x, y)."""
        px, py = unpack_point(x, y)
        return world_to_cell(px, py, self.inv_resolution, self.shape)

    def cell_to_world(self, row: int, col: int) -> Tuple[float, float]:
        """World (x, y) at the centre of 1-based cell (row, col)."""
        return cell_to_world(row, col, self.grid_resolution, self.shape)

    def value(self, x: Any, y: Optional[float] = None) -> float:
        row, col = self.world_to_cell(x, y)
        return float(self._data[row - 1, col - 1])

    def sdf(self, x: Any, y: Optional[float] = None) -> float:
        if self._sdf is None:
            raise UnavailableFeatureError("SDF not computed; build the grid with compute_sdf=True")
        row, col = self.world_to_cell(x, y)
        return float(self._sdf[row - 1, col - 1])

    def physical_size(self) -> Tuple[float, float]:
        return physical_size(self.shape, self.grid_resolution)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={self.shape}, resolution={self.grid_resolution}, "
            f"occupied_threshold={self.occupied_threshold}, free_threshold={self.free_threshold}, "
            f"sdf={self.has_sdf})"
        )
