"""Capability interface shared by occupancy grid backends."""

from __future__ import annotations

import abc
import enum
from typing import Any, Optional, Tuple


class CellState(enum.Enum):
    """Three-way classification using both thresholds."""

    FREE = "free"
    UNKNOWN = "unknown"
    OCCUPIED = "occupied"


class OccupancyGrid(abc.ABC):
    """Read-only 2D occupancy map queried in world coordinates (meters).

    Backends implement ``value``, ``sdf``, ``physical_size`` and ``shape``;
    the threshold logic below is shared. Points may be given as ``(x, y)``
    arguments, a 2-tuple, or any 2-element sequence.
    """

    occupied_threshold: float
    free_threshold: float

    @property
    @abc.abstractmethod
    def shape(self) -> Tuple[int, int]:
        """(rows, cols) of the underlying cell matrix."""

    @abc.abstractmethod
    def value(self, x: Any, y: Optional[float] = None) -> float:
        """Normalized occupancy in [0, 1] of the cell containing (x, y)."""

    @abc.abstractmethod
    def sdf(self, x: Any, y: Optional[float] = None) -> float:
        """Distance in meters from (x, y) to the nearest obstacle cell."""

    @abc.abstractmethod
    def physical_size(self) -> Tuple[float, float]:
        """(width, height) of the map in meters."""

    def is_occupied(self, x: Any, y: Optional[float] = None, *, strict: bool = False) -> bool:
        """True if the cell value exceeds ``free_threshold``.

        With ``strict=True`` the cell must exceed ``occupied_threshold``
        instead, so cells in the unknown band between the thresholds count
        as not occupied.

        Raises:
            BoundsError: if (x, y) falls outside the grid.
        """
        threshold = self.occupied_threshold if strict else self.free_threshold
        return self.value(x, y) > threshold

    def cell_state(self, x: Any, y: Optional[float] = None) -> CellState:
        v = self.value(x, y)
        if v > self.occupied_threshold:
            return CellState.OCCUPIED
        if v < self.free_threshold:
            return CellState.FREE
        return CellState.UNKNOWN


def is_occupied(grid: OccupancyGrid, x: Any, y: Optional[float] = None, *, strict: bool = False) -> bool:
    return grid.is_occupied(x, y, strict=strict)


def sdf(grid: OccupancyGrid, x: Any, y: Optional[float] = None) -> float:
    return grid.sdf(x, y)


def physical_size(grid: OccupancyGrid) -> Tuple[float, float]:
    return grid.physical_size()
