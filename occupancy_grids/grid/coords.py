"""World <-> cell coordinate mapping.

Convention (fixed for the whole package):
- x (meters) selects the column, y (meters) selects the row.
- Indices are 1-based: cell (row, col) covers
  [(col-1)*res, col*res) x [(row-1)*res, row*res).
- Anything outside [1, rows] x [1, cols] raises BoundsError; no clamping.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from ..errors import BoundsError


def unpack_point(x: Any, y: Optional[float] = None) -> Tuple[float, float]:
    """Accept ``(x, y)`` or a single 2-element tuple/sequence/array."""
    if y is not None:
        return float(x), float(y)
    if isinstance(x, (str, bytes)) or not isinstance(x, (Sequence, np.ndarray)):
        raise TypeError(f"Expected a 2-element point, got {type(x).__name__}")
    if len(x) != 2:
        raise ValueError(f"Expected a 2-element point, got {len(x)} elements")
    return float(x[0]), float(x[1])


def check_cell(row: int, col: int, shape: Tuple[int, int]) -> None:
    rows, cols = shape
    if row < 1 or row > rows or col < 1 or col > cols:
        raise BoundsError((row, col), (rows, cols))


def world_to_cell(x: float, y: float, inv_resolution: float, shape: Tuple[int, int]) -> Tuple[int, int]:
    """Map world meters to 1-based (row, col)."""
    fx = x * inv_resolution
    fy = y * inv_resolution
    if not (math.isfinite(fx) and math.isfinite(fy)):
        raise BoundsError((0, 0), (int(shape[0]), int(shape[1])))
    row = math.floor(fy) + 1
    col = math.floor(fx) + 1
    check_cell(row, col, shape)
    return row, col


def cell_to_world(row: int, col: int, resolution: float, shape: Tuple[int, int]) -> Tuple[float, float]:
    """Return the world (x, y) of the centre of 1-based cell (row, col)."""
    check_cell(row, col, shape)
    return (col - 0.5) * resolution, (row - 0.5) * resolution


def physical_size(shape: Tuple[int, int], resolution: float) -> Tuple[float, float]:
    """(width, height) in meters: columns span x, rows span y."""
    rows, cols = shape
    return cols * resolution, rows * resolution
