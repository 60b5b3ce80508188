"""Obstacle inflation for normalized occupancy matrices (1 = occupied)."""

from __future__ import annotations

import math

import numpy as np
from scipy.signal import convolve2d


def inflation_cells(radius_m: float, resolution_m: float) -> int:
    """Number of cells covered by an inflation radius, ``ceil(radius / res)``."""
    if radius_m <= 0.0:
        return 0
    return int(math.ceil(float(radius_m) / float(resolution_m)))


def negate(data: np.ndarray) -> np.ndarray:
    """Flip polarity so dark raster pixels (obstacles) become high occupancy."""
    return 1.0 - np.asarray(data, dtype=np.float64)


def inflate(data: np.ndarray, radius_m: float, resolution_m: float) -> np.ndarray:
    """Grow occupied regions with a square box filter of side ``inflation_cells``.

    Args:
        data: 2D float array in [0, 1], higher = more occupied.
        radius_m: inflation radius in meters; <= 0 is a no-op.
        resolution_m: meters per cell.

    Returns:
        New 2D float array of the same shape, clamped to [0, 1].
    """
    grid = np.asarray(data, dtype=np.float64)
    assert grid.ndim == 2
    k = inflation_cells(radius_m, resolution_m)
    if k <= 1:
        return grid.copy()

    kernel = np.ones((k, k), dtype=np.float64)
    full = convolve2d(grid, kernel, mode="full")
    # Full output is (H + k - 1, W + k - 1); keep the window starting at the
    # 1-based index ceil(k / 2), i.e. 0-based offset ceil(k / 2) - 1.
    start = int(math.ceil(k / 2)) - 1
    H, W = grid.shape
    out = full[start : start + H, start : start + W]
    return np.clip(out, 0.0, 1.0)
