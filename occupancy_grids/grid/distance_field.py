"""Distance-to-nearest-obstacle field via multi-source breadth-first search.

The grid is treated as a 4-connected graph with uniform edge cost equal to the
resolution, so the result is the grid-geodesic (Manhattan) distance, not the
Euclidean one: a cell diagonal to an obstacle reads 2 * res rather than
sqrt(2) * res. Obstacle cells read 0.0. With no obstacle in the map every
cell stays at +inf.
"""

from __future__ import annotations

from collections import deque

import numpy as np

_NEIGHBORS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def compute_sdf(data: np.ndarray, free_threshold: float, resolution_m: float) -> np.ndarray:
    """Compute the distance field in meters for cells with value > free_threshold as sources.

    Args:
        data: 2D occupancy array in [0, 1].
        free_threshold: cells strictly above this value seed the search.
        resolution_m: meters per cell, the cost of each 4-neighbour step.

    Returns:
        float64 array with the same shape as ``data``.
    """
    grid = np.asarray(data)
    assert grid.ndim == 2
    H, W = grid.shape
    step = float(resolution_m)

    dist = np.full((H, W), np.inf, dtype=np.float64)
    frontier: deque[tuple[int, int, float]] = deque()
    for i, j in np.argwhere(grid > free_threshold):
        dist[i, j] = 0.0
        frontier.append((int(i), int(j), 0.0))

    while frontier:
        i, j, d = frontier.popleft()
        if d > dist[i, j]:
            # Stale entry superseded by a shorter path
            continue
        nd = d + step
        for di, dj in _NEIGHBORS:
            ni, nj = i + di, j + dj
            if 0 <= ni < H and 0 <= nj < W and nd < dist[ni, nj]:
                dist[ni, nj] = nd
                frontier.append((ni, nj, nd))

    return dist
