"""Error types raised while decoding, loading and querying occupancy grids."""

from __future__ import annotations


class OccupancyGridError(Exception):
    """Base class for all package errors."""


class FormatError(OccupancyGridError, ValueError):
    """Malformed raster data (bad magic, header fields or truncated samples)."""


class ConfigError(OccupancyGridError, ValueError):
    """Unsupported or invalid grid configuration."""


class BoundsError(OccupancyGridError, IndexError):
    """World coordinates map outside the grid extent."""

    def __init__(self, index: tuple[int, int], shape: tuple[int, int]) -> None:
        self.index = index
        self.shape = shape
        super().__init__(f"Cell {index} outside grid of shape {shape} (1-based rows, cols)")


class UnavailableFeatureError(OccupancyGridError, RuntimeError):
    """A query needs data that was not computed when the grid was built."""


__all__ = [
    "OccupancyGridError",
    "FormatError",
    "ConfigError",
    "BoundsError",
    "UnavailableFeatureError",
]
