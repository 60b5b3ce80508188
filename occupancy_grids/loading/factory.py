"""Grid factory: build occupancy grids from bundled maps, directories or in-memory rasters.

Sources accepted by :func:`load_grid`:
1. An ``IncludedGrid`` member (or its name/value as a string) looked up in a
   registry table mapping names to map directories.
2. A directory containing ``grid_info.yaml`` and the raster it names.
3. A ``GridInfo`` together with an already decoded raster matrix.
"""

from __future__ import annotations

import enum
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

import numpy as np

from ..errors import ConfigError
from ..grid.dense import DenseOccupancyGrid
from .info import GridInfo, load_grid_data, load_grid_info

logger = logging.getLogger(__name__)

MAPS_DIR = Path(__file__).resolve().parent.parent / "maps"


class IncludedGrid(enum.Enum):
    """Maps shipped with the package."""

    SIMPLE_ROOM = "simple_room"
    CORRIDOR = "corridor"


INCLUDED_GRIDS: Mapping[IncludedGrid, Path] = MappingProxyType(
    {grid: MAPS_DIR / grid.value for grid in IncludedGrid}
)

GridSource = Union[IncludedGrid, GridInfo, str, "os.PathLike[str]"]


def _resolve_included(name: Union[IncludedGrid, str], registry: Mapping[IncludedGrid, Path]) -> Optional[Path]:
    if isinstance(name, IncludedGrid):
        key = name
    else:
        key = next(
            (g for g in IncludedGrid if name.lower() in (g.name.lower(), g.value)),
            None,
        )
        if key is None:
            return None
    if key not in registry:
        raise ConfigError(f"Grid '{key.name}' is not in the supplied registry")
    return Path(registry[key])


def build_grid(
    info: GridInfo,
    data: np.ndarray,
    *,
    inflation: float = 0.0,
    negate: bool = False,
    compute_sdf: bool = False,
) -> DenseOccupancyGrid:
    """Construct a dense grid from metadata and a decoded raster.

    The raster is inverted (dark = occupied) unless ``negate`` or
    ``info.negate`` is set.
    """
    skip_inversion = bool(negate or info.negate)
    return DenseOccupancyGrid.from_raster(
        data,
        info.resolution,
        info.occupied_threshold,
        info.free_threshold,
        inflation=float(inflation),
        negate_input=not skip_inversion,
        compute_sdf=compute_sdf,
    )


def load_grid(
    source: GridSource,
    data: Optional[np.ndarray] = None,
    *,
    inflation: float = 0.0,
    negate: bool = False,
    compute_sdf: bool = False,
    registry: Mapping[IncludedGrid, Path] = INCLUDED_GRIDS,
) -> DenseOccupancyGrid:
    """Load an occupancy grid.

    Args:
        source: bundled grid name, map directory, or ``GridInfo``.
        data: decoded raster; required with a ``GridInfo`` source, rejected otherwise.
        inflation: obstacle inflation radius in meters (0 disables).
        negate: True when the raster already stores occupancy (skip inversion).
        compute_sdf: precompute the distance field so ``grid.sdf`` works.
        registry: table of bundled grid directories.

    Raises:
        ConfigError: unknown source, unsupported file type or invalid metadata.
        FormatError: malformed raster file.
    """
    if isinstance(source, GridInfo):
        if data is None:
            raise ConfigError("A GridInfo source needs the raster matrix as `data`")
        info = source
        raster = np.asarray(data, dtype=np.float64)
        origin = "<memory>"
    else:
        if data is not None:
            raise ConfigError("`data` is only accepted together with a GridInfo source")
        directory = None
        if isinstance(source, (IncludedGrid, str)):
            directory = _resolve_included(source, registry)
        if directory is None:
            directory = Path(source)
        if not directory.is_dir():
            raise ConfigError(f"Grid directory not found: {directory}")
        info = load_grid_info(directory)
        raster = load_grid_data(directory, info)
        origin = str(directory)

    grid = build_grid(info, raster, inflation=inflation, negate=negate, compute_sdf=compute_sdf)
    width_m, height_m = grid.physical_size()
    logger.info(
        "Loaded occupancy grid from %s: cells=%dx%d size=(%.2f m, %.2f m) res=%.3f inflation=%.2f sdf=%s",
        origin,
        grid.shape[1],
        grid.shape[0],
        width_m,
        height_m,
        grid.resolution,
        inflation,
        grid.has_sdf,
    )
    return grid
