"""Grid metadata (``grid_info.yaml``) and raster loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import numpy as np

from ..constants import (
    DEFAULT_FILE_TYPE,
    DEFAULT_FREE_THRESHOLD,
    DEFAULT_GRID_FILE,
    DEFAULT_NEGATE,
    DEFAULT_OCCUPIED_THRESHOLD,
    DEFAULT_ORIGIN,
    DEFAULT_RESOLUTION_M,
    GRID_INFO_FILENAME,
)
from ..errors import ConfigError
from ..formats.pgm import load_pgm
from ..utils.config import load_config_dict

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class GridInfo:
    """Metadata describing how to turn a raster file into an occupancy grid.

    - file_type: raster format, only "pgm" is supported
    - grid_file: raster path relative to the map directory
    - resolution: meters per cell
    - origin: (x, y, yaw) of the map frame; carried along, not used by queries
    - negate: True when the raster already stores occupancy (skip inversion)
    - occupied_threshold / free_threshold: cutoffs on the [0, 1] scale
    """

    file_type: str = DEFAULT_FILE_TYPE
    grid_file: str = DEFAULT_GRID_FILE
    resolution: float = DEFAULT_RESOLUTION_M
    origin: Tuple[float, float, float] = DEFAULT_ORIGIN
    negate: bool = DEFAULT_NEGATE
    occupied_threshold: float = DEFAULT_OCCUPIED_THRESHOLD
    free_threshold: float = DEFAULT_FREE_THRESHOLD

    def __post_init__(self) -> None:
        if not self.resolution > 0.0:
            raise ConfigError(f"resolution must be > 0, got {self.resolution}")
        for name in ("occupied_threshold", "free_threshold"):
            v = getattr(self, name)
            if not 0.0 <= v <= 1.0:
                raise ConfigError(f"{name} must be in [0, 1], got {v}")
        if self.free_threshold > self.occupied_threshold:
            raise ConfigError(
                f"free_threshold ({self.free_threshold}) must not exceed "
                f"occupied_threshold ({self.occupied_threshold})"
            )
        if len(self.origin) != 3:
            raise ConfigError(f"origin must have 3 components, got {len(self.origin)}")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "GridInfo":
        """Build from a parsed mapping, filling defaults for missing keys."""
        try:
            origin = tuple(float(v) for v in cfg.get("origin", DEFAULT_ORIGIN))
            return cls(
                file_type=str(cfg.get("file_type", DEFAULT_FILE_TYPE)),
                grid_file=str(cfg.get("grid_file", DEFAULT_GRID_FILE)),
                resolution=float(cfg.get("resolution", DEFAULT_RESOLUTION_M)),
                origin=origin,  # type: ignore[arg-type]
                negate=bool(cfg.get("negate", DEFAULT_NEGATE)),
                occupied_threshold=float(cfg.get("occupied_threshold", DEFAULT_OCCUPIED_THRESHOLD)),
                free_threshold=float(cfg.get("free_threshold", DEFAULT_FREE_THRESHOLD)),
            )
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid grid info: {exc}") from exc


def load_grid_info(directory: PathLike) -> GridInfo:
    """Read ``grid_info.yaml`` from a map directory."""
    info_path = Path(directory) / GRID_INFO_FILENAME
    if not info_path.is_file():
        raise ConfigError(f"No {GRID_INFO_FILENAME} in {directory}")
    return GridInfo.from_dict(load_config_dict(str(info_path)))


def load_grid_data(directory: PathLike, info: GridInfo) -> np.ndarray:
    """Decode the raster named by ``info`` into a normalized matrix."""
    data_path = Path(directory) / info.grid_file
    if info.file_type == "pgm":
        logger.debug("Loading PGM raster %s", data_path)
        return load_pgm(data_path)
    raise ConfigError(f"Unsupported file type: {info.file_type}")
