from __future__ import annotations

# Grid metadata defaults (grid_info.yaml)
DEFAULT_FILE_TYPE: str = "pgm"
DEFAULT_GRID_FILE: str = "grid.pgm"
GRID_INFO_FILENAME: str = "grid_info.yaml"
DEFAULT_RESOLUTION_M: float = 0.1
DEFAULT_ORIGIN: tuple[float, float, float] = (0.0, 0.0, 0.0)
DEFAULT_NEGATE: bool = False

# Occupancy thresholds on the normalized [0, 1] scale
DEFAULT_OCCUPIED_THRESHOLD: float = 0.65
DEFAULT_FREE_THRESHOLD: float = 0.35

# PGM limits
PGM_MAGIC: bytes = b"P5"
PGM_MAXVAL_LIMIT: int = 65535
