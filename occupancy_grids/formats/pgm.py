"""Binary PGM (P5) raster reading and writing.

Layout handled here (https://netpbm.sourceforge.net/doc/pgm.html):

    P5\n
    # optional comment lines\n
    <width> <height>\n
    <maxval>\n
    <width * height samples, 1 byte if maxval < 256 else 2 bytes big-endian>

Decoded rasters are float64 arrays of shape (height, width) with values in [0, 1].
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Optional, Union

import numpy as np

from ..constants import PGM_MAGIC, PGM_MAXVAL_LIMIT
from ..errors import FormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _read_header_line(stream: BinaryIO, what: str) -> bytes:
    line = stream.readline()
    if not line:
        raise FormatError(f"Invalid PGM file -- unexpected end of file while reading {what}")
    return line


def _parse_positive_int(token: bytes, what: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise FormatError(f"Invalid PGM file -- {what} is not an integer: {token!r}") from None
    if value <= 0:
        raise FormatError(f"Invalid PGM file -- {what} must be positive, got {value}")
    return value


def _sample_dtype(max_value: int) -> np.dtype:
    return np.dtype(np.uint8) if max_value < 256 else np.dtype(">u2")


def decode_pgm(stream: BinaryIO) -> np.ndarray:
    """Decode a binary PGM stream into a normalized (height, width) float matrix.

    Raises:
        FormatError: bad magic token, wrong number of dimension fields, maxval
            outside [1, 65535], samples above maxval, or truncated sample data.
    """
    magic = _read_header_line(stream, "magic number").strip()
    if magic != PGM_MAGIC:
        raise FormatError(f"Invalid PGM file -- {magic!r} != {PGM_MAGIC!r}")

    # Comments may only appear between the magic number and the dimensions
    line = _read_header_line(stream, "dimensions")
    while line.startswith(b"#"):
        line = _read_header_line(stream, "dimensions")

    dimensions = line.split()
    if len(dimensions) != 2:
        raise FormatError(f"Invalid PGM file -- expected 2 dimension fields, got {len(dimensions)}")
    width = _parse_positive_int(dimensions[0], "width")
    height = _parse_positive_int(dimensions[1], "height")

    max_value = _parse_positive_int(_read_header_line(stream, "maxval").strip(), "maxval")
    if max_value > PGM_MAXVAL_LIMIT:
        raise FormatError(f"Invalid PGM file -- maxval {max_value} exceeds {PGM_MAXVAL_LIMIT}")

    dtype = _sample_dtype(max_value)
    n_samples = width * height
    n_bytes = n_samples * dtype.itemsize
    buf = stream.read(n_bytes)
    if len(buf) < n_bytes:
        raise FormatError(f"Invalid PGM file -- expected {n_bytes} bytes of samples, got {len(buf)}")

    samples = np.frombuffer(buf, dtype=dtype, count=n_samples)
    peak = int(samples.max())
    if peak > max_value:
        raise FormatError(f"Invalid PGM file -- sample {peak} exceeds maxval {max_value}")

    logger.debug("Decoded PGM %dx%d maxval=%d (%d-bit)", width, height, max_value, 8 * dtype.itemsize)
    return samples.reshape((height, width)).astype(np.float64) / float(max_value)


def load_pgm(file_path: PathLike) -> np.ndarray:
    """Read and decode a ``.pgm`` file from disk."""
    path = Path(file_path)
    if path.suffix.lower() != ".pgm":
        raise FormatError(f"File must be a .pgm file: {path}")
    with path.open("rb") as f:
        return decode_pgm(f)


def encode_pgm(matrix: np.ndarray, max_value: int = 255, comment: Optional[str] = None) -> bytes:
    """Quantize a [0, 1] matrix into P5 bytes, the inverse of :func:`decode_pgm`."""
    arr = np.asarray(matrix, dtype=np.float64)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2D matrix, got shape {arr.shape}")
    if not 0 < int(max_value) <= PGM_MAXVAL_LIMIT:
        raise ValueError(f"max_value must be in [1, {PGM_MAXVAL_LIMIT}], got {max_value}")
    max_value = int(max_value)
    height, width = arr.shape
    samples = np.rint(np.clip(arr, 0.0, 1.0) * max_value).astype(_sample_dtype(max_value))

    header = [PGM_MAGIC]
    if comment:
        header.extend(b"# " + part.encode("ascii") for part in comment.splitlines())
    header.append(f"{width} {height}".encode("ascii"))
    header.append(str(max_value).encode("ascii"))
    return b"\n".join(header) + b"\n" + samples.tobytes()


def save_pgm(
    file_path: PathLike, matrix: np.ndarray, max_value: int = 255, comment: Optional[str] = None
) -> Path:
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_pgm(matrix, max_value=max_value, comment=comment))
    return path


__all__ = ["decode_pgm", "load_pgm", "encode_pgm", "save_pgm"]
