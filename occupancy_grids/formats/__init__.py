"""Raster file formats."""

from .pgm import decode_pgm, encode_pgm, load_pgm, save_pgm

__all__ = ["decode_pgm", "encode_pgm", "load_pgm", "save_pgm"]
