"""Utility helpers shared by the loaders and scripts."""

from .config import load_config_any, load_config_dict

__all__ = [
    "load_config_dict",
    "load_config_any",
]
