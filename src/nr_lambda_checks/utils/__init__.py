"""Utility modules (path)."""

from .path import path_exists

__all__ = [
    "path_exists",
]
