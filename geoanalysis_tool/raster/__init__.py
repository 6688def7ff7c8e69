"""
Raster Package

Raster grid I/O used by the built-in tools.
"""
from .ascii_grid import Raster, read_ascii_grid, write_ascii_grid

__all__ = [
    'Raster',
    'read_ascii_grid',
    'write_ascii_grid',
]
