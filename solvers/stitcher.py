"""
Image Stitcher

Merges an assembled grid into one composite bitmap after discarding the
border cells each tile used for matching.
"""

import numpy as np

from core.bitmap import strip_border
from core.errors import MalformedTileError
from features.tile import COMPOSITE_ID, Tile
from .assembler import Grid


def stitch_grid(grid: Grid, border: int = 1) -> np.ndarray:
    """
    Concatenate tile interiors row by row.
    
    Args:
        grid: Assembled grid of oriented tiles
        border: Cells stripped from every side of each tile
    
    Returns:
        Bitmap of side grid_side * (tile_side - 2 * border)
    
    Raises:
        MalformedTileError: If the grid is empty or interiors are empty
    """
    if not grid or not grid[0]:
        raise MalformedTileError("Cannot stitch an empty grid")
    
    rows = [np.hstack([strip_border(tile.bitmap, border) for tile in row]) for row in grid]
    composite = np.vstack(rows)
    
    if composite.size == 0:
        raise MalformedTileError(
            f"Tiles of size {grid[0][0].shape} have no interior after stripping {border}"
        )
    return composite


def stitch_tile(grid: Grid, border: int = 1) -> Tile:
    """Stitch the grid into a Tile with the synthetic composite identity."""
    return Tile(COMPOSITE_ID, stitch_grid(grid, border))
