"""
Grid Assembler

Turns pairwise border adjacency into a fully oriented square grid.

Algorithm:
- Orient a corner tile so its two unshared borders face top and left
- Walk down from it to collect the row starts (first column)
- Walk right from every row start to fill that row
"""

import numpy as np
from typing import List, Optional, Tuple, Union

from core.errors import AssemblyError
from features.orientation import orient_until
from features.tile import Tile
from .border_index import BorderIndex


Grid = List[List[Tile]]


def orient_top_left(corner: Tile, index: BorderIndex) -> Optional[Tile]:
    """Orient a corner so neither its top nor its left border is shared."""
    return orient_until(
        corner,
        lambda t: not index.is_side_shared(t, 'top') and not index.is_side_shared(t, 'left')
    )


def walk(start: Tile, side: str, index: BorderIndex, limit: int) -> List[Tile]:
    """
    Follow neighbors across `side` until the outer boundary.
    
    Raises:
        AssemblyError: If the walk runs past `limit` tiles
    """
    line = [start]
    current = start
    while True:
        current = index.find_and_orient_neighbor(current, side)
        if current is None:
            return line
        line.append(current)
        if len(line) > limit:
            raise AssemblyError(
                f"Walk {side} from tile {start.identity} exceeded {limit} tiles"
            )


def assemble_grid(tiles: Union[BorderIndex, List[Tile]], verbose: bool = False) -> Grid:
    """
    Assemble tiles into a row-major grid of oriented tiles.
    
    Args:
        tiles: Prebuilt BorderIndex, or the raw tiles to index
        verbose: Print progress info
    
    Returns:
        grid[row][col] of oriented tiles; every internal edge matches exactly
    
    Raises:
        AssemblyError: If no starting corner exists or a walk falls short
    """
    index = tiles if isinstance(tiles, BorderIndex) else BorderIndex.build(tiles)
    side = index.grid_side()
    
    corners = index.corners()
    if not corners:
        raise AssemblyError("No corner tile found")
    
    top_left = orient_top_left(corners[0], index)
    if top_left is None:
        raise AssemblyError(f"Corner tile {corners[0].identity} has no top-left orientation")
    
    if verbose:
        print(f"Corners: {[tile.identity for tile in corners]}")
        print(f"Starting from tile {top_left.identity} ({side}x{side} grid)")
    
    first_column = walk(top_left, 'bottom', index, side)
    if len(first_column) != side:
        raise AssemblyError(
            f"Failed to build full image: column has {len(first_column)} of {side} tiles"
        )
    
    grid = []
    for r, row_start in enumerate(first_column):
        row = walk(row_start, 'right', index, side)
        if len(row) != side:
            raise AssemblyError(
                f"Failed to build full image: row {r} has {len(row)} of {side} tiles"
            )
        grid.append(row)
    
    placed = {tile.identity for row in grid for tile in row}
    if len(placed) != len(index):
        raise AssemblyError(
            f"Failed to build full image: placed {len(placed)} distinct of {len(index)} tiles"
        )
    
    if verbose:
        print(f"Assembled grid:\n{grid_identities(grid)}")
    
    return grid


def grid_identities(grid: Grid) -> np.ndarray:
    """(N, N) array of tile ids."""
    return np.array([[tile.identity for tile in row] for row in grid], dtype=np.int64)


def seam_mismatches(grid: Grid) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """
    Adjacent cell pairs whose touching borders differ.
    
    Only RIGHT and BOTTOM neighbors are checked, so each seam appears once.
    """
    mismatches = []
    rows = len(grid)
    for r in range(rows):
        cols = len(grid[r])
        for c in range(cols):
            tile = grid[r][c]
            if c + 1 < cols and tile.side_facing('right') != grid[r][c + 1].side_facing('left'):
                mismatches.append(((r, c), (r, c + 1)))
            if r + 1 < rows and c < len(grid[r + 1]) and \
                    tile.side_facing('bottom') != grid[r + 1][c].side_facing('top'):
                mismatches.append(((r, c), (r + 1, c)))
    return mismatches
