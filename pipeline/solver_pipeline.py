"""
Solver Pipeline

Orchestrates the full solve:
1. Parse tiles → build the border adjacency index
2. Corner product (checks assembly feasibility without assembling)
3. Assemble the oriented grid → stitch the composite image
4. Search the pattern in every orientation → water roughness
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from core.parsing import load_tiles
from features.tile import Tile
from solvers.assembler import assemble_grid, grid_identities
from solvers.border_index import BorderIndex
from solvers.pattern_matcher import (
    SEA_MONSTER,
    Mask,
    mask_cells,
    mask_pattern
)
from solvers.stitcher import stitch_tile


@dataclass
class SolverConfig:
    """All configurable parameters."""
    # Pattern searched in the stitched image
    pattern: Mask = SEA_MONSTER
    
    # Cells stripped from each tile side before stitching
    border_width: int = 1
    
    # Rendered composite (highlighting the pattern) is written here if set
    output_path: Optional[str] = None
    cell_size: int = 8
    
    verbose: bool = True


@dataclass
class PuzzleResult:
    """
    Outcome of a full solve.
    
    Attributes:
        corner_product: Product of the 4 corner tile ids
        roughness: Set cells left after masking every pattern occurrence
        pattern_count: Occurrences of the pattern found
        grid: (N, N) array of tile ids as assembled
        composite: Stitched image in assembly orientation
        oriented_composite: Composite in the orientation containing the pattern,
            before masking
        masked_composite: Oriented composite with every occurrence cleared
        pattern_cells: Cells covered by pattern occurrences in that orientation
        assembled: grid[row][col] of oriented tiles
    """
    corner_product: int
    roughness: int
    pattern_count: int
    grid: np.ndarray
    composite: np.ndarray = field(repr=False)
    oriented_composite: np.ndarray = field(repr=False)
    masked_composite: np.ndarray = field(repr=False)
    pattern_cells: set = field(default_factory=set, repr=False)
    assembled: list = field(default_factory=list, repr=False)


def build_tiles(pairs: Iterable[Tuple[int, np.ndarray]]) -> List[Tile]:
    """Wrap parsed (identity, bitmap) pairs as tiles."""
    return [Tile(identity, bitmap) for identity, bitmap in pairs]


def solve_puzzle(tiles: Iterable, config: Optional[SolverConfig] = None) -> PuzzleResult:
    """
    Solve a puzzle from tiles or parsed (identity, bitmap) pairs.
    
    Args:
        tiles: Tiles, or (identity, bitmap) pairs
        config: Solver configuration (defaults to SolverConfig())
    
    Returns:
        PuzzleResult
    
    Raises:
        JigsawError: Subclass naming the phase that failed
    """
    config = config or SolverConfig()
    verbose = config.verbose
    
    tiles = [t if isinstance(t, Tile) else Tile(*t) for t in tiles]
    
    if verbose:
        print("\n" + "=" * 60)
        print("PHASE 1: Border Index")
        print("=" * 60)
    
    index = BorderIndex.build(tiles)
    corner_product = index.corner_product()
    
    if verbose:
        print(f"Tiles: {len(index)} ({tiles[0].shape[0]}x{tiles[0].shape[1]})")
        print(f"Corner product: {corner_product}")
    
    if verbose:
        print("\n" + "=" * 60)
        print("PHASE 2: Assembly")
        print("=" * 60)
    
    grid = assemble_grid(index, verbose=verbose)
    composite = stitch_tile(grid, config.border_width)
    
    if verbose:
        print(f"Composite: {composite.shape[0]}x{composite.shape[1]}")
    
    if verbose:
        print("\n" + "=" * 60)
        print("PHASE 3: Pattern Search")
        print("=" * 60)
    
    match = mask_pattern(composite, config.pattern)
    placements = match.placements
    roughness = match.roughness
    
    if verbose:
        print(f"Pattern occurrences: {len(placements)}")
        print(f"Roughness: {roughness}")
    
    result = PuzzleResult(
        corner_product=corner_product,
        roughness=roughness,
        pattern_count=len(placements),
        grid=grid_identities(grid),
        composite=composite.bitmap,
        oriented_composite=match.oriented.bitmap,
        masked_composite=match.masked.bitmap,
        pattern_cells=mask_cells(placements, config.pattern),
        assembled=grid
    )
    
    if config.output_path:
        from visualization.display import save_bitmap
        save_bitmap(result.oriented_composite, config.output_path,
                    cell_size=config.cell_size, highlight=result.pattern_cells)
        if verbose:
            print(f"\nSaved: {config.output_path}")
    
    return result


def solve_file(file_path: str, config: Optional[SolverConfig] = None) -> PuzzleResult:
    """Complete pipeline: load puzzle text → solve."""
    config = config or SolverConfig()
    pairs = load_tiles(file_path)
    
    if config.verbose:
        print(f"Loaded: {file_path}")
    
    return solve_puzzle(pairs, config)
