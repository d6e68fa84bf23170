"""
Puzzle solvers - exact border matching.

Usage:
    from solvers import BorderIndex, assemble_grid, stitch_tile, water_roughness
    
    index = BorderIndex.build(tiles)
    grid = assemble_grid(index)
    roughness = water_roughness(stitch_tile(grid))
"""
from .border_index import BorderIndex, validate_tiles
from .assembler import assemble_grid, grid_identities, seam_mismatches
from .stitcher import stitch_grid, stitch_tile
from .pattern_matcher import (
    Mask,
    SEA_MONSTER,
    mask_offsets,
    matches_mask,
    mask_all,
    find_pattern_orientation,
    water_roughness
)
