"""Shared fixtures: the canonical 3x3 example puzzle."""

import os
import sys

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.parsing import parse_tiles
from features.tile import Tile
from solvers.border_index import BorderIndex


EXAMPLE_INPUT = """\
Tile 2311:
..##.#..#.
##..#.....
#...##..#.
####.#...#
##.##.###.
##...#.###
.#.#.#..##
..#....#..
###...#.#.
..###..###

Tile 1951:
#.##...##.
#.####...#
.....#..##
#...######
.##.#....#
.###.#####
###.##.##.
.###....#.
..#.#..#.#
#...##.#..

Tile 1171:
####...##.
#..##.#..#
##.#..#.#.
.###.####.
..###.####
.##....##.
.#...####.
#.##.####.
####..#...
.....##...

Tile 1427:
###.##.#..
.#..#.##..
.#.##.#..#
#.#.#.##.#
....#...##
...##..##.
...#.#####
.#.####.#.
..#..###.#
..##.#..#.

Tile 1489:
##.#.#....
..##...#..
.##..##...
..#...#...
#####...#.
#..#.#.#.#
...#.#.#..
##.#...##.
..##.##.##
###.##.#..

Tile 2473:
#....####.
#..#.##...
#.##..#...
######.#.#
.#...#.#.#
.#########
.###.#..#.
########.#
##...##.#.
..###.#.#.

Tile 2971:
..#.#....#
#...###...
#.#.###...
##.##..#..
.#####..##
.#..####.#
#..#.#..#.
..####.###
..#.#.###.
...#.#.#.#

Tile 2729:
...#.#.#.#
####.#....
..#.#.....
....#..#.#
.##..##.#.
.#.####...
####.#.#..
##.####...
##..#.##..
#.##...##.

Tile 3079:
#.#.#####.
.#..######
..#.......
######....
####.#..#.
.#...#.##.
#.#####.##
..#.###...
..#.......
..#.###...
"""

# Solved layout of the example, up to a global symmetry
EXAMPLE_LAYOUT = [
    [1951, 2311, 3079],
    [2729, 1427, 2473],
    [2971, 1489, 1171],
]


@pytest.fixture
def example_pairs():
    return parse_tiles(EXAMPLE_INPUT)


@pytest.fixture
def example_tiles(example_pairs):
    return [Tile(identity, bitmap) for identity, bitmap in example_pairs]


@pytest.fixture
def example_index(example_tiles):
    return BorderIndex.build(example_tiles)


def tiles_by_id(tiles, ids):
    """Subset of tiles, in the order of `ids`."""
    lookup = {tile.identity: tile for tile in tiles}
    return [lookup[tid] for tid in ids]


def make_puzzle(grid_side, tile_side=24, seed=0):
    """
    Cut a random image into shuffled, randomly oriented tiles.
    
    Neighboring tiles overlap by one row/column so their borders match
    exactly. Returns (tiles, expected composite up to orientation).
    """
    from features.orientation import orientations
    
    rng = np.random.default_rng(seed)
    step = tile_side - 1
    size = grid_side * step + 1
    image = rng.random((size, size)) < 0.5
    
    tiles = []
    identity = 1000
    for r in range(grid_side):
        for c in range(grid_side):
            cut = image[r * step:r * step + tile_side, c * step:c * step + tile_side]
            variants = list(orientations(Tile(identity, cut)))
            tiles.append(variants[int(rng.integers(8))])
            identity += 1
    order = rng.permutation(len(tiles))
    tiles = [tiles[i] for i in order]
    
    seams = [i * step for i in range(grid_side + 1)]
    keep = [i for i in range(size) if i not in seams]
    expected = image[np.ix_(keep, keep)]
    return tiles, expected
