"""Border adjacency index: classification and neighbor lookup."""

import pytest

from conftest import tiles_by_id
from core.errors import MalformedTileError, UnsolvableAdjacencyError
from features.orientation import OPPOSITE
from features.tile import Tile, reverse, shared_border_count
from solvers.border_index import BorderIndex


def test_every_border_indexed_in_both_directions(example_index, example_tiles):
    for tile in example_tiles:
        for sig in tile.borders().values():
            assert tile.identity in example_index.tiles_with(sig)
            assert tile.identity in example_index.tiles_with(reverse(sig))


def test_signatures_map_to_one_or_two_tiles(example_index, example_tiles):
    for tile in example_tiles:
        for sig in tile.borders().values():
            assert len(example_index.tiles_with(sig)) in (1, 2)


def test_corners_of_example(example_index):
    corners = example_index.corners()
    assert sorted(tile.identity for tile in corners) == [1171, 1951, 2971, 3079]


def test_corner_product_of_example(example_index):
    assert example_index.corner_product() == 20899048083289


def test_index_count_agrees_with_brute_force(example_index, example_tiles):
    for tile in example_tiles:
        assert example_index.shared_border_count(tile) == shared_border_count(tile, example_tiles)


def test_grid_side(example_index):
    assert example_index.grid_side() == 3


def test_non_square_tile_count_is_unsolvable(example_tiles):
    index = BorderIndex.build(example_tiles[:3])
    with pytest.raises(UnsolvableAdjacencyError):
        index.grid_side()


def test_wrong_corner_count_is_unsolvable(example_tiles):
    index = BorderIndex.build(tiles_by_id(example_tiles, [1951, 2311, 3079, 1171]))
    with pytest.raises(UnsolvableAdjacencyError):
        index.corner_product()


def test_border_shared_by_three_tiles_is_unsolvable():
    tiles = [
        Tile.from_rows(1, ["##", ".."]),
        Tile.from_rows(2, ["##", "#."]),
        Tile.from_rows(3, ["#.", "##"]),
    ]
    with pytest.raises(UnsolvableAdjacencyError):
        BorderIndex.build(tiles)


def test_unequal_tile_sizes_are_malformed(example_tiles):
    small = Tile.from_rows(1, ["#.", ".#"])
    with pytest.raises(MalformedTileError):
        BorderIndex.build(example_tiles[:3] + [small])


def test_non_square_tile_is_malformed():
    with pytest.raises(MalformedTileError):
        BorderIndex.build([Tile.from_rows(1, ["#.#", ".#."])])


def test_duplicate_identity_is_malformed(example_tiles):
    with pytest.raises(MalformedTileError):
        BorderIndex.build([example_tiles[0], example_tiles[0].copy()])


def test_empty_tile_set_is_malformed():
    with pytest.raises(MalformedTileError):
        BorderIndex.build([])


def test_single_tile_is_its_own_corner():
    tile = Tile.from_rows(42, ["#..", ".#.", "..#"])
    index = BorderIndex.build([tile])
    assert index.shared_border_count(tile) == 0
    assert [t.identity for t in index.corners()] == [42]
    assert index.corner_product() == 42
    assert index.grid_side() == 1


def test_find_and_orient_neighbor_joins_exactly(example_index, example_tiles):
    for tile in example_tiles:
        for side, opposite in OPPOSITE.items():
            neighbor = example_index.find_and_orient_neighbor(tile, side)
            if not example_index.is_side_shared(tile, side):
                assert neighbor is None
                continue
            assert neighbor is not None
            assert neighbor.identity != tile.identity
            assert neighbor.side_facing(opposite) == tile.side_facing(side)


def test_shared_sides_per_tile(example_index, example_tiles):
    lookup = {tile.identity: tile for tile in example_tiles}
    shared = {
        tid: sum(example_index.is_side_shared(tile, side) for side in OPPOSITE)
        for tid, tile in lookup.items()
    }
    assert shared[1427] == 4
    assert shared[1951] == 2
    assert shared[2311] == 3
