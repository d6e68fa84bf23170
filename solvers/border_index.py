"""
Border Adjacency Index

Maps every border signature (and its reversal) to the tiles exhibiting it.
Built once from the unoriented tile set and read-only afterwards.

In a uniquely solvable puzzle every signature maps to:
- 1 tile: an outer edge of the assembled image
- 2 tiles: an internal, shared edge
"""

import math
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from core.errors import MalformedTileError, UnsolvableAdjacencyError
from features.orientation import OPPOSITE, orient_until
from features.tile import Signature, Tile, reverse


def validate_tiles(tiles: List[Tile]) -> None:
    """
    Check that tiles form one puzzle instance.
    
    Raises:
        MalformedTileError: If empty, non-square, unequal sizes or repeated ids
    """
    if not tiles:
        raise MalformedTileError("No tiles provided")
    
    expected = tiles[0].shape
    seen = set()
    for tile in tiles:
        rows, cols = tile.shape
        if rows != cols:
            raise MalformedTileError(f"Tile {tile.identity}: must be square, got {rows}x{cols}")
        if tile.shape != expected:
            raise MalformedTileError(
                f"Tile {tile.identity}: size {tile.shape} differs from {expected}"
            )
        if tile.identity in seen:
            raise MalformedTileError(f"Duplicate tile id: {tile.identity}")
        seen.add(tile.identity)


class BorderIndex:
    """
    Multimap from border signature to tile identities.
    
    Use `BorderIndex.build(tiles)`; instances are not mutated afterwards.
    """
    
    def __init__(self, tiles: List[Tile], entries: Dict[Signature, Tuple[int, ...]]):
        self._tiles = {tile.identity: tile for tile in tiles}
        self._order = [tile.identity for tile in tiles]
        self._entries = entries
    
    @classmethod
    def build(cls, tiles: Iterable[Tile]) -> 'BorderIndex':
        """
        Index the raw borders of every tile, in both reading directions.
        
        Raises:
            MalformedTileError: If the tiles are not one consistent puzzle
            UnsolvableAdjacencyError: If a signature is held by 3+ tiles
        """
        tiles = list(tiles)
        validate_tiles(tiles)
        
        buckets = defaultdict(list)
        for tile in tiles:
            for sig in tile.borders().values():
                for key in (sig, reverse(sig)):
                    if tile.identity not in buckets[key]:
                        buckets[key].append(tile.identity)
        
        for sig, ids in buckets.items():
            if len(ids) > 2:
                raise UnsolvableAdjacencyError(
                    f"Border shared by {len(ids)} tiles {ids}; at most 2 allowed"
                )
        
        return cls(tiles, {sig: tuple(ids) for sig, ids in buckets.items()})
    
    # =========================================================================
    # LOOKUPS
    # =========================================================================
    
    def __len__(self) -> int:
        return len(self._order)
    
    @property
    def tiles(self) -> List[Tile]:
        """Unoriented tiles in input order."""
        return [self._tiles[tid] for tid in self._order]
    
    def tile(self, identity: int) -> Tile:
        return self._tiles[identity]
    
    def tiles_with(self, sig: Signature) -> Tuple[int, ...]:
        """Identities of tiles exhibiting `sig` in either direction."""
        return self._entries.get(tuple(sig), ())
    
    def _others_with(self, sig: Signature, identity: int) -> List[int]:
        return [tid for tid in self.tiles_with(sig) if tid != identity]
    
    def grid_side(self) -> int:
        """
        Side length of the square grid of tiles.
        
        Raises:
            UnsolvableAdjacencyError: If the tile count is not a perfect square
        """
        side = math.isqrt(len(self))
        if side * side != len(self):
            raise UnsolvableAdjacencyError(
                f"Number of tiles ({len(self)}) is not a perfect square"
            )
        return side
    
    # =========================================================================
    # CLASSIFICATION
    # =========================================================================
    
    def shared_border_count(self, tile: Tile) -> int:
        """Sum over the tile's 4 borders of the other tiles sharing each."""
        return sum(len(self._others_with(sig, tile.identity))
                   for sig in tile.borders().values())
    
    def corners(self) -> List[Tile]:
        """
        Tiles with exactly 2 shared borders, in input order.
        
        A single-tile puzzle is its own corner.
        """
        if len(self) == 1:
            return self.tiles
        return [tile for tile in self.tiles if self.shared_border_count(tile) == 2]
    
    def corner_product(self) -> int:
        """
        Product of the corner identities.
        
        Raises:
            UnsolvableAdjacencyError: Unless there are exactly 4 corners
        """
        corners = self.corners()
        if len(self) > 1 and len(corners) != 4:
            raise UnsolvableAdjacencyError(
                f"Expected 4 corner tiles, found {len(corners)}: "
                f"{[tile.identity for tile in corners]}"
            )
        return math.prod(tile.identity for tile in corners)
    
    # =========================================================================
    # NEIGHBORS
    # =========================================================================
    
    def is_side_shared(self, tile: Tile, side: str) -> bool:
        """True if the border facing `side` of the oriented tile has a partner."""
        return bool(self._others_with(tile.side_facing(side), tile.identity))
    
    def find_and_orient_neighbor(self, tile: Tile, side: str) -> Optional[Tile]:
        """
        Find the tile across `side` and orient it to join seamlessly.
        
        The returned tile's border facing the opposite side equals this
        tile's `side` border exactly, not just up to reversal.
        
        Args:
            tile: Oriented tile already placed
            side: 'top', 'bottom', 'left' or 'right'
        
        Returns:
            Oriented neighbor, or None on the outer boundary
        """
        sig = tile.side_facing(side)
        others = self._others_with(sig, tile.identity)
        if not others:
            return None
        
        # Build guarantees at most one other tile per signature
        neighbor = self._tiles[others[0]]
        facing = OPPOSITE[side]
        return orient_until(neighbor, lambda candidate: candidate.side_facing(facing) == sig)
