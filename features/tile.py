"""Tile data model and border signatures."""

import numpy as np
from dataclasses import dataclass, field
from typing import Dict, Iterable, Set, Tuple

from core.bitmap import SIDES, as_bitmap, side_facing
from core.errors import MalformedTileError
from core.parsing import parse_rows


# Identity of the stitched image, which has no puzzle identity of its own
COMPOSITE_ID = 0

Signature = Tuple[bool, ...]


def signature(edge: np.ndarray) -> Signature:
    """Hashable signature of a border sequence."""
    return tuple(bool(cell) for cell in edge)


def reverse(sig: Signature) -> Signature:
    return sig[::-1]


@dataclass(eq=False)
class Tile:
    """
    A square bitmap with a stable identity.
    
    Attributes:
        identity: Puzzle tile id, kept across every orientation transform
        bitmap: Bool array owned by this tile
    """
    identity: int
    bitmap: np.ndarray = field(repr=False)
    
    def __post_init__(self):
        self.bitmap = as_bitmap(self.bitmap)
        rows, cols = self.bitmap.shape
        if rows < 2 or cols < 2:
            raise MalformedTileError(
                f"Tile {self.identity}: must be at least 2x2, got {rows}x{cols}"
            )
    
    @classmethod
    def from_rows(cls, identity: int, rows: Iterable[str]) -> 'Tile':
        """Create a tile from '#'/'.' strings."""
        return cls(identity, parse_rows(list(rows)))
    
    @property
    def shape(self) -> Tuple[int, int]:
        return self.bitmap.shape
    
    def side_facing(self, side: str) -> Signature:
        return signature(side_facing(self.bitmap, side))
    
    def borders(self) -> Dict[str, Signature]:
        """Four border signatures keyed by side, in reading direction."""
        return {side: self.side_facing(side) for side in SIDES}
    
    def signatures(self) -> Set[Signature]:
        """Border signatures closed under reversal."""
        sigs = set(self.borders().values())
        return sigs | {reverse(sig) for sig in sigs}
    
    def shares_border(self, sig: Signature) -> bool:
        """True if `sig` equals one of the borders, read in either direction."""
        return tuple(sig) in self.signatures()
    
    def same_pixels(self, other: 'Tile') -> bool:
        return self.bitmap.shape == other.bitmap.shape and bool(np.array_equal(self.bitmap, other.bitmap))
    
    def copy(self) -> 'Tile':
        return Tile(self.identity, self.bitmap)


def shared_border_count(tile: Tile, tiles: Iterable[Tile]) -> int:
    """
    Count, over the tile's four borders, the other tiles sharing each border.
    
    Brute force over `tiles`; `BorderIndex.shared_border_count` gives the
    same answer from a prebuilt index.
    """
    others = [other for other in tiles if other.identity != tile.identity]
    return sum(
        sum(1 for other in others if other.shares_border(sig))
        for sig in tile.borders().values()
    )
