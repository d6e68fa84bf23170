"""The 8 rotation/flip symmetries of a tile."""

from typing import Callable, Iterator, Optional

from core.bitmap import flip_horizontal, rotate_clockwise
from .tile import Tile


OPPOSITE = {
    'top': 'bottom',
    'bottom': 'top',
    'left': 'right',
    'right': 'left'
}


def orientations(tile: Tile) -> Iterator[Tile]:
    """
    Lazily yield the 8 orientations of a tile.
    
    Order: 0-3 clockwise quarter turns, then the same 4 after a horizontal
    flip. Symmetric tiles yield duplicates.
    """
    for flipped in (False, True):
        base = flip_horizontal(tile.bitmap) if flipped else tile.bitmap
        for turns in range(4):
            yield Tile(tile.identity, rotate_clockwise(base, turns))


def orient_until(tile: Tile, predicate: Callable[[Tile], bool]) -> Optional[Tile]:
    """Return the first orientation satisfying `predicate`, or None."""
    for candidate in orientations(tile):
        if predicate(candidate):
            return candidate
    return None
