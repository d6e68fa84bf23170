"""
Pattern Matcher

Searches a bitmap for a sparse mask of cells that must all be set, under
every orientation, and clears the cells of each occurrence.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from core.bitmap import count_set
from core.errors import PatternNotFoundError
from core.parsing import parse_pattern_offsets
from features.orientation import orientations
from features.tile import Tile


Offset = Tuple[int, int]


@dataclass(frozen=True)
class Mask:
    """
    Relative (row, col) offsets that must all be set for a match.
    
    Offsets are anchored so the bounding box starts at (0, 0); height and
    width are the largest offsets plus one.
    """
    offsets: Tuple[Offset, ...]
    
    def __post_init__(self):
        cells = {(int(r), int(c)) for r, c in self.offsets}
        if not cells:
            raise ValueError("Mask must contain at least one offset")
        top = min(r for r, _ in cells)
        left = min(c for _, c in cells)
        offsets = tuple(sorted((r - top, c - left) for r, c in cells))
        object.__setattr__(self, 'offsets', offsets)
    
    @classmethod
    def from_text(cls, text: str) -> 'Mask':
        """Mask of the '#' cells in a drawn pattern."""
        return cls(tuple(parse_pattern_offsets(text)))
    
    @classmethod
    def from_bitmap(cls, bitmap: np.ndarray) -> 'Mask':
        """Mask of the set cells of a bitmap, anchored at its top-left."""
        return cls(tuple(map(tuple, np.argwhere(bitmap).tolist())))
    
    @property
    def height(self) -> int:
        return max(r for r, _ in self.offsets) + 1
    
    @property
    def width(self) -> int:
        return max(c for _, c in self.offsets) + 1
    
    def __len__(self) -> int:
        return len(self.offsets)


SEA_MONSTER = Mask.from_text("""
                  #
#    ##    ##    ###
 #  #  #  #  #  #
""")


def mask_offsets(bitmap: np.ndarray, mask: Mask) -> List[Offset]:
    """
    Top-left placements where every mask cell is set, in row-major order.
    
    Every top-left position keeping the mask inside the bitmap is tested.
    """
    height, width = bitmap.shape
    rows = height - mask.height + 1
    cols = width - mask.width + 1
    if rows <= 0 or cols <= 0:
        return []
    
    hits = np.ones((rows, cols), dtype=bool)
    for dr, dc in mask.offsets:
        hits &= bitmap[dr:dr + rows, dc:dc + cols]
    
    return [(int(r), int(c)) for r, c in np.argwhere(hits)]


def matches_mask(bitmap: np.ndarray, mask: Mask) -> bool:
    return bool(mask_offsets(bitmap, mask))


def mask_cells(placements: Iterable[Offset], mask: Mask) -> Set[Offset]:
    """Cells covered by the mask at each placement."""
    return {(r + dr, c + dc) for r, c in placements for dr, dc in mask.offsets}


def mask_all(bitmap: np.ndarray, mask: Mask) -> int:
    """
    Clear every cell covered by a mask occurrence, in place.
    
    Placements are collected before any cell is cleared so that overlapping
    occurrences are all honored.
    
    Returns:
        Number of occurrences cleared
    """
    placements = mask_offsets(bitmap, mask)
    clear_cells(bitmap, placements, mask)
    return len(placements)


def clear_cells(bitmap: np.ndarray, placements: Iterable[Offset], mask: Mask) -> None:
    for r, c in mask_cells(placements, mask):
        bitmap[r, c] = False


@dataclass
class PatternMatch:
    """
    Pattern search outcome for one image.
    
    Attributes:
        oriented: Image in the first orientation containing the mask
        masked: Same orientation with every occurrence cleared
        placements: Top-left placements of the occurrences
    """
    oriented: Tile
    masked: Tile
    placements: List[Offset]
    
    @property
    def roughness(self) -> int:
        return count_set(self.masked.bitmap)


def mask_pattern(tile: Tile, mask: Mask = SEA_MONSTER) -> PatternMatch:
    """
    Orient `tile` to contain the mask, then clear every occurrence.
    
    The input tile is not mutated.
    
    Raises:
        PatternNotFoundError: If no orientation contains the mask
    """
    for candidate in orientations(tile):
        placements = mask_offsets(candidate.bitmap, mask)
        if placements:
            masked = candidate.copy()
            clear_cells(masked.bitmap, placements, mask)
            return PatternMatch(candidate, masked, placements)
    
    raise PatternNotFoundError(
        f"Pattern of {len(mask)} cells not found in any orientation of a "
        f"{tile.shape[0]}x{tile.shape[1]} image"
    )


def find_pattern_orientation(tile: Tile, mask: Mask) -> Tile:
    """First orientation of `tile` containing the mask."""
    return mask_pattern(tile, mask).oriented


def water_roughness(tile: Tile, mask: Mask = SEA_MONSTER) -> int:
    """Set cells left after masking the pattern in its matching orientation."""
    return mask_pattern(tile, mask).roughness
