"""Core bitmap primitives, errors and input parsing."""
from .errors import (
    JigsawError,
    MalformedTileError,
    UnsolvableAdjacencyError,
    AssemblyError,
    PatternNotFoundError,
)
from .bitmap import as_bitmap, flip_horizontal, rotate_clockwise, strip_border, count_set
from .parsing import parse_tiles, load_tiles
from .image_utils import load_image, bitmap_to_bgr
