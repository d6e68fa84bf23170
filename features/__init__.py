"""Tile model and orientation enumeration."""
from .tile import Tile, COMPOSITE_ID, signature, shared_border_count
from .orientation import OPPOSITE, orientations, orient_until
