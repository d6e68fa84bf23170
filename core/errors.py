"""Error kinds raised while assembling a puzzle."""


class JigsawError(ValueError):
    """Base class: the input does not describe a solvable configuration."""


class MalformedTileError(JigsawError):
    """Tile is undersized, ragged, unparsable or does not match its siblings."""


class UnsolvableAdjacencyError(JigsawError):
    """Border adjacency is ambiguous or the tile count cannot form a square."""


class AssemblyError(JigsawError):
    """Grid walk could not place every tile."""


class PatternNotFoundError(JigsawError):
    """No orientation of the composite image contains the pattern."""
