"""
Puzzle text codec.

Input format: blocks separated by blank lines, each headed by
``Tile <id>:`` and followed by one row per line (``#`` set, ``.`` clear).
"""

import re
from pathlib import Path
from typing import List, Tuple

import numpy as np

from .bitmap import as_bitmap
from .errors import MalformedTileError


HEADER_PATTERN = re.compile(r"^Tile (\d+):$")
CELL_VALUES = {'#': True, '.': False}


def parse_rows(lines: List[str]) -> np.ndarray:
    """Parse '#'/'.' lines into a bitmap."""
    rows = []
    for line_no, line in enumerate(lines):
        try:
            rows.append([CELL_VALUES[ch] for ch in line])
        except KeyError as e:
            raise MalformedTileError(
                f"Unexpected character {e.args[0]!r} in row {line_no}: {line!r}"
            ) from None
    return as_bitmap(rows)


def parse_tiles(text: str) -> List[Tuple[int, np.ndarray]]:
    """
    Parse puzzle text into (identity, bitmap) pairs.
    
    Args:
        text: Whole puzzle input
    
    Returns:
        List of (tile_id, bitmap) in input order
    
    Raises:
        MalformedTileError: On a bad header, empty block or bad cell character
    """
    tiles = []
    blocks = re.split(r"\n\s*\n", text.strip())
    
    for block in blocks:
        lines = [line.strip() for line in block.strip().splitlines()]
        if not lines or not lines[0]:
            continue
        
        match = HEADER_PATTERN.match(lines[0])
        if match is None:
            raise MalformedTileError(f"Bad tile header: {lines[0]!r}")
        
        if len(lines) < 2:
            raise MalformedTileError(f"Tile {match.group(1)} has no rows")
        
        tiles.append((int(match.group(1)), parse_rows(lines[1:])))
    
    return tiles


def load_tiles(file_path) -> List[Tuple[int, np.ndarray]]:
    """Read and parse a puzzle file."""
    return parse_tiles(Path(file_path).read_text())


def parse_pattern_offsets(text: str) -> List[Tuple[int, int]]:
    """
    Parse a drawn pattern into (row, col) offsets of its '#' cells.
    
    Spaces and dots are both treated as "don't care". Leading blank lines
    are dropped so a triple-quoted literal can start on its own line.
    """
    lines = text.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    
    offsets = []
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            if ch == '#':
                offsets.append((r, c))
    return offsets
