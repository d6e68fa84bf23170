"""Boolean bitmap primitives."""

import numpy as np

from .errors import MalformedTileError


SIDES = ('top', 'bottom', 'left', 'right')


def as_bitmap(data) -> np.ndarray:
    """
    Coerce nested rows or an array into a 2-D boolean bitmap.
    
    Args:
        data: Nested sequence of truthy values or numpy array
    
    Returns:
        Owned (copied) bool array of shape (rows, cols)
    
    Raises:
        MalformedTileError: If rows are ragged or data is not 2-D
    """
    if isinstance(data, np.ndarray):
        bitmap = data.astype(bool, copy=True)
    else:
        rows = [list(row) for row in data]
        if len({len(row) for row in rows}) > 1:
            raise MalformedTileError("Bitmap rows have unequal length")
        bitmap = np.array(rows, dtype=bool)
    
    if bitmap.ndim != 2:
        raise MalformedTileError(f"Bitmap must be 2-D, got shape {bitmap.shape}")
    
    return bitmap


def side_facing(bitmap: np.ndarray, side: str) -> np.ndarray:
    """
    Extract the border facing a side.
    
    Top and bottom read left-to-right, left and right read top-to-bottom.
    """
    if side == 'top':
        return bitmap[0, :]
    elif side == 'bottom':
        return bitmap[-1, :]
    elif side == 'left':
        return bitmap[:, 0]
    elif side == 'right':
        return bitmap[:, -1]
    else:
        raise ValueError(f"Unknown side: {side}")


def flip_horizontal(bitmap: np.ndarray) -> np.ndarray:
    """Reverse each row."""
    return bitmap[:, ::-1].copy()


def rotate_clockwise(bitmap: np.ndarray, turns: int = 1) -> np.ndarray:
    """
    Rotate by quarter turns clockwise.
    
    One turn maps new[r, c] = old[n - 1 - c, r].
    """
    return np.rot90(bitmap, k=-(turns % 4)).copy()


def strip_border(bitmap: np.ndarray, width: int = 1) -> np.ndarray:
    """Return the interior without the outer `width` cells on every side."""
    if width == 0:
        return bitmap.copy()
    return bitmap[width:-width, width:-width].copy()


def count_set(bitmap: np.ndarray) -> int:
    """Number of set cells."""
    return int(np.count_nonzero(bitmap))


def format_bitmap(bitmap: np.ndarray, on: str = '#', off: str = '.') -> str:
    """Render a bitmap as text lines."""
    return "\n".join("".join(on if cell else off for cell in row) for row in bitmap)
