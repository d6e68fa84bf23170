"""Image file I/O for bitmaps."""

from typing import Iterable, Optional, Tuple

import cv2
import numpy as np
from PIL import Image

from .bitmap import as_bitmap


SET_COLOR = (235, 235, 235)
CLEAR_COLOR = (120, 60, 20)
HIGHLIGHT_COLOR = (40, 200, 60)


def load_image(file_path, threshold: int = 128) -> np.ndarray:
    """
    Load an image and threshold it into a bitmap.
    
    Args:
        file_path: Path to any format Pillow can open
        threshold: Luminance above which a pixel counts as set
    
    Returns:
        Bool bitmap with one cell per pixel
    """
    try:
        pic = Image.open(file_path).convert("L")
    except OSError as e:
        raise ValueError(f"Could not load image: {file_path}") from e
    return as_bitmap(np.array(pic) > threshold)


def bitmap_to_bgr(bitmap: np.ndarray, cell_size: int = 8,
                  highlight: Optional[Iterable[Tuple[int, int]]] = None) -> np.ndarray:
    """
    Render a bitmap as a BGR image.
    
    Args:
        bitmap: Bool bitmap
        cell_size: Output pixels per cell
        highlight: Optional (row, col) cells drawn in the highlight color
    
    Returns:
        uint8 BGR image of shape (rows * cell_size, cols * cell_size, 3)
    """
    image = np.empty(bitmap.shape + (3,), dtype=np.uint8)
    image[bitmap] = SET_COLOR
    image[~bitmap] = CLEAR_COLOR
    
    if highlight:
        for r, c in highlight:
            image[r, c] = HIGHLIGHT_COLOR
    
    if cell_size == 1:
        return image
    
    h, w = bitmap.shape
    return cv2.resize(image, (w * cell_size, h * cell_size),
                      interpolation=cv2.INTER_NEAREST)
