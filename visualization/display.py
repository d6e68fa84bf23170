"""Display utilities for puzzle visualization."""

import cv2
import numpy as np
import matplotlib.pyplot as plt
from typing import Iterable, List, Optional, Tuple
from pathlib import Path

from core.image_utils import bitmap_to_bgr


def display_comparison(before: np.ndarray, after: np.ndarray,
                       highlight: Optional[Iterable[Tuple[int, int]]] = None,
                       roughness: Optional[int] = None,
                       title_before: str = "Composite",
                       title_after: str = "Pattern Masked",
                       figsize: tuple = (12, 6)):
    """
    Display the composite before and after masking, side by side.
    
    Args:
        before: Composite bitmap in the matching orientation
        after: Same bitmap with pattern cells cleared
        highlight: Optional pattern cells drawn in the highlight color
        roughness: Optional remaining-cell count to display
        title_before: Title for the left image
        title_after: Title for the right image
        figsize: Figure size
    """
    fig, axes = plt.subplots(1, 2, figsize=figsize)
    
    axes[0].imshow(cv2.cvtColor(bitmap_to_bgr(before, 1, highlight), cv2.COLOR_BGR2RGB),
                   interpolation='nearest')
    axes[0].set_title(title_before)
    axes[0].axis('off')
    
    after_title = title_after
    if roughness is not None:
        after_title = f"{title_after} (Roughness: {roughness})"
    
    axes[1].imshow(cv2.cvtColor(bitmap_to_bgr(after, 1), cv2.COLOR_BGR2RGB),
                   interpolation='nearest')
    axes[1].set_title(after_title)
    axes[1].axis('off')
    
    plt.tight_layout()
    plt.show()


def display_assembly(grid: List[list], figsize: Optional[tuple] = None):
    """
    Display an assembled grid of oriented tiles, titled by tile id.
    
    Args:
        grid: grid[row][col] of Tiles
        figsize: Figure size
    """
    rows = len(grid)
    cols = len(grid[0])
    if figsize is None:
        figsize = (cols * 2, rows * 2)
    
    fig, axes = plt.subplots(rows, cols, figsize=figsize)
    axes = np.array(axes).reshape(rows, cols)
    
    for r in range(rows):
        for c in range(cols):
            tile = grid[r][c]
            axes[r, c].imshow(tile.bitmap, cmap='gray', interpolation='nearest')
            axes[r, c].set_title(str(tile.identity), fontsize=8)
            axes[r, c].axis('off')
    
    plt.tight_layout()
    plt.show()


def save_bitmap(bitmap: np.ndarray, output_path: str, cell_size: int = 8,
                highlight: Optional[Iterable[Tuple[int, int]]] = None) -> None:
    """
    Render a bitmap and write it to disk.
    
    Args:
        bitmap: Bool bitmap
        output_path: Destination image path (format from extension)
        cell_size: Output pixels per cell
        highlight: Optional cells drawn in the highlight color
    
    Raises:
        ValueError: If the image could not be written
    """
    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)
    
    image = bitmap_to_bgr(bitmap, cell_size, highlight)
    if not cv2.imwrite(str(output_path), image):
        raise ValueError(f"Could not write image: {output_path}")
