"""Visualization utilities for puzzle solving."""
from .display import (
    display_comparison,
    display_assembly,
    save_bitmap
)
