#!/usr/bin/env python
"""
Jigsaw Tile Solver

Usage:
    python solve_puzzle.py <input_path> [--output <output_path>] [--pattern <file>]

Examples:
    python solve_puzzle.py ./inputs/day_20.txt
    python solve_puzzle.py ./inputs/day_20.txt --output ./debug/composite.png --print-image

Pipeline:
    Phase 1: Index tile borders, multiply the corner ids
    Phase 2: Assemble and stitch the composite image
    Phase 3: Mask the pattern in every orientation, count what is left
"""

import argparse
import os
import sys
from pathlib import Path

from core.bitmap import format_bitmap
from core.image_utils import load_image
from pipeline import SolverConfig, solve_file
from solvers.pattern_matcher import Mask


def main():
    parser = argparse.ArgumentParser(
        description="Assemble rotated/mirrored tiles and search the composite for a pattern",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  Tile 2311:
  ..##.#..#.
  ##..#.....
  ...
  (blocks separated by blank lines, '#' set, '.' clear)
        """
    )
    parser.add_argument("input_path", help="Path to the puzzle text")
    parser.add_argument("--output", "-o", help="Output path for the rendered composite")
    pattern_group = parser.add_mutually_exclusive_group()
    pattern_group.add_argument("--pattern", "-p",
                               help="Text file drawing the pattern with '#' (default: sea monster)")
    pattern_group.add_argument("--pattern-image",
                               help="Image file whose bright pixels form the pattern")
    parser.add_argument("--cell-size", type=int, default=8, help="Output pixels per cell")
    parser.add_argument("--print-image", action="store_true",
                        help="Print the masked composite as text")
    parser.add_argument("--show-grid", action="store_true",
                        help="Display the assembled tiles")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress output")
    parser.add_argument("--no-display", action="store_true", help="Don't display result")
    
    args = parser.parse_args()
    
    if not os.path.exists(args.input_path):
        print(f"Error: Input not found: {args.input_path}")
        sys.exit(1)
    
    config = SolverConfig(
        output_path=args.output,
        cell_size=args.cell_size,
        verbose=not args.quiet
    )
    
    try:
        if args.pattern:
            config.pattern = Mask.from_text(Path(args.pattern).read_text())
        elif args.pattern_image:
            config.pattern = Mask.from_bitmap(load_image(args.pattern_image))
        
        result = solve_file(args.input_path, config)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    
    print(f"Corner product: {result.corner_product}")
    print(f"Roughness: {result.roughness}")
    
    if args.print_image:
        print()
        print(format_bitmap(result.masked_composite, off=' '))
    
    if args.show_grid:
        from visualization.display import display_assembly
        display_assembly(result.assembled)
    
    if not args.no_display:
        from visualization.display import display_comparison
        display_comparison(result.oriented_composite, result.masked_composite,
                           highlight=result.pattern_cells, roughness=result.roughness)


if __name__ == "__main__":
    main()
