"""
Pipeline orchestration modules.

1. solve_file() - load puzzle text, then solve
2. solve_puzzle() - index → assemble → stitch → pattern search
"""
from .solver_pipeline import (
    SolverConfig,
    PuzzleResult,
    build_tiles,
    solve_puzzle,
    solve_file
)
