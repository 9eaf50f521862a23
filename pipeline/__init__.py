"""
Pipeline orchestration modules.

1. solve_tiles() - assemble, stitch, scan
2. stitch_image() - composite image from an assembly
"""
from .stitching import stitch_image
from .solver_pipeline import (
    SolverConfig,
    PuzzleSolution,
    solve_tiles,
    solve_text,
    solve_file
)
