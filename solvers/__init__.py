"""
Puzzle solvers.

Usage:
    from core import load_tiles
    from solvers import assemble_tiles, scan_image

    assembly = assemble_tiles(load_tiles("input.txt"))
    print(assembly.corner_product())
"""
from .assembler import (
    TileAssembler,
    AssemblerConfig,
    Assembly,
    Placement,
    BoundingBox,
    assemble_tiles
)
from .monster_scanner import ScanResult, find_matches, scan_image
