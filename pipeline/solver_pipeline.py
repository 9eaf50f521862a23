"""
Solver Pipeline

Runs the full puzzle:
1. Parse tiles
2. Assemble tiles by edge fingerprints → corner product (part A)
3. Stitch tile interiors into the composite image
4. Scan the composite image for the pattern → rough pixel count (part B)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Union

from core.parsing import load_tiles, parse_tiles
from core.pixel_grid import PixelGrid
from core.tile import Tile
from features.pattern import SEA_MONSTER_MASK, PatternMask
from solvers.assembler import AssemblerConfig, Assembly, TileAssembler
from solvers.monster_scanner import ScanResult, scan_image

from .stitching import stitch_image


@dataclass
class SolverConfig:
    """Pipeline parameters."""
    assembler: AssemblerConfig = field(default_factory=AssemblerConfig)
    mask: PatternMask = SEA_MONSTER_MASK
    verbose: bool = True


@dataclass(frozen=True)
class PuzzleSolution:
    """Both answers plus the intermediate results that produced them."""
    assembly: Assembly
    image: PixelGrid
    scan: ScanResult

    @property
    def corner_product(self) -> int:
        return self.assembly.corner_product()

    @property
    def roughness(self) -> int:
        return self.scan.roughness


def solve_tiles(tiles: Sequence[Tile], config: Optional[SolverConfig] = None) -> PuzzleSolution:
    """
    Solve a parsed puzzle.

    Args:
        tiles: Parsed tiles
        config: Pipeline parameters

    Returns:
        PuzzleSolution with the assembly, composite image and scan result

    Raises:
        NoValidArrangement, MissingTile, NoOrientationMatched: see core.errors
    """
    config = config or SolverConfig()
    verbose = config.verbose

    if verbose:
        print("\n" + "=" * 60)
        print(f"ASSEMBLY: {len(tiles)} tiles")
        print("=" * 60)

    assembly = TileAssembler(config.assembler).assemble(tiles)

    if verbose:
        print(f"  Grid: {assembly.bbox.height}x{assembly.bbox.width}")
        print(f"  Corners: {assembly.corner_ids()}")
        print(f"  Corner product: {assembly.corner_product()}")

    image = stitch_image(assembly)

    if verbose:
        print("\n" + "=" * 60)
        print(f"SCAN: {image.rows}x{image.cols} composite image")
        print("=" * 60)

    scan = scan_image(image, config.mask, verbose=verbose)

    if verbose:
        print(f"  Orientation: {scan.orientation}")
        print(f"  Matches: {scan.match_count}")
        print(f"  Rough pixels: {scan.roughness}")

    return PuzzleSolution(assembly=assembly, image=image, scan=scan)


def solve_text(text: str, config: Optional[SolverConfig] = None) -> PuzzleSolution:
    return solve_tiles(parse_tiles(text), config)


def solve_file(file_path: Union[str, Path], config: Optional[SolverConfig] = None) -> PuzzleSolution:
    """Load a puzzle input file and solve it."""
    tiles = load_tiles(file_path)
    if config is None or config.verbose:
        print(f"Loaded: {file_path} ({len(tiles)} tiles, side {tiles[0].side})")
    return solve_tiles(tiles, config)

