"""Tile text parsing and loading."""

import re
from pathlib import Path
from typing import List, Optional, Union

from .errors import DimensionMismatch, TileFormatError
from .pixel_grid import PixelGrid
from .tile import Tile

HEADER_PATTERN = re.compile(r"^Tile\s+(\d+):$")


def split_blocks(text: str) -> List[List[str]]:
    """Split text into blocks of non-empty lines separated by blank lines."""
    blocks = []
    current = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line:
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


def parse_tile(lines: List[str], side: Optional[int] = None) -> Tile:
    """
    Parse one tile block.

    Args:
        lines: Header line followed by pixel rows
        side: Expected tile side; inferred from the first row when None

    Returns:
        Parsed Tile
    """
    match = HEADER_PATTERN.match(lines[0])
    if match is None:
        raise TileFormatError(f"Expected 'Tile <id>:' header, got {lines[0]!r}")
    tile_id = int(match.group(1))

    rows = lines[1:]
    if not rows:
        raise TileFormatError(f"Tile {tile_id} has no pixel rows")
    if side is None:
        side = len(rows[0])

    if len(rows) != side:
        raise DimensionMismatch(f"Tile {tile_id}: expected {side} rows, got {len(rows)}")
    for index, row in enumerate(rows):
        if len(row) != side:
            raise DimensionMismatch(
                f"Tile {tile_id}: row {index} has {len(row)} pixels, expected {side}"
            )

    try:
        grid = PixelGrid.from_text(rows)
    except TileFormatError as e:
        raise TileFormatError(f"Tile {tile_id}: {e}") from e
    return Tile(tile_id, grid)


def parse_tiles(text: str) -> List[Tile]:
    """
    Parse every tile block in a puzzle input.

    The tile side is taken from the first row of the first tile and
    enforced for the rest.
    """
    blocks = split_blocks(text)
    if not blocks:
        raise TileFormatError("Input contains no tiles")

    tiles = []
    seen = set()
    side = None
    for block in blocks:
        tile = parse_tile(block, side)
        if tile.id in seen:
            raise TileFormatError(f"Duplicate tile id {tile.id}")
        seen.add(tile.id)
        side = tile.side
        tiles.append(tile)
    return tiles


def load_tiles(file_path: Union[str, Path]) -> List[Tile]:
    """Load and parse a puzzle input file."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Puzzle input not found: {path}")
    return parse_tiles(path.read_text(encoding="utf-8"))
