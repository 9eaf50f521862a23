"""
Orientation engine for square pixel grids.

The 8 orientations are the dihedral group of the square: 4 clockwise
rotations of the original grid followed by 4 clockwise rotations of its
horizontal mirror. That order is fixed and shared by every caller, so
"first orientation that matches" is reproducible.

All transforms return new PixelGrid values; nothing is rotated in place.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .pixel_grid import PixelGrid


@dataclass(frozen=True)
class Orientation:
    """
    One of the 8 rigid orientations.

    Applying it mirrors left-right first (when `flipped`), then rotates
    clockwise `rotations` quarter turns.
    """
    rotations: int = 0
    flipped: bool = False

    def __post_init__(self):
        if self.rotations not in (0, 1, 2, 3):
            raise ValueError(f"rotations must be in 0..3, got {self.rotations}")

    def __str__(self):
        label = f"rot{self.rotations * 90}"
        return f"flip+{label}" if self.flipped else label


IDENTITY = Orientation()

ALL_ORIENTATIONS: Tuple[Orientation, ...] = tuple(
    Orientation(rotations, flipped)
    for flipped in (False, True)
    for rotations in range(4)
)


def rotate90(grid: PixelGrid) -> PixelGrid:
    """
    Rotate a quarter turn clockwise.

    Pixel (r, c) moves to (c, rows - 1 - r); the result is cols x rows.
    """
    return PixelGrid(np.rot90(grid.data, k=-1))


def rotate90_ccw(grid: PixelGrid) -> PixelGrid:
    """Rotate a quarter turn counter-clockwise."""
    return PixelGrid(np.rot90(grid.data, k=1))


def flip_horizontal(grid: PixelGrid) -> PixelGrid:
    """Mirror left-right: column c moves to cols - 1 - c."""
    return PixelGrid(np.fliplr(grid.data))


def flip_vertical(grid: PixelGrid) -> PixelGrid:
    """Mirror top-bottom: row r moves to rows - 1 - r."""
    return PixelGrid(np.flipud(grid.data))


def apply_orientation(grid: PixelGrid, orientation: Orientation) -> PixelGrid:
    result = flip_horizontal(grid) if orientation.flipped else grid
    for _ in range(orientation.rotations):
        result = rotate90(result)
    return result


def oriented(grid: PixelGrid) -> Iterator[Tuple[Orientation, PixelGrid]]:
    """Yield (orientation, grid) for all 8 orientations in ALL_ORIENTATIONS order."""
    for base, flipped in ((grid, False), (flip_horizontal(grid), True)):
        current = base
        for rotations in range(4):
            yield Orientation(rotations, flipped), current
            current = rotate90(current)


def orientations(grid: PixelGrid) -> List[PixelGrid]:
    """All 8 orientations of a grid. Symmetric grids may repeat."""
    return [g for _, g in oriented(grid)]
