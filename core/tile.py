"""Tile data model."""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import DimensionMismatch
from .orientation import Orientation, oriented
from .pixel_grid import PixelGrid


@dataclass(frozen=True)
class Tile:
    """
    A square puzzle tile.

    Attributes:
        id: Unique tile identifier from the `Tile <id>:` header
        grid: Tile pixels in input orientation (never mutated)
    """
    id: int
    grid: PixelGrid

    def __post_init__(self):
        if not self.grid.is_square:
            raise DimensionMismatch(
                f"Tile {self.id}: expected a square grid, got {self.grid.rows}x{self.grid.cols}"
            )

    @property
    def side(self) -> int:
        return self.grid.rows

    def orientations(self) -> Iterator[Tuple[Orientation, PixelGrid]]:
        return oriented(self.grid)
