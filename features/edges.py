"""Edge fingerprints of oriented tiles."""

from enum import Enum
from typing import Dict, Tuple

from core.pixel_grid import PixelGrid


class Side(Enum):
    TOP = 'top'
    BOTTOM = 'bottom'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def opposite(self) -> 'Side':
        return _OPPOSITE[self]


_OPPOSITE = {
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
}

# (d_row, d_col) of a neighbour -> side of the candidate that touches it.
# The neighbour touches back with the opposite side.
NEIGHBOR_SIDES: Dict[Tuple[int, int], Side] = {
    (-1, 0): Side.TOP,
    (1, 0): Side.BOTTOM,
    (0, -1): Side.LEFT,
    (0, 1): Side.RIGHT,
}


def edge(grid: PixelGrid, side: Side) -> Tuple[bool, ...]:
    """
    Extract the ordered border pixels on one side.

    Top and bottom read left to right, left and right read top to bottom.
    """
    side = Side(side)
    if side is Side.TOP:
        return grid.row(0)
    elif side is Side.BOTTOM:
        return grid.row(grid.rows - 1)
    elif side is Side.LEFT:
        return grid.column(0)
    return grid.column(grid.cols - 1)


def edges_match(grid_a: PixelGrid, side_a: Side, grid_b: PixelGrid, side_b: Side) -> bool:
    """Element-wise comparison of two fingerprints, without reversal."""
    return edge(grid_a, side_a) == edge(grid_b, side_b)


def fits_neighbor(candidate: PixelGrid, offset: Tuple[int, int], neighbor: PixelGrid) -> bool:
    """
    Check one shared boundary.

    Args:
        candidate: Oriented grid being tried
        offset: (d_row, d_col) from the candidate to the placed neighbour
        neighbor: Oriented grid already placed there
    """
    side = NEIGHBOR_SIDES[offset]
    return edges_match(candidate, side, neighbor, side.opposite)


def edge_map(grid: PixelGrid) -> Dict[Side, Tuple[bool, ...]]:
    """All four fingerprints of a grid, keyed by side."""
    return {side: edge(grid, side) for side in Side}
