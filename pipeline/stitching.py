"""Image stitching: trimmed tile interiors into one composite grid."""

import numpy as np

from core.errors import DimensionMismatch
from core.pixel_grid import PixelGrid
from solvers.assembler import Assembly


def stitch_image(assembly: Assembly) -> PixelGrid:
    """
    Concatenate the interiors of all placed tiles.

    Every oriented tile loses its 1-pixel border, and the interiors are laid
    out in bounding-box order.

    Args:
        assembly: Finished arrangement

    Returns:
        Composite grid of size (grid rows * (side - 2)) x (grid cols * (side - 2))

    Raises:
        MissingTile: A bounding-box cell has no placement
        DimensionMismatch: Tiles are too small to have an interior
    """
    side = assembly.tile_side
    if side < 3:
        raise DimensionMismatch(f"Tiles of side {side} have no interior to stitch")

    inner = side - 2
    bbox = assembly.bbox
    output = np.zeros((bbox.height * inner, bbox.width * inner), dtype=bool)

    for row, col in bbox.positions():
        placement = assembly.placement_at((row, col))
        y1 = (row - bbox.min_row) * inner
        x1 = (col - bbox.min_col) * inner
        output[y1:y1 + inner, x1:x1 + inner] = placement.grid.data[1:-1, 1:-1]

    return PixelGrid(output)
