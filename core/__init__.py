"""Core pixel grid, orientation, and tile parsing utilities."""
from .errors import (
    PuzzleError,
    TileFormatError,
    DimensionMismatch,
    OutOfBounds,
    NoValidArrangement,
    MissingTile,
    NoOrientationMatched
)
from .pixel_grid import PixelGrid
from .orientation import (
    Orientation,
    ALL_ORIENTATIONS,
    rotate90,
    flip_horizontal,
    flip_vertical,
    orientations
)
from .tile import Tile
from .parsing import parse_tiles, load_tiles
