"""Error kinds raised while assembling and scanning a tile puzzle."""


class PuzzleError(Exception):
    """Base class for every unrecoverable puzzle error."""


class TileFormatError(PuzzleError, ValueError):
    """Tile text could not be parsed (bad header, pixel, or duplicate id)."""


class DimensionMismatch(PuzzleError, ValueError):
    """A grid is not rectangular, or a tile is not square / not uniform."""


class OutOfBounds(PuzzleError, IndexError):
    """A pixel was addressed outside of its grid."""


class NoValidArrangement(PuzzleError, RuntimeError):
    """The assembler could not place every tile."""

    def __init__(self, message, unplaced=()):
        super().__init__(message)
        self.unplaced = tuple(unplaced)


class MissingTile(PuzzleError, LookupError):
    """A bounding-box cell has no placement."""

    def __init__(self, position):
        super().__init__(f"No tile placed at position {position}")
        self.position = position


class NoOrientationMatched(PuzzleError, RuntimeError):
    """No orientation of the composite image contained the pattern."""
