"""Fixed-size boolean pixel grid used for tiles and the composite image."""

import numpy as np
from typing import Iterable, Sequence, Tuple

from .errors import DimensionMismatch, OutOfBounds, TileFormatError

ON_CHAR = '#'
OFF_CHAR = '.'


class PixelGrid:
    """
    Immutable 2D boolean grid.

    Pixels live in a read-only numpy array of shape (rows, cols). The
    linear view (`buffer`) is addressed as row * cols + col.
    """

    __slots__ = ('_data',)

    def __init__(self, data: np.ndarray):
        array = np.array(data, dtype=bool, copy=True)
        if array.ndim != 2:
            raise DimensionMismatch(f"Expected a 2D grid, got shape {array.shape}")
        array.flags.writeable = False
        self._data = array

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> 'PixelGrid':
        """Build a grid from equal-length rows of booleans."""
        rows = [list(row) for row in rows]
        if not rows:
            raise DimensionMismatch("A grid needs at least one row")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise DimensionMismatch(
                    f"Row {index} has {len(row)} pixels, expected {width}"
                )
        return cls(np.array(rows, dtype=bool).reshape(len(rows), width))

    @classmethod
    def from_text(cls, lines: Iterable[str]) -> 'PixelGrid':
        """Parse '#'/'.' rows into a grid."""
        rows = []
        for line_no, line in enumerate(lines):
            row = []
            for char in line:
                if char == ON_CHAR:
                    row.append(True)
                elif char == OFF_CHAR:
                    row.append(False)
                else:
                    raise TileFormatError(
                        f"Unexpected pixel {char!r} on row {line_no}"
                    )
            rows.append(row)
        return cls.from_rows(rows)

    @property
    def data(self) -> np.ndarray:
        """Read-only (rows, cols) array."""
        return self._data

    @property
    def buffer(self) -> np.ndarray:
        """Read-only linear view, addressed as row * cols + col."""
        return self._data.reshape(-1)

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def get(self, row: int, col: int) -> bool:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfBounds(
                f"({row}, {col}) is outside a {self.rows}x{self.cols} grid"
            )
        return bool(self._data[row, col])

    def row(self, index: int) -> Tuple[bool, ...]:
        if not 0 <= index < self.rows:
            raise OutOfBounds(f"Row {index} is outside a grid of {self.rows} rows")
        return tuple(bool(v) for v in self._data[index, :])

    def column(self, index: int) -> Tuple[bool, ...]:
        if not 0 <= index < self.cols:
            raise OutOfBounds(f"Column {index} is outside a grid of {self.cols} columns")
        return tuple(bool(v) for v in self._data[:, index])

    def count_on(self) -> int:
        return int(np.count_nonzero(self._data))

    def interior(self) -> 'PixelGrid':
        """Return the grid with its 1-pixel border trimmed."""
        if self.rows < 3 or self.cols < 3:
            raise DimensionMismatch(
                f"A {self.rows}x{self.cols} grid has no interior"
            )
        return PixelGrid(self._data[1:-1, 1:-1])

    def to_text(self) -> str:
        return '\n'.join(
            ''.join(ON_CHAR if v else OFF_CHAR for v in row) for row in self._data
        )

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self):
        return hash((self.shape, self._data.tobytes()))

    def __repr__(self):
        return f"PixelGrid({self.rows}x{self.cols}, on={self.count_on()})"
