"""
Pattern scanner for the composite image.

Tries the 8 orientations of the image in ALL_ORIENTATIONS order and stops at
the first one with at least one full match of the mask.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from core.errors import NoOrientationMatched
from core.orientation import Orientation, oriented
from core.pixel_grid import PixelGrid
from features.pattern import SEA_MONSTER_MASK, PatternMask


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of a scan.

    Attributes:
        orientation: Orientation of the composite image that matched
        image: Composite image in that orientation
        matches: Top-left (row, col) of every matching window
        mask: Pattern that was searched for
    """
    orientation: Orientation
    image: PixelGrid
    matches: Tuple[Tuple[int, int], ...]
    mask: PatternMask

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def on_pixels(self) -> int:
        return self.image.count_on()

    @property
    def roughness(self) -> int:
        """'On' pixels not attributed to a match."""
        return self.on_pixels - self.match_count * len(self.mask)

    def covered_cells(self) -> Set[Tuple[int, int]]:
        return {
            (top + d_row, left + d_col)
            for top, left in self.matches
            for d_row, d_col in self.mask.offsets
        }


def find_matches(image: PixelGrid, mask: PatternMask) -> List[Tuple[int, int]]:
    """
    Slide the mask over every window that fits inside the image.

    Returns:
        Top-left (row, col) of each window where every mask offset is 'on',
        in row-major order
    """
    rows, cols = image.shape
    span_rows = rows - mask.height + 1
    span_cols = cols - mask.width + 1
    if span_rows <= 0 or span_cols <= 0:
        return []

    data = image.data
    hits = np.ones((span_rows, span_cols), dtype=bool)
    for d_row, d_col in mask.offsets:
        hits &= data[d_row:d_row + span_rows, d_col:d_col + span_cols]

    return [(int(r), int(c)) for r, c in zip(*np.nonzero(hits))]


def scan_image(image: PixelGrid, mask: Optional[PatternMask] = None,
               verbose: bool = False) -> ScanResult:
    """
    Find the orientation of `image` containing the mask.

    Raises:
        NoOrientationMatched: No orientation has a single match
    """
    if mask is None:
        mask = SEA_MONSTER_MASK
    for orientation, candidate in oriented(image):
        matches = find_matches(candidate, mask)
        if verbose:
            print(f"    {orientation}: {len(matches)} matches")
        if matches:
            return ScanResult(orientation, candidate, tuple(matches), mask)

    raise NoOrientationMatched(
        f"No orientation of the {image.rows}x{image.cols} image contains the "
        f"{mask.width}x{mask.height} pattern"
    )
