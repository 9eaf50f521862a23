"""Tests for the orientation engine."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.orientation import (
    ALL_ORIENTATIONS,
    IDENTITY,
    Orientation,
    apply_orientation,
    flip_horizontal,
    flip_vertical,
    oriented,
    orientations,
    rotate90,
    rotate90_ccw,
)
from core.parsing import load_tiles
from core.pixel_grid import PixelGrid

EXAMPLE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "example_tiles.txt")

# Only (0, 0) is a corner and its diagonal mirror (1, 0) is off, so no
# symmetry of the square fixes this grid.
ASYMMETRIC = ["##.", "...", ".#."]


def asymmetric():
    return PixelGrid.from_text(ASYMMETRIC)


def test_rotate90_clockwise():
    assert rotate90(asymmetric()) == PixelGrid.from_text(["..#", "#.#", "..."])


def test_rotate90_pixel_mapping():
    grid = asymmetric()
    rotated = rotate90(grid)
    for r in range(grid.rows):
        for c in range(grid.cols):
            assert rotated.get(c, grid.rows - 1 - r) == grid.get(r, c)


def test_rotate90_rectangle_swaps_dimensions():
    grid = PixelGrid.from_text(["#..", "..."])
    assert rotate90(grid).shape == (3, 2)


def test_rotate_ccw_undoes_rotate():
    grid = asymmetric()
    assert rotate90_ccw(rotate90(grid)) == grid


def test_four_rotations_is_identity():
    grid = asymmetric()
    result = grid
    for _ in range(4):
        result = rotate90(result)
    assert result == grid


def test_flips():
    grid = asymmetric()
    assert flip_horizontal(grid) == PixelGrid.from_text([".##", "...", ".#."])
    assert flip_vertical(grid) == PixelGrid.from_text([".#.", "...", "##."])
    assert flip_horizontal(flip_horizontal(grid)) == grid


def test_transforms_do_not_mutate():
    grid = asymmetric()
    rotate90(grid)
    flip_horizontal(grid)
    flip_vertical(grid)
    assert grid == asymmetric()


def test_eight_orientations_in_documented_order():
    grid = asymmetric()
    results = list(oriented(grid))
    assert [o for o, _ in results] == list(ALL_ORIENTATIONS)
    assert results[0] == (IDENTITY, grid)
    for orientation, candidate in results:
        assert apply_orientation(grid, orientation) == candidate


def test_asymmetric_grid_has_eight_distinct_orientations():
    assert len(set(orientations(asymmetric()))) == 8


def test_symmetric_grid_still_enumerates_eight():
    grid = PixelGrid.from_text(["#.#", ".#.", "#.#"])
    results = orientations(grid)
    assert len(results) == 8
    assert len(set(results)) == 1


def test_orientation_order_is_stable():
    grid = asymmetric()
    assert orientations(grid) == orientations(grid)


def test_orientation_closure():
    for tile in load_tiles(EXAMPLE)[:3]:
        group = set(orientations(tile.grid))
        for candidate in group:
            assert set(orientations(candidate)) <= group


def test_flip_vertical_is_in_group():
    grid = asymmetric()
    assert flip_vertical(grid) == apply_orientation(grid, Orientation(2, True))


def test_orientation_validation():
    with pytest.raises(ValueError):
        Orientation(4, False)
    assert str(Orientation(1, True)) == "flip+rot90"
