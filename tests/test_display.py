"""Tests for composite image rendering."""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from PIL import Image

from core.pixel_grid import PixelGrid
from features.pattern import SEA_MONSTER
from solvers.monster_scanner import scan_image
from visualization.display import (
    MATCH_COLOR,
    OFF_COLOR,
    ON_COLOR,
    render_composite,
    save_composite,
)


def monster_image():
    canvas = np.zeros((5, 22), dtype=bool)
    rows = [line.ljust(20) for line in SEA_MONSTER]
    canvas[1:4, 1:21] = [[c == '#' for c in line] for line in rows]
    canvas[0, 0] = True
    return PixelGrid(canvas)


def test_render_shape_and_colors():
    image = PixelGrid.from_text(["#.", ".."])
    rendered = render_composite(image, scale=1)
    assert rendered.shape == (2, 2, 3)
    assert rendered.dtype == np.uint8
    assert tuple(rendered[0, 0]) == ON_COLOR
    assert tuple(rendered[1, 1]) == OFF_COLOR


def test_render_scaled():
    image = PixelGrid.from_text(["#..", "..."])
    rendered = render_composite(image, scale=4)
    assert rendered.shape == (8, 12, 3)
    assert tuple(rendered[3, 3]) == ON_COLOR
    assert tuple(rendered[3, 4]) == OFF_COLOR


def test_render_highlights_matches():
    image = monster_image()
    scan = scan_image(image)
    rendered = render_composite(image, scan, scale=1)
    assert tuple(rendered[1, 19]) == MATCH_COLOR
    assert tuple(rendered[0, 0]) == ON_COLOR


def test_invalid_scale():
    with pytest.raises(ValueError):
        render_composite(PixelGrid.from_text(["#"]), scale=0)


def test_save_composite(tmp_path):
    path = save_composite(PixelGrid.from_text(["#.", ".#"]), str(tmp_path / "grid.png"), scale=3)
    with Image.open(path) as img:
        assert img.size == (6, 6)
        assert img.mode == "RGB"
