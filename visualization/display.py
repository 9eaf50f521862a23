"""Display utilities for the composite image."""

import cv2
import numpy as np
import matplotlib.pyplot as plt
from PIL import Image
from pathlib import Path
from typing import Optional, Tuple

from core.pixel_grid import PixelGrid
from solvers.monster_scanner import ScanResult

OFF_COLOR = (18, 40, 84)       # water
ON_COLOR = (120, 180, 230)     # waves
MATCH_COLOR = (230, 90, 40)    # pattern matches


def render_composite(image: PixelGrid, scan: Optional[ScanResult] = None,
                     scale: int = 8,
                     off_color: Tuple[int, int, int] = OFF_COLOR,
                     on_color: Tuple[int, int, int] = ON_COLOR,
                     match_color: Tuple[int, int, int] = MATCH_COLOR) -> np.ndarray:
    """
    Render a pixel grid as an RGB array.

    Args:
        image: Grid to render
        scan: Optional scan result; its oriented image is rendered instead
              of `image`, with matched cells highlighted
        scale: Output pixels per grid pixel
        off_color, on_color, match_color: RGB colors

    Returns:
        uint8 array of shape (rows * scale, cols * scale, 3)
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    grid = scan.image if scan is not None else image
    output = np.empty((grid.rows, grid.cols, 3), dtype=np.uint8)
    output[:] = off_color
    output[grid.data] = on_color

    if scan is not None:
        for row, col in scan.covered_cells():
            output[row, col] = match_color

    if scale > 1:
        output = cv2.resize(output, (grid.cols * scale, grid.rows * scale),
                            interpolation=cv2.INTER_NEAREST)
    return output


def save_composite(image: PixelGrid, output_path: str,
                   scan: Optional[ScanResult] = None, scale: int = 8) -> Path:
    """Render and write a PNG."""
    path = Path(output_path)
    output_dir = path.parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)

    Image.fromarray(render_composite(image, scan, scale)).save(path)
    return path


def display_composite(image: PixelGrid, scan: Optional[ScanResult] = None,
                      title: str = "Composite image", figsize: tuple = (8, 8)):
    """Show the composite image, and the matched orientation when given."""
    if scan is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
        ax.imshow(render_composite(image, scale=1), interpolation='nearest')
        ax.set_title(title)
        ax.axis('off')
    else:
        fig, axes = plt.subplots(1, 2, figsize=(figsize[0] * 2, figsize[1]))
        axes[0].imshow(render_composite(image, scale=1), interpolation='nearest')
        axes[0].set_title(title)
        axes[0].axis('off')

        axes[1].imshow(render_composite(image, scan, scale=1), interpolation='nearest')
        axes[1].set_title(f"{scan.orientation}: {scan.match_count} matches, "
                          f"roughness {scan.roughness}")
        axes[1].axis('off')

    plt.tight_layout()
    plt.show()
