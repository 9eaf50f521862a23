"""Visualization utilities for assembled images."""
from .display import (
    render_composite,
    save_composite,
    display_composite
)
