"""Path renderers for pygame surfaces."""
from __future__ import annotations

import pygame

from glide_path import Path

# Screen pixels are coarse; flatten curves to a quarter pixel
_TOLERANCE = 0.25


def stroke_path(
    surface: pygame.Surface,
    color: tuple[int, int, int],
    path: Path,
    width: int = 1,
) -> None:
    """Draw each subpath as a polyline."""
    for points, closed in path.flattened(_TOLERANCE):
        if len(points) > 1:
            pygame.draw.lines(surface, color, closed, points, width)


def fill_path(surface: pygame.Surface, color: tuple[int, int, int], path: Path) -> None:
    """Fill each subpath as its own polygon.

    Stroked outlines from glide_path are single rings for open strokes, so
    filling subpaths independently renders trails and glyphs correctly.
    """
    for points, _closed in path.flattened(_TOLERANCE):
        if len(points) > 2:
            pygame.draw.polygon(surface, color, points)
