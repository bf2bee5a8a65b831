"""Pathable protocol and the built-in shapes: the figure-eight curve and the arrowhead."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from glide_path.config import STROKE_WIDTH
from glide_path.geometry import Affine, Rect
from glide_path.path import Path
from glide_path.stroke import stroked


@runtime_checkable
class Pathable(Protocol):
    """Anything that can produce a path for a bounding rectangle."""

    def path(self, rect: Rect) -> Path: ...


@dataclass(frozen=True)
class Eight:
    """Figure-eight curve spanning the rectangle, starting at (0.75, 0)."""

    def path(self, rect: Rect) -> Path:
        if rect.is_empty:
            return Path()
        p = Path()
        start = (0.75, 0.0)
        p.move_to(start)
        p.quad_to((1.0, 0.5), control=(1.0, 0.0))
        p.quad_to((0.75, 1.0), control=(1.0, 1.0))
        p.curve_to((0.25, 0.0), control1=(0.5, 1.0), control2=(0.5, 0.0))
        p.quad_to((0.0, 0.5), control=(0.0, 0.0))
        p.quad_to((0.25, 1.0), control=(0.0, 1.0))
        p.curve_to(start, control1=(0.5, 1.0), control2=(0.5, 0.0))
        return p.applying(
            Affine.scaling(rect.width, rect.height).then(Affine.translation(rect.x, rect.y))
        )


@dataclass
class ArrowHead:
    """Open chevron pointing up, stroked into a filled outline.

    ``spread`` is the fraction of the rectangle's width covered by the base
    of the chevron and is the shape's animatable parameter.
    """

    spread: float = 1.0
    stroke_width: float = STROKE_WIDTH

    @property
    def animatable_data(self) -> float:
        return self.spread

    @animatable_data.setter
    def animatable_data(self, value: float) -> None:
        self.spread = value

    def path(self, rect: Rect) -> Path:
        half = rect.width * self.spread / 2
        p = Path()
        p.move_to((rect.mid_x - half, rect.max_y))
        p.line_to((rect.mid_x, rect.min_y))
        p.line_to((rect.mid_x + half, rect.max_y))
        return stroked(p, self.stroke_width)
