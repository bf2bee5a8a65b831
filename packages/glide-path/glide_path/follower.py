"""Rigid transforms that carry a glyph along a path, pointing where it travels."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from glide_tween import AnimatablePair

from glide_path.config import DEFAULT_CONFIG, FollowConfig
from glide_path.geometry import Affine, Rect
from glide_path.path import Path
from glide_path.sampler import point_and_angle
from glide_path.shapes import Pathable
from glide_path.trail import trail
from glide_path.vec import Vec


def follow_transform(point: Vec, angle: float) -> Affine:
    """Rotate by ``angle + pi/2`` then move to ``point``.

    Glyphs are authored pointing up; the quarter turn lines "up" with
    ``angle == 0``, which points along +x.
    """
    return Affine.translation(point[0], point[1]).rotated(angle + math.pi / 2)


def place_glyph(glyph: Path, point: Vec, angle: float) -> Path:
    """Centre the glyph on its bounding box, then apply ``follow_transform``."""
    if glyph.is_empty:
        return Path()
    bounds = glyph.bounding_rect
    centered = glyph.offset_by(-bounds.mid_x, -bounds.mid_y)
    return centered.applying(follow_transform(point, angle))


@dataclass
class FollowPath:
    """Geometry effect moving a view of a given size along ``path_shape``.

    The view is expected to be drawn centred on its own origin.
    """

    path_shape: Pathable
    offset: float = 0.0
    config: FollowConfig = field(default=DEFAULT_CONFIG)

    @property
    def animatable_data(self) -> float:
        return self.offset

    @animatable_data.setter
    def animatable_data(self, value: float) -> None:
        self.offset = value

    def effect_value(self, size: tuple[float, float]) -> Affine:
        path = self.path_shape.path(Rect.of_size(*size))
        point, angle = point_and_angle(path, self.offset, self.config.tangent_delta)
        return follow_transform(point, angle)


@dataclass
class OnPath:
    """A glyph riding ``path_shape`` at ``offset`` with its trail behind it.

    Both the offset and the glyph's own animatable parameter are exposed as
    one ``AnimatablePair`` so they can be interpolated together.
    """

    shape: Pathable
    path_shape: Pathable
    offset: float = 0.0
    glyph_rect: Rect | None = None
    config: FollowConfig = field(default=DEFAULT_CONFIG)

    @property
    def animatable_data(self) -> AnimatablePair:
        return AnimatablePair(self.offset, getattr(self.shape, "animatable_data", 0.0))

    @animatable_data.setter
    def animatable_data(self, value: AnimatablePair) -> None:
        self.offset = value.first
        if hasattr(self.shape, "animatable_data"):
            self.shape.animatable_data = value.second

    def path(self, rect: Rect) -> Path:
        path = self.path_shape.path(rect)
        point, angle = point_and_angle(path, self.offset, self.config.tangent_delta)
        head = place_glyph(self.shape.path(self.glyph_rect or rect), point, angle)
        result = trail(
            path,
            self.offset,
            self.config.trail_length,
            self.config.stroke_width,
            self.config.flatness,
        )
        result.add_path(head)
        return result
