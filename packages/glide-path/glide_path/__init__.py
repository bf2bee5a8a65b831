"""glide-path - Path sampling, trails, and followers for path animations."""
from __future__ import annotations

from glide_path import vec
from glide_path.config import (
    DEFAULT_CONFIG,
    STROKE_WIDTH,
    TANGENT_DELTA,
    TRAIL_LENGTH,
    FollowConfig,
)
from glide_path.follower import FollowPath, OnPath, follow_transform, place_glyph
from glide_path.geometry import Affine, Rect
from glide_path.measure import PathMeasure
from glide_path.path import Close, CubicTo, LineTo, MoveTo, Path, PathError, QuadTo
from glide_path.sampler import analytic_angle, point, point_and_angle
from glide_path.shapes import ArrowHead, Eight, Pathable
from glide_path.stroke import stroked
from glide_path.trail import Trail, trail, trail_path

__all__ = [
    "Affine",
    "ArrowHead",
    "Close",
    "CubicTo",
    "DEFAULT_CONFIG",
    "Eight",
    "FollowConfig",
    "FollowPath",
    "LineTo",
    "MoveTo",
    "OnPath",
    "Path",
    "PathError",
    "PathMeasure",
    "Pathable",
    "QuadTo",
    "Rect",
    "STROKE_WIDTH",
    "TANGENT_DELTA",
    "TRAIL_LENGTH",
    "Trail",
    "analytic_angle",
    "follow_transform",
    "place_glyph",
    "point",
    "point_and_angle",
    "stroked",
    "trail",
    "trail_path",
    "vec",
]
