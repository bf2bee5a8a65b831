"""Point and heading of a marker at a fractional position along a path."""
from __future__ import annotations

import math

from glide_path import bezier, vec
from glide_path.config import TANGENT_DELTA
from glide_path.path import Path, PathError
from glide_path.vec import Vec


def point(path: Path, t: float) -> Vec:
    """Coordinate at trim fraction ``t`` in [0, 1].

    At ``t == 0`` the path's start point is returned directly, since a
    zero-length trim has no end point to read.
    """
    assert 0.0 <= t <= 1.0, f"position {t!r} outside [0, 1]"
    start = path.start_point
    if start is None:
        raise PathError("cannot sample an empty path")
    if t == 0.0:
        return start
    end = path.trimmed(0.0, t).current_point
    return start if end is None else end


def point_and_angle(path: Path, t: float, delta: float = TANGENT_DELTA) -> tuple[Vec, float]:
    """Position at ``t`` and the heading towards the sample ``delta`` ahead.

    The forward sample wraps past the end of the path, which is only
    meaningful for closed paths.
    """
    p1 = point(path, t)
    p2 = point(path, (t + delta) % 1.0)
    return p1, vec.heading(p1, p2)


def analytic_angle(path: Path, t: float) -> float:
    """Heading at ``t`` from the Bezier derivative of the segment under it."""
    assert 0.0 <= t <= 1.0, f"position {t!r} outside [0, 1]"
    located = path.measure().locate(t)
    if located is None:
        raise PathError("cannot sample an empty path")
    segment, u = located
    d = bezier.derivative(segment.curve, u)
    if vec.length(d) < 1e-12:
        # Coincident control points; step along the curve instead
        step = -1e-4 if u >= 1.0 else 1e-4
        a = bezier.point_at(segment.curve, u)
        b = bezier.point_at(segment.curve, u + step)
        d = vec.sub(b, a) if step > 0 else vec.sub(a, b)
    return math.atan2(d[1], d[0])
