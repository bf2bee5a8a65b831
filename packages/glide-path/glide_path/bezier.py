"""Bezier curve evaluation on control-point tuples of degree 1 to 3.

A curve is a tuple of control points ``(p0, ..., pn)``: two points is a line,
three a quadratic and four a cubic.
"""
from __future__ import annotations

import math

from glide_path import vec
from glide_path.vec import Vec

Curve = tuple[Vec, ...]


def point_at(curve: Curve, u: float) -> Vec:
    """Evaluate the curve at parameter u by de Casteljau reduction."""
    pts = list(curve)
    while len(pts) > 1:
        pts = [vec.lerp(pts[i], pts[i + 1], u) for i in range(len(pts) - 1)]
    return pts[0]


def split(curve: Curve, u: float) -> tuple[Curve, Curve]:
    """Split at u into two curves of the same degree."""
    left = [curve[0]]
    right = [curve[-1]]
    pts = list(curve)
    while len(pts) > 1:
        pts = [vec.lerp(pts[i], pts[i + 1], u) for i in range(len(pts) - 1)]
        left.append(pts[0])
        right.append(pts[-1])
    return tuple(left), tuple(reversed(right))


def sub_curve(curve: Curve, u0: float, u1: float) -> Curve:
    """Return the portion of the curve between parameters u0 <= u1."""
    if u1 < 1.0:
        curve, _ = split(curve, u1)
    if u0 > 0.0:
        # Rescale u0 into the already-trimmed [0, u1] range
        _, curve = split(curve, u0 / u1 if u1 > 0.0 else 0.0)
    return curve


def derivative(curve: Curve, u: float) -> Vec:
    """First derivative (hodograph) at u."""
    n = len(curve) - 1
    if n == 0:
        return (0.0, 0.0)
    hodo = tuple(vec.scale(vec.sub(curve[i + 1], curve[i]), n) for i in range(n))
    return point_at(hodo, u)


def _axis_roots(values: tuple[float, ...]) -> list[float]:
    """Parameters in (0, 1) where the derivative of one coordinate is zero."""
    if len(values) == 3:
        a, b, c = values
        denom = a - 2 * b + c
        if denom == 0.0:
            return []
        return [u for u in ((a - b) / denom,) if 0.0 < u < 1.0]
    if len(values) == 4:
        p0, p1, p2, p3 = values
        # B'(u)/3 = A u^2 + B u + C
        qa = -p0 + 3 * p1 - 3 * p2 + p3
        qb = 2 * (p0 - 2 * p1 + p2)
        qc = p1 - p0
        if abs(qa) < 1e-12:
            if abs(qb) < 1e-12:
                return []
            roots = [-qc / qb]
        else:
            disc = qb * qb - 4 * qa * qc
            if disc < 0:
                return []
            sq = math.sqrt(disc)
            roots = [(-qb + sq) / (2 * qa), (-qb - sq) / (2 * qa)]
        return [u for u in roots if 0.0 < u < 1.0]
    return []


def extrema(curve: Curve) -> list[Vec]:
    """End points plus every interior point where x or y is extremal."""
    params = [0.0, 1.0]
    for axis in (0, 1):
        params.extend(_axis_roots(tuple(p[axis] for p in curve)))
    return [point_at(curve, u) for u in params]


def polygon_length(curve: Curve) -> float:
    return sum(vec.distance(curve[i], curve[i + 1]) for i in range(len(curve) - 1))


def flatten(curve: Curve, tolerance: float) -> list[Vec]:
    """Approximate the curve by a polyline, including both end points."""
    if len(curve) == 2:
        return [curve[0], curve[1]]
    n = math.ceil(math.sqrt(polygon_length(curve) / tolerance)) if tolerance > 0 else 64
    n = max(2, min(256, n))
    return [point_at(curve, i / n) for i in range(n + 1)]
