"""2D vector math helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec = tuple[float, float]


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def dot(a: Vec, b: Vec) -> float:
    return a[0] * b[0] + a[1] * b[1]


def length(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vec, b: Vec) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def normalize(v: Vec) -> Vec:
    mag = length(v)
    if mag == 0.0:
        return v
    return (v[0] / mag, v[1] / mag)


def lerp(a: Vec, b: Vec, t: float) -> Vec:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def perpendicular(v: Vec) -> Vec:
    """Left-hand normal of v (same length)."""
    return (-v[1], v[0])


def heading(a: Vec, b: Vec) -> float:
    """Direction from a to b in radians, 0 pointing along +x."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def is_close(a: Vec, b: Vec, tol: float = 1e-9) -> bool:
    return abs(a[0] - b[0]) <= tol and abs(a[1] - b[1]) <= tol
