"""Stroke-to-outline conversion.

Each subpath is flattened and offset by half the stroke width on both sides.
Vertices get miter joins, falling back to bevels past the miter limit; open
subpaths end in butt caps. A closed subpath becomes two rings, the inner one
wound the opposite way so non-zero filling leaves the middle empty.
"""
from __future__ import annotations

from glide.types import ConfigError

from glide_path import vec
from glide_path.config import FLATNESS
from glide_path.path import Path
from glide_path.vec import Vec

MITER_LIMIT = 10.0


def _dedupe(points: list[Vec]) -> list[Vec]:
    result: list[Vec] = []
    for p in points:
        if not result or not vec.is_close(result[-1], p):
            result.append(p)
    return result


def _normal(a: Vec, b: Vec) -> Vec:
    return vec.perpendicular(vec.normalize(vec.sub(b, a)))


def _join(point: Vec, n_in: Vec, n_out: Vec, half: float, miter_limit: float) -> list[Vec]:
    """Offset points on the +normal side for one interior vertex."""
    bisector = vec.add(n_in, n_out)
    if vec.length(bisector) < 1e-12:
        return [vec.add(point, vec.scale(n_in, half)), vec.add(point, vec.scale(n_out, half))]
    m = vec.normalize(bisector)
    cos_half = vec.dot(m, n_out)
    if cos_half <= 0.0 or 1.0 / cos_half > miter_limit:
        return [vec.add(point, vec.scale(n_in, half)), vec.add(point, vec.scale(n_out, half))]
    return [vec.add(point, vec.scale(m, half / cos_half))]


def _side(points: list[Vec], half: float, closed: bool, miter_limit: float) -> list[Vec]:
    n = len(points)
    normals = [_normal(points[i], points[(i + 1) % n]) for i in range(n if closed else n - 1)]
    out: list[Vec] = []
    for i, p in enumerate(points):
        if closed:
            out.extend(_join(p, normals[i - 1], normals[i], half, miter_limit))
        elif i == 0:
            out.append(vec.add(p, vec.scale(normals[0], half)))
        elif i == n - 1:
            out.append(vec.add(p, vec.scale(normals[-1], half)))
        else:
            out.extend(_join(p, normals[i - 1], normals[i], half, miter_limit))
    return out


def _emit(result: Path, ring: list[Vec]) -> None:
    result.move_to(ring[0])
    for p in ring[1:]:
        result.line_to(p)
    result.close()


def stroked(
    path: Path,
    width: float,
    tolerance: float = FLATNESS,
    miter_limit: float = MITER_LIMIT,
) -> Path:
    """Return the filled outline of ``path`` stroked at ``width``."""
    if width < 0:
        raise ConfigError("stroke width must not be negative")
    result = Path()
    if width == 0 or path.is_empty:
        return result

    half = width / 2
    for points, closed in path.flattened(tolerance):
        points = _dedupe(points)
        if closed and len(points) > 1 and vec.is_close(points[0], points[-1]):
            points.pop()
        if len(points) < 2:
            continue
        if closed and len(points) > 2:
            _emit(result, _side(points, half, True, miter_limit))
            _emit(result, list(reversed(_side(points, -half, True, miter_limit))))
        else:
            left = _side(points, half, False, miter_limit)
            right = _side(points, -half, False, miter_limit)
            _emit(result, left + list(reversed(right)))
    return result
