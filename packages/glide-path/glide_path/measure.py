"""Length tables for trimming a path by fraction of its total length.

Each segment is sampled at a fixed number of parameter steps and the chord
lengths are accumulated. The resulting total is an approximation of the arc
length; trim fractions are measured against it, and a fraction inside a
segment is mapped back to a curve parameter by interpolating the table.
"""
from __future__ import annotations

import bisect
from dataclasses import dataclass

from glide_path import bezier, vec
from glide_path.path import Path, Segment

SAMPLES_PER_CURVE = 48


@dataclass(frozen=True)
class _Entry:
    segment: Segment
    start: float
    length: float
    params: tuple[float, ...]
    lengths: tuple[float, ...]

    @property
    def end(self) -> float:
        return self.start + self.length

    def param_at(self, distance: float) -> float:
        """Curve parameter at a distance measured from the segment start."""
        if distance <= 0.0:
            return 0.0
        if distance >= self.length:
            return 1.0
        i = bisect.bisect_left(self.lengths, distance)
        d0, d1 = self.lengths[i - 1], self.lengths[i]
        u0, u1 = self.params[i - 1], self.params[i]
        if d1 == d0:
            return u0
        return u0 + (u1 - u0) * (distance - d0) / (d1 - d0)


def _tabulate(segment: Segment, start: float) -> _Entry:
    curve = segment.curve
    steps = 1 if len(curve) == 2 else SAMPLES_PER_CURVE
    params = [i / steps for i in range(steps + 1)]
    lengths = [0.0]
    prev = curve[0]
    for u in params[1:]:
        p = bezier.point_at(curve, u)
        lengths.append(lengths[-1] + vec.distance(prev, p))
        prev = p
    return _Entry(segment, start, lengths[-1], tuple(params), tuple(lengths))


class PathMeasure:
    def __init__(self, path: Path) -> None:
        entries: list[_Entry] = []
        total = 0.0
        for segment in path.segments():
            entry = _tabulate(segment, total)
            entries.append(entry)
            total += entry.length
        self._entries = entries
        self._length = total

    @property
    def length(self) -> float:
        return self._length

    def locate(self, fraction: float) -> tuple[Segment, float] | None:
        """Segment and curve parameter at a fraction of the total length."""
        if not self._entries or self._length == 0.0:
            return None
        distance = min(max(fraction, 0.0), 1.0) * self._length
        for entry in self._entries:
            if entry.length > 0.0 and distance <= entry.end:
                return entry.segment, entry.param_at(distance - entry.start)
        last = self._entries[-1]
        return last.segment, 1.0

    def trimmed(self, start: float, end: float) -> Path:
        """Sub-path covering [start, end] as fractions of the total length.

        Fractions are clamped to [0, 1]. An empty or inverted interval
        yields an empty path.
        """
        start = min(max(start, 0.0), 1.0)
        end = min(max(end, 0.0), 1.0)
        result = Path()
        if end <= start or self._length == 0.0:
            return result

        lo = start * self._length
        hi = end * self._length
        subpath = None
        for entry in self._entries:
            if entry.length == 0.0 or entry.end <= lo:
                continue
            if entry.start >= hi:
                break
            u0 = 0.0 if lo <= entry.start else entry.param_at(lo - entry.start)
            u1 = 1.0 if hi >= entry.end else entry.param_at(hi - entry.start)
            if u1 <= u0:
                continue
            piece = bezier.sub_curve(entry.segment.curve, u0, u1)
            if subpath != entry.segment.subpath:
                result.move_to(piece[0])
                subpath = entry.segment.subpath
            result.add_curve(piece)
        return result
