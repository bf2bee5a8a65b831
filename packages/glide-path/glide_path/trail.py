"""Trailing stroke segment behind a marker, wrapping across the path seam."""
from __future__ import annotations

from dataclasses import dataclass, field

from glide_path.config import DEFAULT_CONFIG, FLATNESS, STROKE_WIDTH, TRAIL_LENGTH, FollowConfig
from glide_path.geometry import Rect
from glide_path.path import Path
from glide_path.shapes import Pathable
from glide_path.stroke import stroked


def trail_path(path: Path, offset: float, trail_length: float = TRAIL_LENGTH) -> Path:
    """Unstroked sub-path covering [offset - trail_length, offset].

    When the interval starts before 0, the part that falls off the front is
    taken from the end of the path, giving two subpaths that meet at the seam.
    """
    result = Path()
    trim_from = offset - trail_length
    if trim_from < 0:
        result.add_path(path.trimmed(trim_from + 1, 1))
    result.add_path(path.trimmed(max(0.0, trim_from), offset))
    return result


def trail(
    path: Path,
    offset: float,
    trail_length: float = TRAIL_LENGTH,
    width: float = STROKE_WIDTH,
    tolerance: float = FLATNESS,
) -> Path:
    return stroked(trail_path(path, offset, trail_length), width, tolerance)


@dataclass
class Trail:
    path_shape: Pathable
    offset: float = 0.0
    config: FollowConfig = field(default=DEFAULT_CONFIG)

    @property
    def animatable_data(self) -> float:
        return self.offset

    @animatable_data.setter
    def animatable_data(self, value: float) -> None:
        self.offset = value

    def path(self, rect: Rect) -> Path:
        return trail(
            self.path_shape.path(rect),
            self.offset,
            self.config.trail_length,
            self.config.stroke_width,
            self.config.flatness,
        )
