"""Design parameters for path-following glyphs and trails."""
from __future__ import annotations

from dataclasses import dataclass

from glide.types import ConfigError

TRAIL_LENGTH = 0.2
STROKE_WIDTH = 3.0
TANGENT_DELTA = 0.01
FLATNESS = 0.05


@dataclass(frozen=True)
class FollowConfig:
    """Immutable geometry settings shared by trails and path followers.

    Attributes:
        trail_length: Fraction of the path covered by the trail, in (0, 1).
        stroke_width: Width of the stroked trail and glyph outlines.
        tangent_delta: Forward step used for the finite-difference heading.
        flatness: Maximum chord error when curves are flattened for stroking.
    """

    trail_length: float = TRAIL_LENGTH
    stroke_width: float = STROKE_WIDTH
    tangent_delta: float = TANGENT_DELTA
    flatness: float = FLATNESS

    def __post_init__(self) -> None:
        if self.stroke_width < 0:
            raise ConfigError("stroke_width must not be negative")
        if not 0.0 < self.tangent_delta < 1.0:
            raise ConfigError("tangent_delta must be in (0, 1)")
        if self.flatness <= 0:
            raise ConfigError("flatness must be positive")


DEFAULT_CONFIG = FollowConfig()
