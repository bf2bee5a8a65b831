"""Shapes and animation state for the arrow demo."""
from __future__ import annotations

from dataclasses import dataclass

from glide import FrameContext
from glide_path import (
    Affine,
    ArrowHead,
    Eight,
    FollowPath,
    OnPath,
    Path,
    Rect,
    Trail,
    point_and_angle,
)
from glide_tween import AnimatablePair, Animated, AnimationDriver, Timeline

from ui.constants import ARROW_SIZE, SPREAD_END


@dataclass
class Frame:
    """Paths to draw for one frame, in screen coordinates."""

    outline: Path
    arrow: Path
    trail: Path
    offset: float
    angle: float


class Scene:
    """The figure-eight with an arrowhead riding it.

    In ``effect`` mode one animated position drives a FollowPath effect on
    the arrowhead and a separate Trail shape. In ``on-path`` mode a single
    OnPath shape carries both, and the arrowhead's spread is animated in the
    same pair as the offset.
    """

    def __init__(self, duration: float, mode: str = "effect") -> None:
        self.mode = mode
        self.curve = Eight()
        self.position = Animated(0.0)
        self.follow = FollowPath(self.curve)
        self.trail = Trail(self.curve)
        self.on_path = OnPath(
            ArrowHead(), self.curve, glyph_rect=Rect.of_size(ARROW_SIZE, ARROW_SIZE)
        )
        self.timeline = Timeline(duration=duration)
        self.driver = AnimationDriver()

    def on_appear(self, ctx: FrameContext) -> None:
        if self.mode == "effect":
            self.driver.animate(self.position, 1.0, self.timeline)
        else:
            self.driver.animate(self.on_path, AnimatablePair(1.0, SPREAD_END), self.timeline)

    def sync_system(self, ctx: FrameContext) -> None:
        """Feed the animated position to every shape that reads it."""
        self.follow.offset = self.position.value
        self.trail.offset = self.position.value

    @property
    def offset(self) -> float:
        return self.position.value if self.mode == "effect" else self.on_path.offset

    def frame(self, rect: Rect) -> Frame:
        outline = self.curve.path(rect)
        _, angle = point_and_angle(outline, self.offset)
        if self.mode == "effect":
            # The glyph is drawn centred on its own origin, then moved by the effect
            half = ARROW_SIZE / 2
            glyph = ArrowHead().path(Rect(-half, -half, ARROW_SIZE, ARROW_SIZE))
            effect = self.follow.effect_value(rect.size).then(
                Affine.translation(rect.x, rect.y)
            )
            return Frame(outline, glyph.applying(effect), self.trail.path(rect), self.offset, angle)
        return Frame(outline, self.on_path.path(rect), Path(), self.offset, angle)
