"""Animation driver: a frame system interpolating animatable targets."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from glide_tween.animatable import interpolate
from glide_tween.components import Animation
from glide_tween.timeline import Timeline

if TYPE_CHECKING:
    from glide import FrameContext

logger = logging.getLogger(__name__)


class AnimationDriver:
    """Owns running animations and advances them once per frame.

    Register the driver itself as a frame-loop system. An animation's clock
    starts on the first frame it sees; each frame the interpolated value is
    recomputed from the loop time elapsed since then and written into the
    target.
    """

    def __init__(
        self,
        on_complete: Callable[[FrameContext, Animation], None] | None = None,
    ) -> None:
        self._animations: list[Animation] = []
        self._on_complete = on_complete

    @property
    def animations(self) -> list[Animation]:
        return list(self._animations)

    def animate(self, target: Any, end: Any, timeline: Timeline | None = None) -> Animation:
        """Start animating ``target`` from its current value to ``end``.

        Any animation already running on the same target is replaced.
        """
        self.cancel(target)
        animation = Animation(
            target=target,
            start=target.animatable_data,
            end=end,
            timeline=timeline or Timeline(),
        )
        self._animations.append(animation)
        logger.debug(
            "animating %s to %r over %.2fs (repeat=%s)",
            type(target).__name__, end, animation.timeline.duration,
            animation.timeline.repeat_forever,
        )
        return animation

    def cancel(self, target: Any) -> None:
        self._animations = [a for a in self._animations if a.target is not target]

    def __call__(self, ctx: FrameContext) -> None:
        for animation in list(self._animations):
            if animation.started_at is None:
                animation.started_at = ctx.elapsed - ctx.dt
            animation.elapsed = ctx.elapsed - animation.started_at
            fraction = animation.timeline.progress(animation.elapsed)
            animation.target.animatable_data = interpolate(
                animation.start, animation.end, fraction
            )

            if animation.timeline.is_finished(animation.elapsed):
                animation.target.animatable_data = animation.end
                self._animations.remove(animation)
                if self._on_complete is not None:
                    self._on_complete(ctx, animation)
