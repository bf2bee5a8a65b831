"""Linear timelines mapping elapsed seconds to animation progress."""
from __future__ import annotations

from dataclasses import dataclass

from glide.types import ConfigError

DEFAULT_DURATION = 5.0


@dataclass(frozen=True)
class Timeline:
    """Linear 0 -> 1 progress over ``duration`` seconds.

    With ``repeat_forever`` the progress snaps back to 0 at the end of each
    cycle; ``autoreverses`` plays every other cycle backwards instead.
    """

    duration: float = DEFAULT_DURATION
    repeat_forever: bool = True
    autoreverses: bool = False

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ConfigError("duration must be positive")

    def progress(self, elapsed: float) -> float:
        if elapsed <= 0:
            return 0.0
        cycles = elapsed / self.duration
        if not self.repeat_forever:
            return min(cycles, 1.0)
        if self.autoreverses:
            phase = cycles % 2.0
            return 2.0 - phase if phase > 1.0 else phase
        return cycles % 1.0

    def is_finished(self, elapsed: float) -> bool:
        return not self.repeat_forever and elapsed >= self.duration
