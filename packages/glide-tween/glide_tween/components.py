"""Animation and Animated state holders."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from glide_tween.timeline import Timeline


@dataclass
class Animated:
    """A bare animatable value, for state shared by several shapes."""

    value: Any = 0.0

    @property
    def animatable_data(self) -> Any:
        return self.value

    @animatable_data.setter
    def animatable_data(self, value: Any) -> None:
        self.value = value


@dataclass
class Animation:
    """Drives ``target.animatable_data`` from ``start`` to ``end`` along ``timeline``."""

    target: Any
    start: Any
    end: Any
    timeline: Timeline = field(default_factory=Timeline)
    started_at: float | None = None  # loop time of the frame before the first update
    elapsed: float = 0.0
