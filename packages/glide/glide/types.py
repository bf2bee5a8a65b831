"""Shared type aliases and errors for the glide frame loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class GlideError(Exception):
    """Base class for errors raised by the glide packages."""


class ConfigError(GlideError, ValueError):
    """Raised when a loop, timeline or stroke is configured with invalid values."""


System = Callable[[FrameContext], None]
