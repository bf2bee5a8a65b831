"""glide - A minimal fixed-rate frame loop for path animations."""

from glide.loop import FrameLoop
from glide.types import ConfigError, FrameContext, GlideError, System

__all__ = [
    "FrameLoop",
    "FrameContext",
    "System",
    "GlideError",
    "ConfigError",
]
