"""glide-tween - Looping linear animation of shape parameters over frames."""
from __future__ import annotations

from glide_tween.animatable import Animatable, AnimatablePair, interpolate
from glide_tween.components import Animated, Animation
from glide_tween.systems import AnimationDriver
from glide_tween.timeline import DEFAULT_DURATION, Timeline

__all__ = [
    "Animatable",
    "AnimatablePair",
    "Animated",
    "Animation",
    "AnimationDriver",
    "DEFAULT_DURATION",
    "Timeline",
    "interpolate",
]
