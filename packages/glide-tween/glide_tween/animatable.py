"""Animatable values: floats and component-wise pairs of them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar


class Animatable(Protocol):
    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, scalar: float) -> Any: ...


A = TypeVar("A", bound=Animatable)


@dataclass(frozen=True)
class AnimatablePair:
    """Two animatable values interpolated independently of each other."""

    first: Any
    second: Any

    def __add__(self, other: AnimatablePair) -> AnimatablePair:
        return AnimatablePair(self.first + other.first, self.second + other.second)

    def __sub__(self, other: AnimatablePair) -> AnimatablePair:
        return AnimatablePair(self.first - other.first, self.second - other.second)

    def __mul__(self, scalar: float) -> AnimatablePair:
        return AnimatablePair(self.first * scalar, self.second * scalar)

    __rmul__ = __mul__


def interpolate(start: A, end: A, fraction: float) -> A:
    """Linear interpolation, component-wise for pairs."""
    return start + (end - start) * fraction
