"""Rectangles and 2D affine transforms."""
from __future__ import annotations

import math
from dataclasses import dataclass

from glide_path.vec import Vec


@dataclass(frozen=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def of_size(cls, width: float, height: float) -> Rect:
        return cls(0.0, 0.0, width, height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0.0 and self.height <= 0.0


@dataclass(frozen=True)
class Affine:
    """Affine map (x, y) -> (a*x + c*y + tx, b*x + d*y + ty).

    ``rotated`` prepends the rotation, so ``Affine.translation(5, 0).rotated(r)``
    rotates points first and then moves them.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def translation(cls, dx: float, dy: float) -> Affine:
        return cls(tx=dx, ty=dy)

    @classmethod
    def rotation(cls, radians: float) -> Affine:
        cos = math.cos(radians)
        sin = math.sin(radians)
        return cls(a=cos, b=sin, c=-sin, d=cos)

    @classmethod
    def scaling(cls, sx: float, sy: float) -> Affine:
        return cls(a=sx, d=sy)

    def then(self, other: Affine) -> Affine:
        """Compose: apply self first, then other."""
        return Affine(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            tx=other.a * self.tx + other.c * self.ty + other.tx,
            ty=other.b * self.tx + other.d * self.ty + other.ty,
        )

    def rotated(self, radians: float) -> Affine:
        return Affine.rotation(radians).then(self)

    def apply(self, point: Vec) -> Vec:
        x, y = point
        return (self.a * x + self.c * y + self.tx, self.b * x + self.d * y + self.ty)
