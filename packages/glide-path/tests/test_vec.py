"""Tests for 2D vector math helpers."""
from __future__ import annotations

import math

import pytest

from glide_path import vec


class TestArithmetic:
    def test_add_sub(self) -> None:
        assert vec.add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)
        assert vec.sub((5.0, 3.0), (1.0, 2.0)) == (4.0, 1.0)

    def test_scale(self) -> None:
        assert vec.scale((1.0, -2.0), -1.0) == (-1.0, 2.0)

    def test_dot(self) -> None:
        assert vec.dot((1.0, 0.0), (0.0, 1.0)) == 0.0
        assert vec.dot((2.0, 3.0), (4.0, -1.0)) == 5.0


class TestLength:
    def test_3_4_5(self) -> None:
        assert vec.length((3.0, 4.0)) == 5.0
        assert vec.distance((1.0, 1.0), (4.0, 5.0)) == 5.0

    def test_normalize(self) -> None:
        assert vec.normalize((0.0, 5.0)) == (0.0, 1.0)

    def test_normalize_zero_unchanged(self) -> None:
        assert vec.normalize((0.0, 0.0)) == (0.0, 0.0)


class TestDirection:
    def test_lerp(self) -> None:
        assert vec.lerp((0.0, 0.0), (10.0, -4.0), 0.25) == (2.5, -1.0)

    def test_perpendicular_is_left_normal(self) -> None:
        assert vec.perpendicular((1.0, 0.0)) == (-0.0, 1.0)

    def test_heading(self) -> None:
        assert vec.heading((0.0, 0.0), (1.0, 0.0)) == 0.0
        assert vec.heading((0.0, 0.0), (0.0, 1.0)) == pytest.approx(math.pi / 2)
        assert vec.heading((1.0, 1.0), (0.0, 1.0)) == pytest.approx(math.pi)

    def test_is_close(self) -> None:
        assert vec.is_close((1.0, 1.0), (1.0 + 1e-12, 1.0))
        assert not vec.is_close((1.0, 1.0), (1.1, 1.0))
