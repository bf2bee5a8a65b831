"""Tests for Path building, inspection and derived paths."""
from __future__ import annotations

import pytest

from glide import GlideError
from glide_path import (
    Affine,
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    Path,
    PathError,
    QuadTo,
    Rect,
)


def l_shape() -> Path:
    p = Path()
    p.move_to((0.0, 0.0))
    p.line_to((10.0, 0.0))
    p.line_to((10.0, 10.0))
    return p


class TestBuilding:
    def test_elements_in_order(self) -> None:
        p = Path()
        p.move_to((0.0, 0.0))
        p.line_to((1.0, 0.0))
        p.quad_to((2.0, 1.0), control=(2.0, 0.0))
        p.curve_to((0.0, 0.0), control1=(2.0, 2.0), control2=(0.0, 2.0))
        p.close()
        assert p.elements == (
            MoveTo((0.0, 0.0)),
            LineTo((1.0, 0.0)),
            QuadTo((2.0, 0.0), (2.0, 1.0)),
            CubicTo((2.0, 2.0), (0.0, 2.0), (0.0, 0.0)),
            Close(),
        )
        assert len(p) == 5

    def test_drawing_before_move_raises(self) -> None:
        p = Path()
        with pytest.raises(PathError):
            p.line_to((1.0, 1.0))

    def test_path_error_hierarchy(self) -> None:
        assert issubclass(PathError, ValueError)
        assert issubclass(PathError, GlideError)

    def test_close_on_empty_path_is_ignored(self) -> None:
        p = Path()
        p.close()
        assert p.is_empty

    def test_constructor_accepts_elements(self) -> None:
        p = Path([MoveTo((0.0, 0.0)), LineTo((1.0, 1.0))])
        assert p.current_point == (1.0, 1.0)

    def test_add_path_concatenates(self) -> None:
        p = l_shape()
        other = Path([MoveTo((20.0, 0.0)), LineTo((30.0, 0.0))])
        p.add_path(other)
        assert len(p.subpaths()) == 2
        assert p.current_point == (30.0, 0.0)

    def test_add_curve_rejects_unknown_degree(self) -> None:
        p = Path([MoveTo((0.0, 0.0))])
        with pytest.raises(PathError):
            p.add_curve(((0.0, 0.0),) * 5)


class TestPoints:
    def test_empty_path(self) -> None:
        p = Path()
        assert p.start_point is None
        assert p.current_point is None

    def test_start_and_current(self) -> None:
        p = l_shape()
        assert p.start_point == (0.0, 0.0)
        assert p.current_point == (10.0, 10.0)

    def test_close_returns_pen_to_subpath_start(self) -> None:
        p = l_shape()
        p.close()
        assert p.current_point == (0.0, 0.0)


class TestSegments:
    def test_segments_carry_start_points(self) -> None:
        segs = list(l_shape().segments())
        assert [s.curve for s in segs] == [
            ((0.0, 0.0), (10.0, 0.0)),
            ((10.0, 0.0), (10.0, 10.0)),
        ]

    def test_close_adds_closing_segment(self) -> None:
        p = l_shape()
        p.close()
        segs = list(p.segments())
        assert segs[-1].curve == ((10.0, 10.0), (0.0, 0.0))

    def test_subpath_index(self) -> None:
        p = l_shape()
        p.move_to((50.0, 50.0))
        p.line_to((60.0, 50.0))
        assert [s.subpath for s in p.segments()] == [0, 0, 1]


class TestBounds:
    def test_polyline_bounds(self) -> None:
        assert l_shape().bounding_rect == Rect(0.0, 0.0, 10.0, 10.0)

    def test_curve_bounds_exclude_control_points(self) -> None:
        p = Path([MoveTo((0.0, 0.0)), QuadTo((5.0, 10.0), (10.0, 0.0))])
        bounds = p.bounding_rect
        assert bounds.height == pytest.approx(5.0)
        assert bounds.width == pytest.approx(10.0)

    def test_empty_bounds(self) -> None:
        assert Path().bounding_rect == Rect()

    def test_lone_move_bounds(self) -> None:
        assert Path([MoveTo((3.0, 4.0))]).bounding_rect == Rect(3.0, 4.0, 0.0, 0.0)


class TestTransforms:
    def test_applying(self) -> None:
        moved = l_shape().applying(Affine.scaling(2, 3))
        assert moved.current_point == (20.0, 30.0)

    def test_offset_by(self) -> None:
        moved = l_shape().offset_by(-5, 1)
        assert moved.start_point == (-5.0, 1.0)
        assert moved.bounding_rect == Rect(-5.0, 1.0, 10.0, 10.0)

    def test_original_unchanged(self) -> None:
        p = l_shape()
        p.offset_by(100, 100)
        assert p.start_point == (0.0, 0.0)


class TestFlattenAndExport:
    def test_flattened_marks_closed(self) -> None:
        p = l_shape()
        p.close()
        p.move_to((20.0, 0.0))
        p.line_to((30.0, 0.0))
        polylines = p.flattened()
        assert polylines[0] == ([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 0.0)], True)
        assert polylines[1] == ([(20.0, 0.0), (30.0, 0.0)], False)

    def test_svg_data(self) -> None:
        p = Path()
        p.move_to((0.0, 0.0))
        p.line_to((10.0, 0.0))
        p.quad_to((0.0, 10.0), control=(10.0, 5.0))
        p.curve_to((0.0, 0.0), control1=(0.5, 8.25), control2=(-1.0, 2.0))
        p.close()
        assert p.svg_data() == "M0 0 L10 0 Q10 5 0 10 C0.5 8.25 -1 2 0 0 Z"

    def test_equality(self) -> None:
        assert l_shape() == l_shape()
        assert l_shape() != Path()
