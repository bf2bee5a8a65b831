"""Tests for follower transforms, glyph placement and the OnPath composite."""
from __future__ import annotations

import math

import pytest

from glide import FrameLoop
from glide_path import (
    ArrowHead,
    Eight,
    FollowPath,
    OnPath,
    Path,
    Rect,
    follow_transform,
    place_glyph,
    point_and_angle,
)
from glide_tween import AnimatablePair, AnimationDriver, Timeline

SQUARE = Rect.of_size(30, 30)
UP = (0.0, -1.0)  # screen coordinates: y grows downwards


class TestFollowTransform:
    def test_up_points_along_travel(self) -> None:
        t = follow_transform((10.0, 20.0), 0.0)
        assert t.apply(UP) == pytest.approx((11.0, 20.0))

    @pytest.mark.parametrize("angle", [0.5, 1.0, -2.0, math.pi])
    def test_up_maps_to_heading(self, angle) -> None:
        t = follow_transform((0.0, 0.0), angle)
        assert t.apply(UP) == pytest.approx((math.cos(angle), math.sin(angle)), abs=1e-12)

    def test_origin_lands_on_point(self) -> None:
        assert follow_transform((3.0, 4.0), 1.2).apply((0.0, 0.0)) == pytest.approx((3.0, 4.0))


class TestPlaceGlyph:
    def test_centre_lands_on_point(self) -> None:
        glyph = ArrowHead().path(SQUARE)
        placed = place_glyph(glyph, (100.0, 50.0), 0.0)
        bounds = placed.bounding_rect
        assert (bounds.mid_x, bounds.mid_y) == pytest.approx((100.0, 50.0))

    def test_apex_leads_when_heading_right(self) -> None:
        glyph = ArrowHead().path(SQUARE)
        before = glyph.bounding_rect
        placed = place_glyph(glyph, (0.0, 0.0), 0.0).bounding_rect
        # Quarter turn swaps the extents
        assert placed.width == pytest.approx(before.height)
        assert placed.height == pytest.approx(before.width)

    def test_glyph_position_does_not_matter(self) -> None:
        at_origin = place_glyph(ArrowHead().path(SQUARE), (5.0, 5.0), 0.7)
        elsewhere = place_glyph(ArrowHead().path(Rect(200.0, 300.0, 30.0, 30.0)), (5.0, 5.0), 0.7)
        a, b = at_origin.bounding_rect, elsewhere.bounding_rect
        assert (b.x, b.y, b.width, b.height) == pytest.approx((a.x, a.y, a.width, a.height))

    def test_empty_glyph(self) -> None:
        assert place_glyph(Path(), (1.0, 1.0), 0.0).is_empty


class TestFollowPath:
    def test_effect_moves_origin_onto_curve(self) -> None:
        effect = FollowPath(Eight(), offset=0.0)
        transform = effect.effect_value((30.0, 30.0))
        assert transform.apply((0.0, 0.0)) == pytest.approx((22.5, 0.0))

    def test_effect_matches_sampler(self) -> None:
        effect = FollowPath(Eight(), offset=0.42)
        eight = Eight().path(SQUARE)
        point, angle = point_and_angle(eight, 0.42)
        assert effect.effect_value((30.0, 30.0)) == follow_transform(point, angle)

    def test_animatable_data(self) -> None:
        effect = FollowPath(Eight())
        effect.animatable_data = 0.9
        assert effect.offset == 0.9


class TestOnPath:
    def test_animatable_pair(self) -> None:
        on_path = OnPath(ArrowHead(spread=0.8), Eight(), offset=0.3)
        assert on_path.animatable_data == AnimatablePair(0.3, 0.8)

    def test_setting_pair_updates_both(self) -> None:
        head = ArrowHead()
        on_path = OnPath(head, Eight())
        on_path.animatable_data = AnimatablePair(0.6, 0.25)
        assert on_path.offset == 0.6
        assert head.spread == 0.25

    def test_path_has_trail_and_head(self) -> None:
        glyph_rect = Rect(0.0, 0.0, 8.0, 8.0)
        assert len(OnPath(ArrowHead(), Eight(), 0.5, glyph_rect).path(SQUARE).subpaths()) == 2
        assert len(OnPath(ArrowHead(), Eight(), 0.1, glyph_rect).path(SQUARE).subpaths()) == 3

    def test_head_is_glyph_placed_at_sample(self) -> None:
        glyph_rect = Rect(0.0, 0.0, 8.0, 8.0)
        on_path = OnPath(ArrowHead(), Eight(), 0.5, glyph_rect)
        head = on_path.path(SQUARE).subpaths()[-1]
        point, angle = point_and_angle(Eight().path(SQUARE), 0.5)
        assert point == pytest.approx((7.5, 0.0), abs=1e-6)
        assert head == place_glyph(ArrowHead().path(glyph_rect), point, angle)

    def test_driver_interpolates_offset_and_glyph_together(self) -> None:
        loop = FrameLoop(fps=10)
        driver = AnimationDriver()
        on_path = OnPath(ArrowHead(spread=1.0), Eight())
        driver.animate(on_path, AnimatablePair(1.0, 0.5), Timeline(duration=2.0))
        loop.add_system(driver)
        loop.run(5)
        assert on_path.offset == pytest.approx(0.25)
        assert on_path.shape.spread == pytest.approx(0.875)
        assert not on_path.path(SQUARE).is_empty
