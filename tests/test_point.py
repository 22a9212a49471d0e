"""Tests for movable points."""

import math

import pytest

from bezier_gap.point import Point
from bezier_gap.types import PointRole, PointState


class TestSetPosition:
    def test_moves_and_notifies_delta(self) -> None:
        calls: list[tuple[float, float]] = []
        point = Point(10, 20, on_position_change=lambda dx, dy: calls.append((dx, dy)))

        point.set_position(15, 12)

        assert point.to_pair() == (15.0, 12.0)
        assert calls == [(5.0, -8.0)]

    def test_silent_skips_handler(self) -> None:
        calls: list[tuple[float, float]] = []
        point = Point(0, 0, on_position_change=lambda dx, dy: calls.append((dx, dy)))

        point.set_position(3, 4, silent=True)

        assert point.to_pair() == (3.0, 4.0)
        assert calls == []

    def test_without_handler(self) -> None:
        point = Point(0, 0)
        point.set_position(1, 1)
        assert point.to_pair() == (1.0, 1.0)

    def test_rejects_non_finite(self) -> None:
        point = Point(0, 0)
        with pytest.raises(ValueError):
            point.set_position(float("nan"), 0)
        with pytest.raises(ValueError):
            point.set_position(0, float("inf"))
        assert point.to_pair() == (0.0, 0.0)


class TestSetOffset:
    def test_translates_without_notifying(self) -> None:
        calls: list[tuple[float, float]] = []
        point = Point(1, 2, on_position_change=lambda dx, dy: calls.append((dx, dy)))

        point.set_offset(-1, 3)

        assert point.to_pair() == (0.0, 5.0)
        assert calls == []

    def test_out_of_frame_values_accepted(self) -> None:
        point = Point(0, 0)
        point.set_offset(-5000, 9000)
        assert point.to_pair() == (-5000.0, 9000.0)


class TestHitTesting:
    def test_distance_to(self) -> None:
        assert Point(0, 0).distance_to(3, 4) == pytest.approx(5.0)

    def test_collides_within_radius(self) -> None:
        point = Point(100, 100, radius=5)
        assert point.collides(103, 104)
        assert not point.collides(104, 104)


class TestDefaults:
    def test_defaults(self) -> None:
        point = Point(1, 2)
        assert point.role == PointRole.ANCHOR
        assert point.state == PointState.BASE
        assert point.radius == 5.0
        assert not point.is_control

    def test_coordinates_are_floats(self) -> None:
        point = Point(1, 2)
        assert isinstance(point.x, float)
        assert point.to_list() == [1.0, 2.0]

    def test_rejects_non_finite_construction(self) -> None:
        with pytest.raises(ValueError):
            Point(math.inf, 0)

    def test_set_state_returns_point(self) -> None:
        point = Point(0, 0)
        assert point.set_state(PointState.HOVER) is point
        assert point.state == PointState.HOVER
