"""Tests for bearing, haversine distance and bearing-change primitives."""

from __future__ import annotations

import math

import pytest

from waypoint_sampler.geometry.primitives import (
    EARTH_RADIUS_M,
    bearing,
    bearing_change,
    distance_meters,
    path_length_meters,
)

ONE_DEGREE_M = EARTH_RADIUS_M * math.pi / 180


class TestBearing:
    def test_due_north(self):
        assert bearing((0.0, 0.0), (0.0, 1.0)) == pytest.approx(0.0, abs=1e-6)

    def test_due_east(self):
        assert bearing((0.0, 0.0), (1.0, 0.0)) == pytest.approx(90.0, abs=1e-6)

    def test_due_south(self):
        assert bearing((0.0, 1.0), (0.0, 0.0)) == pytest.approx(180.0, abs=1e-6)

    def test_due_west_is_normalised_positive(self):
        assert bearing((1.0, 0.0), (0.0, 0.0)) == pytest.approx(270.0, abs=1e-6)

    def test_result_always_in_range(self):
        pairs = [
            ((-0.1, 51.5), (-0.2, 51.4)),
            ((0.9, 51.9), (0.95, 51.85)),
            ((179.5, 0.0), (-179.5, 0.0)),
        ]
        for a, b in pairs:
            assert 0.0 <= bearing(a, b) < 360.0

    def test_coincident_points_give_zero(self):
        assert bearing((0.9, 51.9), (0.9, 51.9)) == 0.0

    def test_nan_propagates(self):
        assert math.isnan(bearing((math.nan, 0.0), (0.0, 1.0)))

    def test_infinity_gives_nan_instead_of_raising(self):
        assert math.isnan(bearing((0.0, 0.0), (math.inf, 1.0)))

    def test_accepts_lists(self):
        assert bearing([0.0, 0.0], [1.0, 0.0]) == pytest.approx(90.0, abs=1e-6)


class TestDistance:
    def test_one_degree_of_latitude(self):
        assert distance_meters((0.0, 0.0), (0.0, 1.0)) == pytest.approx(111_195, rel=0.01)

    def test_same_point_is_zero(self):
        assert distance_meters((0.9, 51.9), (0.9, 51.9)) == 0.0

    def test_symmetric(self):
        a, b = (-1.2, 52.6), (-1.1, 52.7)
        assert distance_meters(a, b) == pytest.approx(distance_meters(b, a))

    def test_antipodal_points_are_half_circumference(self):
        d = distance_meters((0.0, 0.0), (180.0, 0.0))
        assert d == pytest.approx(math.pi * EARTH_RADIUS_M, rel=1e-9)

    def test_nan_propagates(self):
        assert math.isnan(distance_meters((0.0, math.nan), (0.0, 1.0)))


class TestBearingChange:
    def test_wraparound_359_to_1_is_two_degrees(self):
        assert bearing_change(359.0, 1.0) == pytest.approx(2.0)

    def test_wraparound_is_symmetric(self):
        assert bearing_change(1.0, 359.0) == pytest.approx(2.0)

    def test_reversal_is_180(self):
        assert bearing_change(0.0, 180.0) == pytest.approx(180.0)

    def test_no_change(self):
        assert bearing_change(90.0, 90.0) == 0.0

    def test_nan(self):
        assert math.isnan(bearing_change(math.nan, 10.0))


class TestPathLength:
    def test_empty_and_single_point(self):
        assert path_length_meters([]) == 0.0
        assert path_length_meters([(0.0, 0.0)]) == 0.0

    def test_sums_segments(self):
        points = [(0.0, 0.0), (0.0, 1.0), (0.0, 2.0)]
        assert path_length_meters(points) == pytest.approx(2 * ONE_DEGREE_M)
