"""
Unit Tests for geometry primitives
"""

import math

import pytest

from core.domain.pose import PoseLandmark
from core.services.angle_calculator import AngleCalculator


def p(x, y):
    return PoseLandmark(x=x, y=y)


class TestCalculateAngle:

    def test_opposite_sides_is_straight(self):
        """Collinear points on opposite sides of the vertex give 180 degrees"""
        assert AngleCalculator.calculate_angle(p(0, 0), p(1, 0), p(2, 0)) == pytest.approx(180.0)

    def test_same_side_is_zero(self):
        """Collinear points on the same side of the vertex give 0 degrees"""
        assert AngleCalculator.calculate_angle(p(2, 0), p(0, 0), p(1, 0)) == pytest.approx(0.0)

    def test_right_angle(self):
        assert AngleCalculator.calculate_angle(p(1, 0), p(0, 0), p(0, 1)) == pytest.approx(90.0)

    def test_zero_length_vector_is_zero(self):
        """Coincident vertex and endpoint is defined as 0, not NaN"""
        angle = AngleCalculator.calculate_angle(p(5, 5), p(5, 5), p(10, 0))
        assert angle == 0.0
        assert not math.isnan(angle)

        assert AngleCalculator.calculate_angle(p(0, 0), p(3, 4), p(3, 4)) == 0.0

    def test_nearly_collinear_does_not_overshoot(self):
        """Cosine is clamped so tiny float error never yields NaN"""
        angle = AngleCalculator.calculate_angle(p(0.1, 0.1), p(0.2, 0.2), p(0.3, 0.3))
        assert angle == pytest.approx(180.0)


class TestLineTilt:

    def test_level_line(self):
        assert AngleCalculator.calculate_line_tilt(p(0, 0), p(10, 0)) == pytest.approx(0.0)

    def test_reversed_level_line(self):
        assert abs(AngleCalculator.calculate_line_tilt(p(10, 0), p(0, 0))) == pytest.approx(180.0)

    def test_diagonal(self):
        assert AngleCalculator.calculate_line_tilt(p(0, 0), p(10, 10)) == pytest.approx(45.0)


class TestDistance:

    def test_euclidean(self):
        assert AngleCalculator.calculate_distance(p(0, 0), p(3, 4)) == pytest.approx(5.0)

    def test_midpoint(self):
        assert AngleCalculator.calculate_midpoint(p(0, 0), p(4, 2)) == (2.0, 1.0)
