# tests/test_angles.py

import math

import pytest

from circal.geometry.angles import (
    angle_to_point,
    cumulative_size,
    degrees_to_radians,
    normalize_angle,
    polar_to_cartesian,
    radians_to_degrees,
)


def test_degrees_to_radians():
    assert degrees_to_radians(0) == 0
    assert degrees_to_radians(180) == pytest.approx(math.pi)
    assert degrees_to_radians(45) == pytest.approx(math.pi / 4)
    assert degrees_to_radians(-90) == pytest.approx(-math.pi / 2)
    assert radians_to_degrees(degrees_to_radians(123.5)) == pytest.approx(123.5)

def test_cumulative_size_is_exclusive_prefix_sum():
    sizes = [30] * 12
    assert cumulative_size(sizes, 0) == 0
    assert cumulative_size(sizes, 1) == 30
    assert cumulative_size(sizes, 3) == 90
    assert cumulative_size(sizes, 12) == 360

    assert cumulative_size([90, 180, 90], 2) == 270
    assert cumulative_size([], 0) == 0

def test_polar_to_cartesian():
    x, y = polar_to_cartesian(200, 200, 100, 0)
    assert (x, y) == pytest.approx((300, 200))

    x, y = polar_to_cartesian(200, 200, 100, math.pi / 2)
    assert (x, y) == pytest.approx((200, 300))

    # negative angles wrap trigonometrically
    x, y = polar_to_cartesian(200, 200, 100, -math.pi / 2)
    assert (x, y) == pytest.approx((200, 100))

def test_polar_to_cartesian_zero_radius_is_centre():
    for angle in (0.0, 1.0, -7.5, 100.0):
        assert polar_to_cartesian(12.5, -3.0, 0, angle) == (12.5, -3.0)

def test_normalize_angle():
    assert normalize_angle(0.0) == 0.0
    assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert normalize_angle(5 * math.pi) == pytest.approx(math.pi)
    assert normalize_angle(2 * math.pi) == 0.0
    for a in (-100.0, -1e-18, 3.0, 1e6):
        assert 0.0 <= normalize_angle(a) < 2 * math.pi

def test_angle_to_point():
    assert angle_to_point(0, 0, 1, 0) == 0.0
    assert angle_to_point(0, 0, 0, 1) == pytest.approx(math.pi / 2)
    assert angle_to_point(0, 0, 0, -1) == pytest.approx(3 * math.pi / 2)
