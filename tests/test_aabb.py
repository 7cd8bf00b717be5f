"""Unit tests for the AABB slab test and box union."""

import math

import pytest

from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3


@pytest.fixture
def unit_box():
    return AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))


class TestSlabTest:
    """Tests for AABB.hit."""

    def test_ray_through_center(self, unit_box):
        """A ray through the center hits for any interval bracketing the box."""
        ray = Ray(Vector3(-1, 0.5, 0.5), Vector3(1, 0, 0))
        assert unit_box.hit(ray, 0.001, math.inf)
        assert unit_box.hit(ray, 0.5, 1.5)
        assert unit_box.hit(ray, 1.5, 1.6)

    def test_interval_before_box(self, unit_box):
        ray = Ray(Vector3(-1, 0.5, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.001, 0.5)

    def test_interval_after_box(self, unit_box):
        ray = Ray(Vector3(-1, 0.5, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 2.5, math.inf)

    def test_negative_direction(self, unit_box):
        ray = Ray(Vector3(2, 0.5, 0.5), Vector3(-1, 0, 0))
        assert unit_box.hit(ray, 0.001, math.inf)

    def test_ray_pointing_away(self, unit_box):
        ray = Ray(Vector3(2, 0.5, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.001, math.inf)

    def test_outside_extent_on_one_axis(self, unit_box):
        ray = Ray(Vector3(-1, 0.5, 3.0), Vector3(1, 0.1, 0))
        assert not unit_box.hit(ray, 0.001, math.inf)

    def test_zero_component_outside_slab(self, unit_box):
        """A zero direction component with the origin outside that slab misses via inf arithmetic."""
        ray = Ray(Vector3(-1, 2, 0.5), Vector3(1, 0, 0))
        assert not unit_box.hit(ray, 0.001, math.inf)

    def test_zero_component_inside_slab(self, unit_box):
        ray = Ray(Vector3(0.5, 0.5, -3), Vector3(0, 0, 1))
        assert unit_box.hit(ray, 0.001, math.inf)

    def test_negative_zero_component(self, unit_box):
        ray = Ray(Vector3(-1, 0.5, 0.5), Vector3(1, -0.0, 0.0))
        assert unit_box.hit(ray, 0.001, math.inf)

    def test_degenerate_box(self):
        """Boxes with zero thickness on an axis can still be hit across that axis."""
        flat = AABB(Vector3(0, 0, 0), Vector3(1, 1, 0))
        ray = Ray(Vector3(0.5, 0.5, 1), Vector3(0, 0, -1))
        assert not flat.hit(ray, 0.001, math.inf)
        thin = AABB(Vector3(0, 0, -0.0001), Vector3(1, 1, 0.0001))
        assert thin.hit(ray, 0.001, math.inf)


class TestBoxHelpers:
    """Tests for surrounding_box and corners."""

    def test_surrounding_box(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-1, 0.5, 2), Vector3(0.5, 3, 4))
        box = AABB.surrounding_box(a, b)
        assert tuple(box.minimum) == (-1, 0, 0)
        assert tuple(box.maximum) == (1, 3, 4)

    def test_corners(self, unit_box):
        corners = {tuple(c) for c in unit_box.corners()}
        assert len(corners) == 8
        assert (0, 0, 0) in corners
        assert (1, 1, 1) in corners
        assert (1, 0, 1) in corners
