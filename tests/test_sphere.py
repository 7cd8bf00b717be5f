"""Unit tests for Sphere and MovingSphere."""

import math

import pytest

from core.ray import Ray
from core.vector import Vector3, Point3
from geometry.sphere import Sphere, MovingSphere, get_sphere_uv


class TestSphereHit:
    """Tests for ray-sphere intersection."""

    def test_hit_from_outside(self, gray):
        sphere = Sphere(Point3(0, 0, -1), 0.5, gray)
        rec = sphere.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(0.5)
        assert tuple(rec.p) == pytest.approx((0, 0, -0.5))
        assert tuple(rec.normal) == pytest.approx((0, 0, 1))
        assert rec.front_face
        assert rec.material is gray

    def test_hit_from_inside(self, gray):
        """From inside, the far root is used and the normal is flipped toward the ray."""
        sphere = Sphere(Point3(0, 0, -1), 0.5, gray)
        rec = sphere.hit(Ray(Point3(0, 0, -1), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(0.5)
        assert not rec.front_face
        assert tuple(rec.normal) == pytest.approx((0, 0, 1))

    def test_miss(self, gray):
        sphere = Sphere(Point3(0, 0, -1), 0.5, gray)
        assert sphere.hit(Ray(Point3(0, 2, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_outside_interval(self, gray):
        sphere = Sphere(Point3(0, 0, -1), 0.5, gray)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert sphere.hit(ray, 0.001, 0.4) is None
        assert sphere.hit(ray, 2.0, math.inf) is None

    @pytest.mark.parametrize("direction", [
        Vector3(1, 0, 0), Vector3(0, -1, 0), Vector3(1, 2, 3), Vector3(-0.3, 0.1, -2),
    ])
    def test_round_trip(self, gray, direction):
        """A ray aimed at the center from 2r away hits a point r from the center."""
        center = Point3(1, -2, 3)
        radius = 1.5
        unit = direction.normalize()
        ray = Ray(center - unit * (2 * radius), unit)
        rec = Sphere(center, radius, gray).hit(ray, 0.001, math.inf)
        assert (rec.p - center).length() == pytest.approx(radius)
        expected_normal = (rec.p - center).normalize()
        assert tuple(rec.normal) == pytest.approx(tuple(expected_normal))
        assert rec.normal.dot(ray.direction) <= 0

    def test_bounding_box(self, gray):
        box = Sphere(Point3(1, 2, 3), 2, gray).bounding_box(0, 1)
        assert tuple(box.minimum) == (-1, 0, 1)
        assert tuple(box.maximum) == (3, 4, 5)


class TestSphereUV:
    """Tests for the spherical texture mapping."""

    @pytest.mark.parametrize("p, expected", [
        (Point3(1, 0, 0), (0.5, 0.5)),
        (Point3(0, 0, 1), (0.25, 0.5)),
        (Point3(0, 0, -1), (0.75, 0.5)),
        (Point3(0, 1, 0), (0.5, 1.0)),
        (Point3(0, -1, 0), (0.5, 0.0)),
    ])
    def test_uv(self, p, expected):
        u, v = get_sphere_uv(p)
        assert v == pytest.approx(expected[1])
        if abs(p.y) != 1:
            assert u == pytest.approx(expected[0])


class TestMovingSphere:
    """Tests for the time-interpolated sphere."""

    def test_center_interpolation(self, gray):
        sphere = MovingSphere(Point3(0, 0, 0), Point3(0, 1, 0), 0.0, 1.0, 0.5, gray)
        assert tuple(sphere.center(0.5)) == pytest.approx((0, 0.5, 0))
        assert tuple(sphere.center(1.0)) == pytest.approx((0, 1, 0))

    def test_hit_depends_on_ray_time(self, gray):
        sphere = MovingSphere(Point3(0, 0, 0), Point3(0, 1, 0), 0.0, 1.0, 0.5, gray)
        early = Ray(Point3(0, 1, 5), Vector3(0, 0, -1), time=0.0)
        late = Ray(Point3(0, 1, 5), Vector3(0, 0, -1), time=1.0)
        assert sphere.hit(early, 0.001, math.inf) is None
        rec = sphere.hit(late, 0.001, math.inf)
        assert rec.t == pytest.approx(4.5)

    def test_bounding_box_covers_interval(self, gray):
        sphere = MovingSphere(Point3(0, 0, 0), Point3(0, 1, 0), 0.0, 1.0, 0.5, gray)
        box = sphere.bounding_box(0.0, 1.0)
        assert tuple(box.minimum) == pytest.approx((-0.5, -0.5, -0.5))
        assert tuple(box.maximum) == pytest.approx((0.5, 1.5, 0.5))

    def test_empty_interval_is_static(self, gray):
        """Equal keyframe times leave the sphere at center0 instead of dividing by zero."""
        sphere = MovingSphere(Point3(0, 0, -2), Point3(0, 0, -2), 0.0, 0.0, 0.5, gray)
        assert tuple(sphere.center(0.7)) == (0, 0, -2)
        rec = sphere.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1), time=0.7), 0.001, math.inf)
        assert rec.t == pytest.approx(1.5)
        box = sphere.bounding_box(0.0, 1.0)
        assert tuple(box.minimum) == pytest.approx((-0.5, -0.5, -2.5))
        assert tuple(box.maximum) == pytest.approx((0.5, 0.5, -1.5))
