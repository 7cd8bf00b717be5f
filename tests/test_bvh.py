"""Unit tests for HittableList and the BVH."""

import math
import random

import pytest

from core.ray import Ray
from core.vector import Vector3, Point3
from geometry.bvh import BVHNode, BVHConstructionError
from geometry.sphere import Sphere
from geometry.world import HittableList


def sphere_grid(material, n=6, spacing=3.0, radius=0.5, seed=7):
    """n*n non-overlapping spheres on the z=0 plane, jittered in depth, in shuffled order."""
    rng = random.Random(seed)
    spheres = [Sphere(Point3(i * spacing, j * spacing, rng.uniform(-1, 1)), radius, material)
               for i in range(n) for j in range(n)]
    rng.shuffle(spheres)
    return spheres


class TestHittableList:
    """Tests for the linear-scan aggregate."""

    def test_nearest_hit_regardless_of_order(self, gray):
        world = HittableList()
        world.add(Sphere(Point3(0, 0, -5), 0.5, gray))
        world.add(Sphere(Point3(0, 0, -2), 0.5, gray))
        rec = world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.5)

    def test_empty_world_misses(self):
        world = HittableList()
        assert world.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None
        assert world.bounding_box(0, 1) is None

    def test_add_invalidates_cached_tree(self, gray):
        """The only way to change a world is add, which drops any built tree."""
        world = HittableList()
        world.add(Sphere(Point3(0, 0, -2), 0.5, gray))
        world.build_bvh(0.0, 1.0)
        world.add(Sphere(Point3(0, 0, -5), 0.5, gray))
        assert world.bvh_root is None
        assert len(world) == 2
        assert not hasattr(world, "clear")

    def test_bounding_box_is_union(self, gray):
        world = HittableList([
            Sphere(Point3(0, 0, 0), 1, gray),
            Sphere(Point3(5, 5, 5), 1, gray),
        ])
        box = world.bounding_box(0, 1)
        assert tuple(box.minimum) == (-1, -1, -1)
        assert tuple(box.maximum) == (6, 6, 6)

    def test_nested_list_without_box(self, gray):
        world = HittableList([Sphere(Point3(0, 0, 0), 1, gray), HittableList()])
        assert world.bounding_box(0, 1) is None

    def test_add_discards_bvh(self, gray):
        world = HittableList([Sphere(Point3(0, 0, 0), 1, gray), Sphere(Point3(3, 0, 0), 1, gray)])
        world.build_bvh(rng=random.Random(1))
        assert world.bvh_root is not None
        world.add(Sphere(Point3(6, 0, 0), 1, gray))
        assert world.bvh_root is None
        assert len(world) == 3


class TestBVHConstruction:
    """Tests for building the hierarchy."""

    def test_empty_is_fatal(self):
        with pytest.raises(BVHConstructionError):
            BVHNode([])

    def test_missing_box_is_fatal(self, gray):
        with pytest.raises(BVHConstructionError):
            BVHNode([Sphere(Point3(0, 0, 0), 1, gray), HittableList()], rng=random.Random(1))

    def test_invalid_split_axes(self, gray):
        with pytest.raises(ValueError):
            BVHNode([Sphere(Point3(0, 0, 0), 1, gray)], split_axes=4)

    def test_single_object_is_leaf(self, gray):
        sphere = Sphere(Point3(0, 0, 0), 1, gray)
        node = BVHNode([sphere])
        assert node.is_leaf
        assert node.object is sphere
        assert node.depth() == 1

    def test_keeps_every_object(self, gray):
        spheres = sphere_grid(gray)
        node = BVHNode(spheres, rng=random.Random(3))
        assert sorted(map(id, node.leaves())) == sorted(map(id, spheres))

    def test_balanced_median_split(self, gray):
        node = BVHNode(sphere_grid(gray, n=8), rng=random.Random(3))
        # 64 objects split at the midpoint every level
        assert node.depth() == 7

    def test_root_box_covers_all(self, gray):
        spheres = sphere_grid(gray)
        node = BVHNode(spheres, rng=random.Random(3))
        expected = HittableList(spheres).bounding_box(0, 0)
        assert tuple(node.bounding_box().minimum) == pytest.approx(tuple(expected.minimum))
        assert tuple(node.bounding_box().maximum) == pytest.approx(tuple(expected.maximum))

    def test_split_axis_never_z_by_default(self, gray):
        """With the default axis range only X and Y are used for splitting."""
        node = BVHNode(sphere_grid(gray, n=8), rng=random.Random(11))
        axes = set()
        stack = [node]
        while stack:
            current = stack.pop()
            if not current.is_leaf:
                axes.add(current.axis)
                stack.extend((current.left, current.right))
        assert axes <= {0, 1}

    def test_split_axes_three_uses_z(self, gray):
        node = BVHNode(sphere_grid(gray, n=8), split_axes=3, rng=random.Random(11))
        axes = set()
        stack = [node]
        while stack:
            current = stack.pop()
            if not current.is_leaf:
                axes.add(current.axis)
                stack.extend((current.left, current.right))
        assert 2 in axes


class TestBVHTraversal:
    """Tests comparing BVH hits against a brute-force scan."""

    @pytest.mark.parametrize("nearest_hit", [False, True])
    def test_matches_linear_scan_per_sphere(self, gray, nearest_hit):
        """A ray through exactly one sphere reports the same t as the linear scan."""
        spheres = sphere_grid(gray)
        linear = HittableList(spheres)
        node = BVHNode(spheres, nearest_hit=nearest_hit, rng=random.Random(5))
        for sphere in spheres:
            ray = Ray(Point3(sphere.center.x, sphere.center.y, 10), Vector3(0, 0, -1))
            expected = linear.hit(ray, 0.001, math.inf)
            actual = node.hit(ray, 0.001, math.inf)
            assert actual is not None
            assert actual.t == pytest.approx(expected.t)

    def test_miss_between_spheres(self, gray):
        node = BVHNode(sphere_grid(gray), rng=random.Random(5))
        ray = Ray(Point3(1.5, 1.5, 10), Vector3(0, 0, -1))
        assert node.hit(ray, 0.001, math.inf) is None

    def test_world_uses_bvh(self, gray):
        spheres = sphere_grid(gray)
        world = HittableList(spheres)
        target = spheres[0]
        ray = Ray(Point3(target.center.x, target.center.y, 10), Vector3(0, 0, -1))
        expected = world.hit(ray, 0.001, math.inf).t
        world.build_bvh(rng=random.Random(2))
        assert world.hit(ray, 0.001, math.inf).t == pytest.approx(expected)


class TestLeftPreference:
    """Tests for the left-subtree preference when both children hit."""

    @pytest.fixture
    def aligned(self, gray):
        # Splitting on X only: the sphere at x=0 is the left child.
        return [Sphere(Point3(1, 0, 0), 0.4, gray), Sphere(Point3(0, 0, 0), 0.4, gray)]

    def test_left_hit_preferred(self, aligned):
        node = BVHNode(aligned, split_axes=1, rng=random.Random(1))
        ray = Ray(Point3(5, 0, 0), Vector3(-1, 0, 0))
        assert node.hit(ray, 0.001, math.inf).t == pytest.approx(4.6)

    def test_nearest_hit_option(self, aligned):
        node = BVHNode(aligned, split_axes=1, nearest_hit=True, rng=random.Random(1))
        ray = Ray(Point3(5, 0, 0), Vector3(-1, 0, 0))
        assert node.hit(ray, 0.001, math.inf).t == pytest.approx(3.6)
        assert HittableList(aligned).hit(ray, 0.001, math.inf).t == pytest.approx(3.6)
