# geometry/cube.py
from typing import Optional
from core.vector import Point3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.rect import Plane, PlaneOrientation
from geometry.world import HittableList


class Cube(Hittable):
    """Axis-aligned box between corners p0 (min) and p1 (max), built from six rectangles."""

    def __init__(self, p0: Point3, p1: Point3, material):
        self.minimum = p0
        self.maximum = p1
        self.sides = HittableList()

        self.sides.add(Plane(PlaneOrientation.XY, p0.x, p1.x, p0.y, p1.y, p1.z, material))
        self.sides.add(Plane(PlaneOrientation.XY, p0.x, p1.x, p0.y, p1.y, p0.z, material))

        self.sides.add(Plane(PlaneOrientation.ZX, p0.z, p1.z, p0.x, p1.x, p1.y, material))
        self.sides.add(Plane(PlaneOrientation.ZX, p0.z, p1.z, p0.x, p1.x, p0.y, material))

        self.sides.add(Plane(PlaneOrientation.YZ, p0.y, p1.y, p0.z, p1.z, p1.x, material))
        self.sides.add(Plane(PlaneOrientation.YZ, p0.y, p1.y, p0.z, p1.z, p0.x, material))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(self.minimum, self.maximum)
