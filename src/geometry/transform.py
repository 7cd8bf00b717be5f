# geometry/transform.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord


class Translate(Hittable):
    """Instance of a hittable displaced by a fixed offset."""

    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.object.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        rec.set_face_normal(moved, rec.normal if rec.front_face else -rec.normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.object.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


class RotateY(Hittable):
    """
    Instance of a hittable rotated about the Y axis by `angle` degrees.
    The bounding box is the envelope of the eight rotated corners of the
    wrapped object's box, computed once over time [0, 1].
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        self.angle = angle
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = obj.bounding_box(0.0, 1.0)
        self.box = None
        if box is not None:
            rotated = [self._to_world(c) for c in box.corners()]
            self.box = AABB(
                Vector3(min(c.x for c in rotated), min(c.y for c in rotated), min(c.z for c in rotated)),
                Vector3(max(c.x for c in rotated), max(c.y for c in rotated), max(c.z for c in rotated)),
            )

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None
        outward = rec.normal if rec.front_face else -rec.normal
        rec.p = self._to_world(rec.p)
        rec.set_face_normal(ray, self._to_world(outward))
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box
