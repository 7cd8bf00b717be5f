# geometry/rect.py
from enum import Enum
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Half-thickness of a rectangle's bounding box along its constant axis.
PLANE_PAD = 0.0001


class PlaneOrientation(Enum):
    """
    Which axis a rectangle is perpendicular to. The value is
    (k_axis, x_axis, y_axis): the constant axis and the two in-plane axes.
    """
    XY = (2, 0, 1)
    YZ = (0, 1, 2)
    ZX = (1, 2, 0)


class Plane(Hittable):
    """
    Axis-aligned rectangle [x0,x1] x [y0,y1] lying on the slab k_axis == k.
    x and y name the two in-plane axes of the orientation, not world X and Y.
    """
    def __init__(self, orientation: PlaneOrientation, x0: float, x1: float,
                 y0: float, y1: float, k: float, material):
        self.orientation = orientation
        self.x0 = x0
        self.x1 = x1
        self.y0 = y0
        self.y1 = y1
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        k_axis, x_axis, y_axis = self.orientation.value
        d = ray.direction[k_axis]
        if d == 0.0:
            # Parallel to the slab
            return None
        t = (self.k - ray.origin[k_axis]) / d
        if t < t_min or t > t_max:
            return None

        x = ray.origin[x_axis] + t * ray.direction[x_axis]
        y = ray.origin[y_axis] + t * ray.direction[y_axis]
        if x < self.x0 or x > self.x1 or y < self.y0 or y > self.y1:
            return None

        rec = HitRecord()
        rec.u = (x - self.x0) / (self.x1 - self.x0)
        rec.v = (y - self.y0) / (self.y1 - self.y0)
        rec.t = t
        rec.p = ray.at(t)
        rec.material = self.material
        outward = [0.0, 0.0, 0.0]
        outward[k_axis] = 1.0
        rec.set_face_normal(ray, Vector3(*outward))
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        k_axis, x_axis, y_axis = self.orientation.value
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[x_axis], hi[x_axis] = self.x0, self.x1
        lo[y_axis], hi[y_axis] = self.y0, self.y1
        lo[k_axis], hi[k_axis] = self.k - PLANE_PAD, self.k + PLANE_PAD
        return AABB(Vector3(*lo), Vector3(*hi))
