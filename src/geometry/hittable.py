# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB


class HitRecord:
    """
    Result of one ray-surface intersection. The normal always faces the
    incoming ray; front_face tells whether the ray hit the outer side.
    """
    __slots__ = ('p', 'normal', 't', 'front_face', 'material', 'u', 'v')

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material=None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p
        self.normal = normal
        self.t = t
        self.front_face = front_face
        self.material = material
        self.u = u  # surface coordinates for texture lookup
        self.v = v

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """Store outward_normal, flipped when the ray arrives from inside."""
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable:
    """Anything a ray can intersect: primitives, instances, media and aggregates."""

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        """
        Nearest intersection with t in [t_min, t_max], or None. rng is only
        consumed by objects that sample (participating media).
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Box enclosing the object over the shutter interval, or None when the
        object has no finite extent.
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
