# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Point3, Color
from geometry.hittable import HitRecord

BLACK = Color(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are shared between primitives and never mutated after construction.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """Light emitted at the hit point. Only emissive materials override this."""
        return BLACK
