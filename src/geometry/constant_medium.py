# geometry/constant_medium.py
import math
from typing import Optional, Union
from core.vector import Vector3, Color
from core.ray import Ray
from core.aabb import AABB
from core.utils import thread_rng
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.textures import Texture


class ConstantMedium(Hittable):
    """
    Volume of constant density filling a closed boundary shape (fog, smoke).

    Rays scatter at an exponentially distributed free-path distance inside
    the boundary. The free path is drawn as -(1/density) * log10(xi), which
    makes the effective density ln(10) times the nominal one; pass
    natural_log=True to use the natural logarithm instead.
    """
    def __init__(self, boundary: Hittable, density: float,
                 albedo: Union[Color, Texture], natural_log: bool = False):
        if density <= 0:
            raise ValueError(f"density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)
        self._log = math.log if natural_log else math.log10

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rng = rng or thread_rng()
        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        if t_enter < 0:
            t_enter = 0.0

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], so the log is always finite.
        hit_distance = self.neg_inv_density * self._log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        rec.normal = Vector3(1, 0, 0)  # arbitrary
        rec.front_face = True  # also arbitrary
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
