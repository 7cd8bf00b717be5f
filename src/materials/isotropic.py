# materials/isotropic.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""

    def __init__(self, albedo: Union[Color, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Tuple[Color, Ray]:
        scattered = Ray(rec.p, random_in_unit_sphere(rng), ray_in.time)
        return self.texture.value(rec.u, rec.v, rec.p), scattered
