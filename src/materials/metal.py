# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class Metal(Material):
    """
    Specular reflector tinted by its albedo texture.
    `fuzz` (clamped to at most 1) blurs the mirror reflection.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.texture.value(rec.u, rec.v, rec.p), scattered

        # Fuzz pushed the reflection below the surface
        return None
