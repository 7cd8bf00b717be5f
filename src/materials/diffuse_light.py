# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Point3, Color
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Area light. Absorbs every incoming path and emits the value of its
    texture, so a patterned texture gives a patterned light.
    """
    def __init__(self, emit: Union[Color, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=None) -> Optional[Tuple[Color, Ray]]:
        return None

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        return self.texture.value(u, v, p)
