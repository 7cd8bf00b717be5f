# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from core.vector import Vector3, Point3, Color
from materials.perlin import Perlin

# Returned by image textures that have no pixel data.
MISSING_TEXTURE_COLOR = Color(0.0, 1.0, 1.0)


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Point3) -> Color:
        """Color of the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wrap a plain color in a SolidColor; textures pass through unchanged."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "SolidColor":
        return cls(Color(r, g, b))

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx)sin(sy)sin(sz) at the hit point
    selects the odd or even texture.
    """
    def __init__(self, odd: Union[Color, Texture], even: Union[Color, Texture],
                 scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def value(self, u: float, v: float, p: Point3) -> Color:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, rng: Optional[np.random.Generator] = None):
        self.noise = Perlin(rng)
        self.scale = scale

    def value(self, u: float, v: float, p: Point3) -> Color:
        return Color(1, 1, 1) * 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))


class ImageTexture(Texture):
    """
    Nearest-pixel lookup into a decoded RGB byte buffer, row 0 at the top.
    Decoding files is done by materials.texture_loader.
    """
    BYTES_PER_PIXEL = 3

    def __init__(self, data, width: int, height: int):
        if data is None:
            self.data = None
        else:
            pixels = np.frombuffer(bytes(data), dtype=np.uint8) if isinstance(data, (bytes, bytearray)) \
                else np.asarray(data, dtype=np.uint8)
            if pixels.size != width * height * self.BYTES_PER_PIXEL:
                raise ValueError(
                    f"Image buffer holds {pixels.size} bytes, expected "
                    f"{width}x{height}x{self.BYTES_PER_PIXEL}")
            self.data = pixels.reshape((height, width, self.BYTES_PER_PIXEL))
        self.width = width
        self.height = height

    def value(self, u: float, v: float, p: Point3) -> Color:
        # Without texture data, return solid cyan as a debugging aid.
        if self.data is None:
            return MISSING_TEXTURE_COLOR

        # Clamp input texture coordinates to [0,1] x [1,0]
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)  # Flip V to image coordinates

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color_scale = 1.0 / 255.0
        pixel = self.data[y, x]
        return Color(color_scale * int(pixel[0]),
                     color_scale * int(pixel[1]),
                     color_scale * int(pixel[2]))
