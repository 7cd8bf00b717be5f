# core/config.py
from typing import Optional
from core.vector import Vector3, Point3, Color


class CameraConfig:
    """
    Look-at camera parameters. `vfov` is the vertical field of view in degrees.
    When `dist_to_focus` is omitted the focus plane passes through `lookat`.
    """
    def __init__(self, lookfrom: Point3, lookat: Point3, vup: Vector3,
                 vfov: float, aperture: float = 0.0,
                 dist_to_focus: Optional[float] = None,
                 time0: float = 0.0, time1: float = 0.0):
        if vfov <= 0 or vfov >= 180:
            raise ValueError(f"vfov must be in (0, 180) degrees, got {vfov}")
        if aperture < 0:
            raise ValueError(f"aperture must be non-negative, got {aperture}")
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aperture = aperture
        if dist_to_focus is None:
            dist_to_focus = (lookfrom - lookat).length()
        self.dist_to_focus = dist_to_focus
        self.time0 = time0
        self.time1 = time1


class RenderConfig:
    """
    Image and sampling settings for one render.

    `background_color` selects the miss term of the integrator: a fixed color
    for scenes lit by emitters, or None for the sky gradient.
    """
    def __init__(self, camera_config: CameraConfig, aspect_ratio: float = 16.0 / 9.0,
                 image_width: int = 400, samples_per_pixel: int = 100,
                 max_depth: int = 50, background_color: Optional[Color] = None):
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if image_width < 2:
            raise ValueError(f"image_width must be at least 2, got {image_width}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.camera_config = camera_config
        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.image_height = int(image_width / aspect_ratio)
        if self.image_height < 2:
            raise ValueError(
                f"image_width {image_width} with aspect_ratio {aspect_ratio} "
                f"gives image_height {self.image_height}")
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.background_color = background_color

    def with_overrides(self, **overrides) -> "RenderConfig":
        """Copy of this config with the given non-None fields replaced."""
        values = {
            "camera_config": self.camera_config,
            "aspect_ratio": self.aspect_ratio,
            "image_width": self.image_width,
            "samples_per_pixel": self.samples_per_pixel,
            "max_depth": self.max_depth,
            "background_color": self.background_color,
        }
        for key, value in overrides.items():
            if key not in values:
                raise ValueError(f"Unknown render setting: {key}")
            if value is not None:
                values[key] = value
        return RenderConfig(**values)

    def __repr__(self) -> str:
        return (f"RenderConfig({self.image_width}x{self.image_height}, "
                f"spp={self.samples_per_pixel}, max_depth={self.max_depth})")
