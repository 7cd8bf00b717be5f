# camera/camera.py
import math
from core.config import CameraConfig
from core.ray import Ray
from core.utils import random_in_unit_disk, thread_rng


class Camera:
    """
    Look-at camera with a thin lens for depth of field and a shutter
    interval [time0, time1] for motion blur.
    """
    def __init__(self, config: CameraConfig, aspect_ratio: float):
        self.config = config
        self.aspect_ratio = aspect_ratio
        self.origin = config.lookfrom
        self.lens_radius = config.aperture / 2.0
        self.time0 = config.time0
        self.time1 = config.time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        config = self.config
        theta = math.radians(config.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (config.lookfrom - config.lookat).normalize()
        self.u = config.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.horizontal = self.u * viewport_width * config.dist_to_focus
        self.vertical = self.v * viewport_height * config.dist_to_focus

        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * config.dist_to_focus)

    def get_ray(self, s: float, t: float, rng=None) -> Ray:
        """Ray through image-plane coordinates (s, t) in [0, 1], with lens and shutter jitter."""
        rng = rng or thread_rng()
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        time = self.time0 if self.time1 <= self.time0 else rng.uniform(self.time0, self.time1)
        return Ray(ray_origin, ray_direction, time)
