# renderer/raytracer.py
import logging
import math
import random
import time
from concurrent import futures
from typing import Optional
import numpy as np
from tqdm import tqdm
from core.config import RenderConfig
from core.ray import Ray
from core.vector import Color
from core.utils import thread_rng
from geometry.hittable import Hittable

logger = logging.getLogger(__name__)

# Minimum hit distance; rejects self-intersections from floating point error.
T_MIN = 0.001
BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Color:
    """Vertical white-to-blue gradient used as background for ambient-lit scenes."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE.lerp(SKY_BLUE, t)


def ray_color(ray: Ray, world: Hittable, depth: int,
              background: Optional[Color] = None, rng=None) -> Color:
    """
    Radiance carried back along `ray`, estimated by following one random
    scattering path for at most `depth` bounces.

    background: color returned on a miss; None selects the sky gradient.
    """
    if depth <= 0:
        return BLACK

    rng = rng or thread_rng()
    rec = world.hit(ray, T_MIN, math.inf, rng)
    if rec is None:
        return sky_color(ray) if background is None else background

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    attenuation, scattered = scatter
    return emitted + attenuation * ray_color(scattered, world, depth - 1, background, rng)


class Renderer:
    """
    Renders a scene into a linear radiance buffer of shape (height, width, 3),
    top row first. Each pixel holds the sum of samples_per_pixel estimates;
    see renderer.tone_mapping for averaging and quantization.
    """
    def __init__(self, config: RenderConfig, world: Hittable, camera):
        self.config = config
        self.world = world
        self.camera = camera
        self.width = config.image_width
        self.height = config.image_height

    def render_scanline(self, j: int, rng: random.Random) -> np.ndarray:
        """Accumulated color of every pixel on scanline j (j = 0 is the bottom row)."""
        config = self.config
        row = np.zeros((self.width, 3), dtype=np.float64)
        for i in range(self.width):
            r = g = b = 0.0
            for _ in range(config.samples_per_pixel):
                u = (i + rng.random()) / (self.width - 1)
                v = (j + rng.random()) / (self.height - 1)
                ray = self.camera.get_ray(u, v, rng)
                color = ray_color(ray, self.world, config.max_depth,
                                  config.background_color, rng)
                r += color.x
                g += color.y
                b += color.z
            row[i] = (r, g, b)
        return row

    def render(self, workers: int = 1, seed: Optional[int] = None,
               progress: bool = True) -> np.ndarray:
        """
        Render every scanline. With workers > 1 scanlines are spread over a
        process pool; each scanline draws from its own generator seeded from
        one SeedSequence, so a fixed seed gives the same image either way.
        """
        seeds = [int(s.generate_state(1)[0])
                 for s in np.random.SeedSequence(seed).spawn(self.height)]
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        start = time.perf_counter()
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    self.width, self.height, self.config.samples_per_pixel,
                    self.config.max_depth, workers)

        scanlines = range(self.height - 1, -1, -1)
        with tqdm(total=self.height, desc="Rendering", unit="line",
                  disable=not progress) as pbar:
            if workers <= 1:
                for j in scanlines:
                    image[self.height - 1 - j] = self.render_scanline(j, random.Random(seeds[j]))
                    pbar.update(1)
            else:
                with futures.ProcessPoolExecutor(max_workers=workers,
                                                 initializer=_init_worker,
                                                 initargs=(self,)) as executor:
                    pending = {executor.submit(_render_scanline_task, j, seeds[j]): j
                               for j in scanlines}
                    for future in futures.as_completed(pending):
                        j = pending[future]
                        image[self.height - 1 - j] = future.result()
                        pbar.update(1)

        logger.info("Done in %.2fs", time.perf_counter() - start)
        return image


# Per-process renderer, set once by the pool initializer so the scene is
# pickled once per worker instead of once per scanline.
_worker_renderer: Optional[Renderer] = None


def _init_worker(renderer: Renderer):
    global _worker_renderer
    _worker_renderer = renderer


def _render_scanline_task(j: int, seed: int) -> np.ndarray:
    return _worker_renderer.render_scanline(j, random.Random(seed))
