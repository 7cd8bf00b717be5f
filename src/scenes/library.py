# scenes/library.py
import logging
import random
from typing import Callable, Dict, Optional, Tuple
import numpy as np
from camera.camera import Camera
from core.config import CameraConfig, RenderConfig
from core.vector import Vector3, Point3, Color
from geometry.constant_medium import ConstantMedium
from geometry.cube import Cube
from geometry.rect import Plane, PlaneOrientation
from geometry.sphere import Sphere, MovingSphere
from geometry.transform import RotateY, Translate
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, NoiseTexture, SolidColor
from materials.texture_loader import load_texture_or_placeholder

logger = logging.getLogger(__name__)

Scene = Tuple[RenderConfig, HittableList, Camera]

VUP = Vector3(0.0, 1.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0)

# Scenes here mix overlapping objects, so their BVHs return the closer of
# the two subtree hits.
BVH_OPTIONS = dict(nearest_hit=True)


def _finish(config: RenderConfig, world: HittableList) -> Scene:
    return config, world, Camera(config.camera_config, config.aspect_ratio)


def _seeded(rng: Optional[random.Random]):
    rng = rng or random.Random()
    return rng, np.random.default_rng(rng.getrandbits(64))


def base_scene(rng: Optional[random.Random] = None) -> Scene:
    """Ground, a diffuse center sphere, a glass sphere and a metal sphere."""
    camera_config = CameraConfig(Point3(0, 0, 0), Point3(0, 0, -1), VUP, vfov=90.0)
    config = RenderConfig(camera_config, aspect_ratio=16.0 / 9.0, image_width=256,
                          samples_per_pixel=100, max_depth=5)

    world = HittableList()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.8, 0.8, 0.0))))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.1, 0.2, 0.5))))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, Dielectric(1.5)))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, Metal(Color(0.8, 0.6, 0.2), 0.0)))
    return _finish(config, world)


def two_spheres(rng: Optional[random.Random] = None) -> Scene:
    """A small diffuse sphere resting on a large diffuse ground sphere, lit by the sky."""
    camera_config = CameraConfig(Point3(0, 0, 0), Point3(0, 0, -1), VUP, vfov=90.0)
    config = RenderConfig(camera_config, aspect_ratio=16.0 / 9.0, image_width=256,
                          samples_per_pixel=50, max_depth=5)

    world = HittableList()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.5, 0.5, 0.5))))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.5, 0.5, 0.5))))
    return _finish(config, world)


def random_spheres(rng: Optional[random.Random] = None) -> Scene:
    """Grid of small random spheres around three large ones; the diffuse ones bounce during the shutter."""
    rng, _ = _seeded(rng)
    camera_config = CameraConfig(Point3(13, 2, 3), Point3(0, 0, 0), VUP, vfov=20.0,
                                 aperture=0.1, dist_to_focus=10.0, time0=0.0, time1=1.0)
    config = RenderConfig(camera_config, aspect_ratio=3.0 / 2.0, image_width=1200,
                          samples_per_pixel=500, max_depth=50)

    world = HittableList()
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, Lambertian(checker)))

    glass = Dielectric(1.5)
    for a in range(-11, 12):
        for b in range(-11, 12):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # Diffuse
                albedo = Color.random(rng) * Color.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # Metal
                albedo = Color.random(rng, 0.5, 1.0)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                # Glass
                world.add(Sphere(center, 0.2, glass))

    world.add(Sphere(Point3(0, 1, 0), 1.0, glass))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    world.build_bvh(0.0, 1.0, rng=rng, **BVH_OPTIONS)
    return _finish(config, world)


def two_checkered_spheres(rng: Optional[random.Random] = None) -> Scene:
    camera_config = CameraConfig(Point3(13, 2, 3), Point3(0, 0, 0), VUP, vfov=20.0)
    config = RenderConfig(camera_config, aspect_ratio=16.0 / 9.0, image_width=400,
                          samples_per_pixel=100, max_depth=50)

    checkered = Lambertian(CheckerTexture(SolidColor.from_rgb(0.2, 0.3, 0.1),
                                          SolidColor.from_rgb(0.9, 0.9, 0.9)))
    world = HittableList()
    world.add(Sphere(Point3(0, -10, 0), 10.0, checkered))
    world.add(Sphere(Point3(0, 10, 0), 10.0, checkered))
    return _finish(config, world)


def two_perlin_spheres(rng: Optional[random.Random] = None) -> Scene:
    _, np_rng = _seeded(rng)
    camera_config = CameraConfig(Point3(13, 2, 3), Point3(0, 0, 0), VUP, vfov=20.0)
    config = RenderConfig(camera_config, aspect_ratio=16.0 / 9.0, image_width=400,
                          samples_per_pixel=100, max_depth=50)

    marble = Lambertian(NoiseTexture(4.0, np_rng))
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000.0, marble))
    world.add(Sphere(Point3(0, 2, 0), 2.0, marble))
    return _finish(config, world)


def earth(rng: Optional[random.Random] = None, texture_path: str = "earthmap.jpg") -> Scene:
    """A globe wrapped in an equirectangular image; solid cyan if the image is missing."""
    camera_config = CameraConfig(Point3(13, 2, 3), Point3(0, 0, 0), VUP, vfov=20.0)
    config = RenderConfig(camera_config, aspect_ratio=16.0 / 9.0, image_width=400,
                          samples_per_pixel=100, max_depth=50)

    earth_surface = Lambertian(load_texture_or_placeholder(texture_path))
    world = HittableList()
    world.add(Sphere(Point3(0, 0, 0), 2.0, earth_surface))
    return _finish(config, world)


def simple_light(rng: Optional[random.Random] = None) -> Scene:
    _, np_rng = _seeded(rng)
    camera_config = CameraConfig(Point3(26, 3, 6), Point3(0, 2, 0), VUP, vfov=20.0)
    config = RenderConfig(camera_config, aspect_ratio=16.0 / 9.0, image_width=400,
                          samples_per_pixel=400, max_depth=50, background_color=BLACK)

    marble = Lambertian(NoiseTexture(4.0, np_rng))
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000.0, marble))
    world.add(Sphere(Point3(0, 2, 0), 2.0, marble))
    light = DiffuseLight(Color(4, 4, 4))
    world.add(Plane(PlaneOrientation.XY, 3, 5, 1, 3, -2, light))
    return _finish(config, world)


def _cornell_walls(world: HittableList, light: DiffuseLight, light_z: Tuple[float, float],
                   light_x: Tuple[float, float]) -> Lambertian:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))

    world.add(Plane(PlaneOrientation.YZ, 0, 555, 0, 555, 555, green))
    world.add(Plane(PlaneOrientation.YZ, 0, 555, 0, 555, 0, red))
    world.add(Plane(PlaneOrientation.ZX, light_z[0], light_z[1], light_x[0], light_x[1], 554, light))
    world.add(Plane(PlaneOrientation.ZX, 0, 555, 0, 555, 0, white))
    world.add(Plane(PlaneOrientation.ZX, 0, 555, 0, 555, 555, white))
    world.add(Plane(PlaneOrientation.XY, 0, 555, 0, 555, 555, white))
    return white


def _cornell_camera() -> CameraConfig:
    return CameraConfig(Point3(278, 278, -800), Point3(278, 278, 0), VUP, vfov=40.0)


def cornell_box(rng: Optional[random.Random] = None) -> Scene:
    config = RenderConfig(_cornell_camera(), aspect_ratio=1.0, image_width=600,
                          samples_per_pixel=200, max_depth=50, background_color=BLACK)

    world = HittableList()
    white = _cornell_walls(world, DiffuseLight(Color(15, 15, 15)), (227, 332), (213, 343))

    tall = Cube(Point3(0, 0, 0), Point3(165, 330, 165), white)
    world.add(Translate(RotateY(tall, 15), Vector3(265, 0, 295)))
    short = Cube(Point3(0, 0, 0), Point3(165, 165, 165), white)
    world.add(Translate(RotateY(short, -18), Vector3(130, 0, 65)))
    return _finish(config, world)


def cornell_smoke(rng: Optional[random.Random] = None) -> Scene:
    config = RenderConfig(_cornell_camera(), aspect_ratio=1.0, image_width=600,
                          samples_per_pixel=200, max_depth=50, background_color=BLACK)

    world = HittableList()
    white = _cornell_walls(world, DiffuseLight(Color(7, 7, 7)), (127, 432), (113, 443))

    tall = Translate(RotateY(Cube(Point3(0, 0, 0), Point3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    short = Translate(RotateY(Cube(Point3(0, 0, 0), Point3(165, 165, 165), white), -18),
                      Vector3(130, 0, 65))
    world.add(ConstantMedium(tall, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Color(1, 1, 1)))
    return _finish(config, world)


def final_scene(rng: Optional[random.Random] = None,
                texture_path: str = "earthmap.jpg") -> Scene:
    """Every feature at once: BVH'd ground boxes, motion blur, glass, fog, textures, instancing."""
    rng, np_rng = _seeded(rng)
    camera_config = CameraConfig(Point3(478, 278, -600), Point3(278, 278, 0), VUP, vfov=40.0,
                                 time0=0.0, time1=1.0)
    config = RenderConfig(camera_config, aspect_ratio=1.0, image_width=800,
                          samples_per_pixel=100, max_depth=50, background_color=BLACK)

    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes = HittableList()
    boxes_per_side = 20
    w = 100.0
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes.add(Cube(Point3(x0, 0.0, z0), Point3(x0 + w, y1, z0 + w), ground))
    boxes.build_bvh(0.0, 1.0, rng=rng, **BVH_OPTIONS)

    world = HittableList()
    world.add(boxes)

    light = DiffuseLight(Color(7, 7, 7))
    world.add(Plane(PlaneOrientation.ZX, 147, 412, 123, 423, 554, light))

    center1 = Point3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    world.add(MovingSphere(center1, center2, 0.0, 1.0, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    world.add(Sphere(Point3(260, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Point3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Point3(360, 150, 145), 70, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    mist = Sphere(Point3(0, 0, 0), 5000, Dielectric(1.5))
    world.add(ConstantMedium(mist, 0.0001, Color(1, 1, 1)))

    world.add(Sphere(Point3(400, 200, 400), 100,
                     Lambertian(load_texture_or_placeholder(texture_path))))
    world.add(Sphere(Point3(220, 280, 300), 80, Lambertian(NoiseTexture(0.1, np_rng))))

    white = Lambertian(Color(0.73, 0.73, 0.73))
    cluster = HittableList()
    for _ in range(1000):
        cluster.add(Sphere(Point3.random(rng, 0, 165), 10, white))
    cluster.build_bvh(0.0, 1.0, rng=rng, **BVH_OPTIONS)
    world.add(Translate(RotateY(cluster, 15), Vector3(-100, 270, 395)))

    return _finish(config, world)


SCENES: Dict[str, Callable[..., Scene]] = {
    "base": base_scene,
    "two_spheres": two_spheres,
    "random_spheres": random_spheres,
    "two_checkered_spheres": two_checkered_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}


def get_scene(name: str, rng: Optional[random.Random] = None, **kwargs) -> Scene:
    """Build the named scene. Raises ValueError for unknown names."""
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}") from None
    logger.info("Building scene %s", name)
    return builder(rng, **kwargs)
