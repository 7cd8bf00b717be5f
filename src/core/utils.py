# core/utils.py
import math
import random
import threading
from typing import Optional
from core.vector import Vector3

_local = threading.local()


def thread_rng() -> random.Random:
    """
    Returns the generator owned by the calling thread, creating it on first use.
    Callers that need reproducible samples pass their own generator instead.
    """
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def random_in_unit_sphere(rng: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    rng = rng or thread_rng()
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def random_in_hemisphere(normal: Vector3, rng: Optional[random.Random] = None) -> Vector3:
    """
    Returns a random point in the unit sphere on the same side as `normal`.
    """
    in_unit_sphere = random_in_unit_sphere(rng)
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere


def random_in_unit_disk(rng: Optional[random.Random] = None) -> Vector3:
    """Random point in the unit disk on the z=0 plane, used for lens sampling."""
    rng = rng or thread_rng()
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Snell refraction of the unit vector uv through a surface with normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's polynomial approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
