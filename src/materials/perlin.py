# materials/perlin.py
from typing import Optional
import numpy as np
from numba import njit
from core.vector import Point3

POINT_COUNT = 256


@njit
def _noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = np.int64(fx)
    j = np.int64(fy)
    k = np.int64(fz)

    # Hermite smoothing of the interpolation weights
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                gradient_dot = (ranvec[idx, 0] * (u - di)
                                + ranvec[idx, 1] * (v - dj)
                                + ranvec[idx, 2] * (w - dk))
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * gradient_dot)
    return accum


@njit
def _turbulence(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.25
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


class Perlin:
    """
    Gradient noise over 256 random unit vectors hashed by three permutation
    tables. noise() is in roughly [-1, 1]; turb() sums octaves of it.
    """
    def __init__(self, rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        vectors = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        norms = np.linalg.norm(vectors, axis=1, keepdims=True)
        self.ranvec = vectors / np.where(norms == 0.0, 1.0, norms)
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p: Point3) -> float:
        return float(_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                            float(p.x), float(p.y), float(p.z)))

    def turb(self, p: Point3, depth: int = 7) -> float:
        return float(_turbulence(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                 float(p.x), float(p.y), float(p.z), depth))
