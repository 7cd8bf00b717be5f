"""Pytest configuration for path tracer tests.

Shared fixtures: seeded random generators so that stochastic tests are
repeatable, and a couple of small scenes.
"""

import random

import numpy as np
import pytest

from core.vector import Point3, Color
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """Seeded Python generator for sampling routines."""
    return random.Random(42)


@pytest.fixture
def np_rng():
    """Seeded numpy generator for Perlin tables."""
    return np.random.default_rng(42)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def two_sphere_world(gray):
    """A unit-ish sphere resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, gray))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, gray))
    return world
