"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the source tree to the path
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.vector import Vector3  # noqa: E402
from geometry.sphere import Sphere  # noqa: E402
from geometry.world import World  # noqa: E402
from materials.lambertian import Lambertian  # noqa: E402


@pytest.fixture
def rng():
    """Provide a seeded random stream."""
    return random.Random(1234)


@pytest.fixture
def grey():
    """Provide a grey diffuse material."""
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def unit_sphere(grey):
    """Provide a unit sphere centered at the origin."""
    return Sphere(Vector3(0, 0, 0), 1.0, grey)


@pytest.fixture
def single_sphere_world(grey):
    """Provide a world with one sphere of radius 0.5 at (0, 0, -1)."""
    return World([Sphere(Vector3(0, 0, -1), 0.5, grey)])
