# core/utils.py
import math
import random
from typing import Optional
from core.vector import Vector3

# Upper bound on rejection-sampling trials. Acceptance is ~52% per trial in
# the sphere and ~79% in the disk, so the cap is never reached in practice.
MAX_REJECTION_TRIES = 10000


class SamplingError(RuntimeError):
    """Raised when a rejection sampler exhausts MAX_REJECTION_TRIES."""


def uniform01(rng=random) -> float:
    """
    Returns a uniformly distributed float in [0, 1).
    `rng` is any object with a random() method, e.g. random.Random(seed).
    """
    return rng.random()


def random_in_unit_sphere(rng=random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    for _ in range(MAX_REJECTION_TRIES):
        p = Vector3(rng.random(), rng.random(), rng.random()) * 2.0 - Vector3(1.0, 1.0, 1.0)
        if p.squared_length() < 1.0:
            return p
    raise SamplingError(f"No point inside the unit sphere after {MAX_REJECTION_TRIES} tries")


def random_in_unit_disk(rng=random) -> Vector3:
    """
    Returns a random point inside the unit disk in the xy-plane (z = 0).
    """
    for _ in range(MAX_REJECTION_TRIES):
        p = Vector3(rng.random(), rng.random(), 0.0) * 2.0 - Vector3(1.0, 1.0, 0.0)
        if p.dot(p) < 1.0:
            return p
    raise SamplingError(f"No point inside the unit disk after {MAX_REJECTION_TRIES} tries")


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Refracts v through a surface with normal n (Snell's law).
    Returns None on total internal reflection.
    """
    uv = v.unit()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant > 0:
        return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)
    return None


def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
