# materials/lambertian.py

import random
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Vector3]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Always scatters; returns (scattered_ray, albedo).
        """
        # Pick a random target inside the unit sphere tangent at the hit point.
        target = rec.p + rec.normal + random_in_unit_sphere(rng)
        scattered = Ray(rec.p, target - rec.p)
        return scattered, self.albedo

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"
