# src/materials/dielectric.py
import random
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, schlick, uniform01
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Transparent material that both refracts and reflects (glass, water...).
    The choice between the two is made per ray with Schlick's approximation.
    """
    def __init__(self, ref_idx: float, attenuation: Vector3 = None):
        self.ref_idx = ref_idx
        # Glass absorbs nothing by default
        self.attenuation = attenuation if attenuation is not None else Vector3.one()

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Vector3]:
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)
        d_dot_n = direction.dot(rec.normal)

        # Determine if we're exiting or entering the material
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is not None and uniform01(rng) >= schlick(cosine, self.ref_idx):
            return Ray(rec.p, refracted), self.attenuation

        # Fresnel reflection or total internal reflection
        return Ray(rec.p, reflected), self.attenuation

    def __repr__(self) -> str:
        return f"Dielectric(ref_idx={self.ref_idx}, attenuation={self.attenuation!r})"
