from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere
from geometry.world import World

__all__ = ["Hittable", "HitRecord", "Sphere", "World"]
