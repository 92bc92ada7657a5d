# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from typing import Iterable, Iterator, Optional, List
from core.ray import Ray

class World(Hittable):
    """
    An ordered collection of Hittable objects. Objects are appended while the
    scene is built; the world is only read while rendering.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def extend(self, objects: Iterable[Hittable]):
        self.objects.extend(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Linear scan; shrinking closest_so_far rejects anything farther
        # than the best hit found so far.
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
