# src/geometry/world.py
from typing import Iterable, Iterator, List, Optional
from geometry.hittable import Hittable, Hit
from core.ray import Ray

class HittableList(Hittable):
    """
    A list of Hittable objects that is itself Hittable. hit() returns the
    closest hit among all members.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[Hit]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            # Each hit narrows the window for the objects after it.
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
