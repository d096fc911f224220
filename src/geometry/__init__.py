from geometry.hittable import Hit, Hittable, in_interval
from geometry.world import HittableList

__all__ = ["Hit", "Hittable", "HittableList", "in_interval"]
