# geometry/hittable.py
from typing import Optional
from core.vector import Point, Vector3
from core.ray import Ray


def in_interval(t: float, t_min: float, t_max: float) -> bool:
    """
    Interval test shared by all hittables: t_min is inclusive, t_max is
    exclusive.
    """
    return t_min <= t < t_max


class Hit:
    """
    Records details of a ray-object intersection.

    Built once from the ray, the hit parameter and the surface's outward
    normal at the hit point. The outward normal must already be unit length.
    """
    __slots__ = ("p", "normal", "t", "front_face")

    def __init__(self, ray: Ray, t: float, outward_normal: Vector3):
        self.t = t                       # Ray parameter at intersection
        self.p: Point = ray.at(t)        # Intersection point
        self._set_face_normal(ray, outward_normal)

    def _set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"Hit(p={self.p!r}, normal={self.normal!r}, t={self.t}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[Hit]:
        """
        Returns the closest intersection with t in [t_min, t_max), or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
