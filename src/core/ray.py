# core/ray.py
from core.vector import Point, Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is not required to be normalized. A zero direction is
    accepted and gives a ray that never advances.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point:
        """
        Returns the point along the ray at parameter t. Negative t is allowed;
        constraining t to an admissible interval is up to the caller.
        """
        return self.origin + t * self.direction

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
