from core.vector import Point, Vector3, cross, dot, unit_vector
from core.ray import Ray

__all__ = ["Vector3", "Point", "dot", "cross", "unit_vector", "Ray"]
