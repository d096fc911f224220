"""Pytest configuration for raytracer tests.

Provides stub hittables that report fixed intersections, so the hit
aggregation can be tested without any concrete surface.
"""

import pytest

from core.vector import Vector3
from geometry.hittable import Hit, Hittable, in_interval


class FixedHittable(Hittable):
    """Hittable that intersects every ray at a single fixed t.

    Records the interval of every query so tests can check narrowing.
    """

    def __init__(self, t, outward_normal=None):
        self.t = t
        if outward_normal is None:
            outward_normal = Vector3(0.0, 0.0, 1.0)
        self.outward_normal = outward_normal
        self.queries = []

    def hit(self, ray, t_min, t_max):
        self.queries.append((t_min, t_max))
        if not in_interval(self.t, t_min, t_max):
            return None
        return Hit(ray, self.t, self.outward_normal)


class MultiHittable(Hittable):
    """Hittable with several candidate intersections, returns the closest."""

    def __init__(self, *ts):
        self.ts = ts

    def hit(self, ray, t_min, t_max):
        candidates = [t for t in self.ts if in_interval(t, t_min, t_max)]
        if not candidates:
            return None
        return Hit(ray, min(candidates), Vector3(0.0, 1.0, 0.0))


@pytest.fixture
def fixed_hittable():
    """Factory for FixedHittable stubs."""
    return FixedHittable


@pytest.fixture
def multi_hittable():
    """Factory for MultiHittable stubs."""
    return MultiHittable
