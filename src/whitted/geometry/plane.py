"""Infinite plane primitive.

In local space the plane is y = 0, extending forever in x and z, with its
normal pointing up along +y everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector

_UP = Vector(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Plane:
    """The xz plane in local space."""

    def intersect(self, ray: Ray) -> list[float]:
        """Intersect a local-space ray with the plane.

        A ray parallel to the plane (including one lying in it) never hits.

        Args:
            ray: Ray in the plane's local space.

        Returns:
            A single t value, or an empty list.
        """
        if abs(ray.direction.y) < EPSILON:
            return []
        return [-ray.origin.y / ray.direction.y]

    def normal_at(self, point: Point) -> Vector:
        return _UP
