"""Unit sphere primitive.

The sphere is centered at the local-space origin with radius 1. Any other
sphere is obtained through the owning object's transform.

Ray-sphere intersection solves |O + tD|^2 = 1:

    a*t^2 + b*t + c = 0

where:
    a = dot(D, D)
    b = 2 * dot(D, O)
    c = dot(O, O) - 1

A negative discriminant means a miss; otherwise both roots are returned,
including the repeated root of a tangent ray.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vector

_ORIGIN = Point(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Sphere:
    """A unit sphere centered at the origin."""

    def intersect(self, ray: Ray) -> list[float]:
        """Intersect a local-space ray with the unit sphere.

        Args:
            ray: Ray in the sphere's local space.

        Returns:
            Either no roots or two roots ordered t0 <= t1.
        """
        sphere_to_ray = ray.origin - _ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        return [t0, t1]

    def normal_at(self, point: Point) -> Vector:
        return point - _ORIGIN
