"""Cylinder primitive.

The cylinder has radius 1 around the local y axis and is truncated to the
open interval minimum < y < maximum (infinite by default). Closed cylinders
also have flat end caps at y = minimum and y = maximum.

The lateral surface solves x^2 + z^2 = 1 along the ray:

    a = dx^2 + dz^2
    b = 2*ox*dx + 2*oz*dz
    c = ox^2 + oz^2 - 1

When a is (nearly) zero the ray is parallel to the axis and only the caps
can be hit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector


def _within_radius(ray: Ray, t: float, radius: float) -> bool:
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius * radius


@dataclass(frozen=True)
class Cylinder:
    """A unit-radius cylinder around the y axis.

    Attributes:
        minimum: Lower y bound (exclusive for the lateral surface).
        maximum: Upper y bound (exclusive for the lateral surface).
        closed: Whether the ends are capped.
    """

    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False

    def intersect(self, ray: Ray) -> list[float]:
        """Intersect a local-space ray with the cylinder body and caps.

        Args:
            ray: Ray in the cylinder's local space.

        Returns:
            All t values, lateral hits first, then cap hits. The list is not
            sorted across the two groups.
        """
        dx, dy, dz = ray.direction.x, ray.direction.y, ray.direction.z
        a = dx * dx + dz * dz
        if abs(a) < EPSILON:
            return self._intersect_caps(ray)

        ox, oy, oz = ray.origin.x, ray.origin.y, ray.origin.z
        b = 2.0 * ox * dx + 2.0 * oz * dz
        c = ox * ox + oz * oz - 1.0
        disc = b * b - 4.0 * a * c
        if disc < 0.0:
            return []

        sqrt_d = math.sqrt(disc)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)

        xs = []
        y0 = oy + t0 * dy
        if self.minimum < y0 < self.maximum:
            xs.append(t0)
        y1 = oy + t1 * dy
        if self.minimum < y1 < self.maximum:
            xs.append(t1)
        xs.extend(self._intersect_caps(ray))
        return xs

    def _intersect_caps(self, ray: Ray) -> list[float]:
        if not self.closed or abs(ray.direction.y) <= EPSILON:
            return []
        xs = []
        # An unbounded end has no cap
        if math.isfinite(self.minimum):
            t = (self.minimum - ray.origin.y) / ray.direction.y
            if _within_radius(ray, t, 1.0):
                xs.append(t)
        if math.isfinite(self.maximum):
            t = (self.maximum - ray.origin.y) / ray.direction.y
            if _within_radius(ray, t, 1.0):
                xs.append(t)
        return xs

    def normal_at(self, point: Point) -> Vector:
        """Cap normal (+/-y) near a cap, radial normal elsewhere."""
        dist = point.x * point.x + point.z * point.z
        if dist < 1.0 and point.y >= self.maximum - EPSILON:
            return Vector(0.0, 1.0, 0.0)
        if dist < 1.0 and point.y <= self.minimum + EPSILON:
            return Vector(0.0, -1.0, 0.0)
        return Vector(point.x, 0.0, point.z)
