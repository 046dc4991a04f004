"""Double-napped cone primitive.

The cone satisfies x^2 + z^2 = y^2 in local space: two nappes meeting at the
origin, truncated to the open interval minimum < y < maximum. Closed cones
are capped at both ends, where the cap radius equals |y| of that cap.

The quadratic has the same form as the cylinder's with the y term negated:

    a = dx^2 - dy^2 + dz^2
    b = 2*ox*dx - 2*oy*dy + 2*oz*dz
    c = ox^2 - oy^2 + oz^2

A near-zero a means the ray is parallel to one nappe and crosses the other
exactly once, at t = -c / 2b.
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
class Cone:
    """A double cone around the y axis.

    Attributes:
        minimum: Lower y bound (exclusive for the lateral surface).
        maximum: Upper y bound (exclusive for the lateral surface).
        closed: Whether the ends are capped.
    """

    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False

    def intersect(self, ray: Ray) -> list[float]:
        """Intersect a local-space ray with the cone body and caps.

        Args:
            ray: Ray in the cone's local space.

        Returns:
            All t values, lateral hits first, then cap hits.
        """
        dx, dy, dz = ray.direction.x, ray.direction.y, ray.direction.z
        ox, oy, oz = ray.origin.x, ray.origin.y, ray.origin.z
        a = dx * dx - dy * dy + dz * dz
        b = 2.0 * ox * dx - 2.0 * oy * dy + 2.0 * oz * dz
        c = ox * ox - oy * oy + oz * oz

        xs = []
        if abs(a) <= EPSILON:
            if abs(b) >= EPSILON:
                t = -c / (2.0 * b)
                if self.minimum < oy + t * dy < self.maximum:
                    xs.append(t)
            xs.extend(self._intersect_caps(ray))
            return xs

        disc = b * b - 4.0 * a * c
        if disc < 0.0:
            return []

        sqrt_d = math.sqrt(disc)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

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
            if _within_radius(ray, t, abs(self.minimum)):
                xs.append(t)
        if math.isfinite(self.maximum):
            t = (self.maximum - ray.origin.y) / ray.direction.y
            if _within_radius(ray, t, abs(self.maximum)):
                xs.append(t)
        return xs

    def normal_at(self, point: Point) -> Vector:
        """Cap normal near a cap, otherwise (x, -/+sqrt(x^2 + z^2), z).

        The y component takes the sign opposite to the point's y, so normals
        on both nappes point away from the axis.
        """
        dist = point.x * point.x + point.z * point.z
        if dist < self.maximum * self.maximum and point.y >= self.maximum - EPSILON:
            return Vector(0.0, 1.0, 0.0)
        if dist < self.minimum * self.minimum and point.y <= self.minimum + EPSILON:
            return Vector(0.0, -1.0, 0.0)
        y = math.sqrt(dist)
        if point.y > 0.0:
            y = -y
        return Vector(point.x, y, point.z)
