"""Axis-aligned unit cube primitive.

The cube spans [-1, 1] on every local axis. Intersection uses the slab
method: each axis clips the ray to the interval where it lies between the
two faces perpendicular to that axis, and the ray hits the cube when the
three intervals overlap.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Clip a ray against the two faces perpendicular to one axis.

    Args:
        origin: Ray origin component along the axis.
        direction: Ray direction component along the axis.

    Returns:
        (tmin, tmax) for the slab, ordered. A ray parallel to the slab gets
        an unbounded interval when it lies inside it, otherwise an
        interval pushed to infinity that never overlaps a finite one.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = -math.inf if tmin_numerator <= 0.0 else math.inf
        tmax = math.inf if tmax_numerator >= 0.0 else -math.inf

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


@dataclass(frozen=True)
class Cube:
    """A cube spanning [-1, 1] on each axis."""

    def intersect(self, ray: Ray) -> list[float]:
        """Intersect a local-space ray with the cube.

        Args:
            ray: Ray in the cube's local space.

        Returns:
            [tmin, tmax] on a hit, or an empty list.
        """
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

        tmax = min(xtmax, ytmax, ztmax)
        if tmax < 0.0:
            return []
        tmin = max(xtmin, ytmin, ztmin)
        if tmin > tmax:
            return []
        return [tmin, tmax]

    def normal_at(self, point: Point) -> Vector:
        """Normal of the face containing the point.

        The face is the one whose axis has the largest absolute coordinate;
        ties (edges and corners) resolve in x, y, z order.
        """
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)
        if maxc == ax:
            return Vector(point.x, 0.0, 0.0)
        if maxc == ay:
            return Vector(0.0, point.y, 0.0)
        return Vector(0.0, 0.0, point.z)
