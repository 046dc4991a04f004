"""Ray data structure.

A ray is a half-line: an origin point and a direction vector. Directions are
not normalized when rays are transformed into object space, so the parameter
`t` of a hit is the same in world and object space.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vector
    >>> ray = Ray(Point(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)
    Point(x=4.5, y=3.0, z=4.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.matrix import Matrix
from whitted.core.tuples import Point, Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Need not be unit length.
    """

    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Apply a matrix to both origin and direction."""
        return Ray(matrix @ self.origin, matrix @ self.direction)
