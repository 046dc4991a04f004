"""Points, vectors and colors.

All three share the same three-component representation (`Tuple`) but are
kept as distinct types so that the arithmetic stays meaningful: subtracting
two points gives a vector, adding a vector to a point gives a point, and
colors multiply componentwise.

The homogeneous w-coordinate is never stored. It is implied by the type
(1 for points, 0 for vectors) and only appears when a `Matrix` is applied.

Example:
    >>> from whitted.core.tuples import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, 1.0)
    >>> p + v * 2.0
    Point(x=1.0, y=2.0, z=5.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance used for float comparisons and surface offsets
EPSILON = 1e-7


@dataclass(frozen=True, eq=False)
class Tuple:
    """A floating-point triple.

    Equality is tolerant to EPSILON in every component, since chains of
    transforms accumulate rounding error. Two tuples of different kinds
    (for instance a Point and a Vector) never compare equal.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    x: float
    y: float
    z: float

    # Tolerant equality cannot agree with a hash
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.isclose(other)

    def isclose(self, other: Tuple, tol: float = EPSILON) -> bool:
        """Check componentwise closeness with an explicit tolerance.

        Args:
            other: Tuple to compare against.
            tol: Largest allowed absolute difference per component.

        Returns:
            True if every component differs by less than tol.
        """
        return (
            abs(self.x - other.x) < tol
            and abs(self.y - other.y) < tol
            and abs(self.z - other.z) < tol
        )

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


# =============================================================================
# Points and Vectors
# =============================================================================


@dataclass(frozen=True, eq=False)
class Point(Tuple):
    """A position in space (implicit w = 1)."""

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Tuple) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented


@dataclass(frozen=True, eq=False)
class Vector(Tuple):
    """A direction and magnitude (implicit w = 0)."""

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def magnitude(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector:
        """Scale the vector to unit length.

        Returns:
            A unit vector in the same direction. The zero vector is returned
            unchanged.
        """
        length = self.magnitude()
        if length == 0.0:
            return self
        return Vector(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vector) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the cross product self x other."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a normal.

        Args:
            normal: The surface normal (should be unit length).

        Returns:
            The mirrored vector, with the same magnitude as self.
        """
        return self - normal * (2.0 * self.dot(normal))


# =============================================================================
# Colors
# =============================================================================


@dataclass(frozen=True, eq=False)
class Color(Tuple):
    """An RGB color in linear space, unbounded above.

    Components are named x/y/z for storage; `red`, `green` and `blue` are
    provided as aliases.
    """

    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    def __add__(self, other: Color) -> Color:
        return Color(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Color) -> Color:
        return Color(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Color:
        return Color(-self.x, -self.y, -self.z)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.x * other.x, self.y * other.y, self.z * other.z)
        return Color(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.x * scalar, self.y * scalar, self.z * scalar)

    def clamp(self) -> Color:
        """Scale to the 8-bit range and clamp each channel to [0, 255]."""
        return Color(
            min(max(self.x * 255.0, 0.0), 255.0),
            min(max(self.y * 255.0, 0.0), 255.0),
            min(max(self.z * 255.0, 0.0), 255.0),
        )

    def to_rgb255(self) -> tuple[int, int, int]:
        """Convert to an integer RGB triple in [0, 255] (truncating)."""
        clamped = self.clamp()
        return (int(clamped.x), int(clamped.y), int(clamped.z))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
