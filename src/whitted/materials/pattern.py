"""Procedural surface patterns.

A pattern maps a point to a color. Each pattern has its own transform,
independent of the object it decorates, so it can be scaled or rotated
relative to the surface. Evaluation converts a world point into object
space (through the object's inverse transform) and then into pattern space
(through the pattern's inverse transform).

Available patterns:
    - StripePattern: alternates along x
    - RingPattern: concentric rings in the xz plane
    - GradientPattern: linear blend along x, repeating every unit
    - CheckerPattern: 3-D checkerboard

Example:
    >>> from whitted.core.transforms import scaling
    >>> from whitted.core.tuples import BLACK, WHITE
    >>> from whitted.materials.pattern import StripePattern
    >>> stripes = StripePattern(WHITE, BLACK, transform=scaling(0.5, 0.5, 0.5))
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.tuples import EPSILON, Color, Point

if TYPE_CHECKING:
    from whitted.scene.object import SceneObject


class Pattern(ABC):
    """Base class holding the pattern transform and its cached inverse.

    Subclasses implement `pattern_at`, which receives points already in
    pattern space.
    """

    def __init__(self, transform: Matrix = IDENTITY) -> None:
        self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix) -> None:
        inverse = transform.inverse()
        self._transform = transform
        self._inverse = inverse

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    def at_object(self, obj: SceneObject, world_point: Point) -> Color:
        """Evaluate the pattern for a point on an object.

        Args:
            obj: The object the pattern decorates.
            world_point: Point on the object's surface in world space.

        Returns:
            The pattern color at that point.
        """
        object_point = obj.inverse @ world_point
        pattern_point = self._inverse @ object_point
        return self.pattern_at(pattern_point)

    @abstractmethod
    def pattern_at(self, point: Point) -> Color:
        """Color at a point given in pattern space."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r})"


class _TwoColorPattern(Pattern):
    def __init__(self, a: Color, b: Color, transform: Matrix = IDENTITY) -> None:
        super().__init__(transform)
        self.a = a
        self.b = b

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self.a!r}, b={self.b!r}, transform={self.transform!r})"


class StripePattern(_TwoColorPattern):
    """Alternate between a and b on each unit step of x."""

    def pattern_at(self, point: Point) -> Color:
        return self.a if math.floor(point.x) % 2 == 0 else self.b


class RingPattern(_TwoColorPattern):
    """Concentric rings around the y axis, one unit wide."""

    def pattern_at(self, point: Point) -> Color:
        distance = math.sqrt(point.x * point.x + point.z * point.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class GradientPattern(_TwoColorPattern):
    """Blend from a to b across each unit of x."""

    def pattern_at(self, point: Point) -> Color:
        fraction = point.x - math.floor(point.x)
        return self.a + (self.b - self.a) * fraction


class CheckerPattern(_TwoColorPattern):
    """Alternate a and b in unit cubes.

    |y| is used for the vertical term so the board is symmetric about the
    xz plane.
    """

    def pattern_at(self, point: Point) -> Color:
        total = math.floor(point.x) + math.floor(abs(point.y)) + math.floor(point.z)
        return self.a if abs(total % 2) < EPSILON else self.b


PATTERN_TYPES: dict[str, type[_TwoColorPattern]] = {
    "stripe": StripePattern,
    "ring": RingPattern,
    "gradient": GradientPattern,
    "checker": CheckerPattern,
}
