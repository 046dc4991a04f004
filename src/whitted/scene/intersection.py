"""Ray-object intersection records.

An `Intersection` pairs a ray parameter `t` with the object that was hit.
Lists of intersections are ordered by `t` with a stable sort, so ties keep
the order in which objects produced them.

Example:
    >>> from whitted.scene.intersection import Intersection, hit, sort_intersections
    >>> xs = sort_intersections([Intersection(5.0, s), Intersection(-3.0, s), Intersection(2.0, s)])
    >>> hit(xs).t
    2.0
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whitted.scene.object import SceneObject


@dataclass(frozen=True)
class Intersection:
    """A hit record.

    Equality compares `t` and the object's identity.

    Attributes:
        t: Ray parameter of the hit.
        object: The object that was hit.
    """

    t: float
    object: SceneObject


def sort_intersections(xs: Iterable[Intersection]) -> list[Intersection]:
    """Sort intersections by ascending t (stable)."""
    return sorted(xs, key=attrgetter("t"))


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Select the visible hit.

    Args:
        xs: Intersections in any order.

    Returns:
        The intersection with the smallest strictly positive t, or None if
        every intersection is at or behind the ray origin.
    """
    return min((x for x in xs if x.t > 0.0), key=attrgetter("t"), default=None)
