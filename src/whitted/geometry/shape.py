"""The closed set of shape primitives.

Every primitive is defined in a canonical local frame and exposes the same
two pure operations:

    intersect(ray) -> list[float]   # t values of a local-space ray, unsorted
    normal_at(point) -> Vector      # unnormalized local-space normal

World placement, materials and caching live on `SceneObject`; shapes hold
only their own parameters and are immutable.
"""

from __future__ import annotations

from typing import Protocol, Union

from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vector

from .cone import Cone
from .cube import Cube
from .cylinder import Cylinder
from .plane import Plane
from .sphere import Sphere

Shape = Union[Plane, Sphere, Cube, Cylinder, Cone]

SHAPE_TYPES: dict[str, type] = {
    "plane": Plane,
    "sphere": Sphere,
    "cube": Cube,
    "cylinder": Cylinder,
    "cone": Cone,
}


class LocalShape(Protocol):
    """Structural interface shared by all primitives."""

    def intersect(self, ray: Ray) -> list[float]: ...

    def normal_at(self, point: Point) -> Vector: ...
