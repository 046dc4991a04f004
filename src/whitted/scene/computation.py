"""Precomputed shading state for a hit.

`prepare_computations` turns a hit into everything shading needs: the world
point, points nudged just above and below the surface, the eye and normal
vectors (the normal flipped when the hit is on an inside surface), the
reflection vector, and the refractive indices on either side of the
surface.

Refractive indices are resolved by walking the full sorted intersection list
while keeping the ordered list of objects the ray is currently inside. Each
intersection toggles membership of its object: an object already in the list
is being exited, otherwise it is being entered. The top of the list before
the hit gives n1 and after the hit gives n2 (1.0 when empty). Nested and
overlapping transparent objects are handled without a CSG graph.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector
from whitted.materials.material import VACUUM_INDEX
from whitted.scene.intersection import Intersection
from whitted.scene.object import SceneObject


@dataclass(frozen=True)
class Computation:
    """Shading state of one intersection.

    Attributes:
        t: Ray parameter of the hit.
        object: The object that was hit.
        point: Hit point in world space.
        over_point: Point nudged along the normal, origin of shadow and
            reflection rays.
        under_point: Point nudged against the normal, origin of refraction
            rays.
        eyev: Unit vector from the point toward the ray origin.
        normalv: Unit normal, facing the eye.
        inside: Whether the hit is on the inside of the surface.
        reflectv: Ray direction mirrored about the normal.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: SceneObject
    point: Point
    over_point: Point
    under_point: Point
    eyev: Vector
    normalv: Vector
    inside: bool
    reflectv: Vector
    n1: float
    n2: float

    def schlick(self) -> float:
        """Approximate the Fresnel reflectance with Schlick's formula.

        Returns:
            Fraction of light reflected, in [0, 1]. Exactly 1.0 under total
            internal reflection.
        """
        cos = self.eyev.dot(self.normalv)
        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)
        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def _refractive_indices(target: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    n1 = n2 = VACUUM_INDEX
    containers: list[SceneObject] = []
    for x in xs:
        if x == target:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        for index, obj in enumerate(containers):
            if obj is x.object:
                del containers[index]
                break
        else:
            containers.append(x.object)

        if x == target:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break
    return n1, n2


def prepare_computations(
    ray: Ray,
    hit: Intersection,
    xs: Sequence[Intersection] | None = None,
) -> Computation:
    """Build the shading state for a hit.

    Args:
        ray: The ray that produced the hit.
        hit: The intersection to shade.
        xs: All intersections along the ray, sorted by t. Defaults to just
            the hit itself.

    Returns:
        The precomputed Computation.
    """
    if xs is None:
        xs = (hit,)

    point = ray.position(hit.t)
    eyev = -ray.direction
    normalv = hit.object.normal_at(point)
    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    offset = normalv * EPSILON
    n1, n2 = _refractive_indices(hit, xs)
    return Computation(
        t=hit.t,
        object=hit.object,
        point=point,
        over_point=point + offset,
        under_point=point - offset,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=ray.direction.reflect(normalv),
        n1=n1,
        n2=n2,
    )
