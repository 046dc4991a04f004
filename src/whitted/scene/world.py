"""The world: one light, a list of objects, and recursive shading.

Shading follows the Whitted model. For each hit the surface color comes from
the Phong model (ambient only when the point is shadowed), and secondary
rays add reflected and refracted light:

    color = surface + reflected + refracted

When a material is both reflective and transparent, the two secondary terms
are weighted by the Schlick reflectance instead:

    color = surface + reflected * R + refracted * (1 - R)

Recursion is bounded by a `remaining` budget passed down by value. Each
secondary ray consumes one unit, and a budget of zero contributes black.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vector
    >>> from whitted.scene.world import default_world
    >>> world = default_world()
    >>> color = world.color_at(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0)))
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from whitted.core.ray import Ray
from whitted.core.transforms import scaling
from whitted.core.tuples import BLACK, WHITE, Color, Point
from whitted.materials.material import Material
from whitted.scene.computation import Computation, prepare_computations
from whitted.scene.intersection import Intersection, hit, sort_intersections
from whitted.scene.light import PointLight
from whitted.scene.object import SceneObject

# Default recursion budget for reflected and refracted rays
DEFAULT_DEPTH = 4


@dataclass
class World:
    """A light and the objects it illuminates.

    The world is read-only while rendering.

    Attributes:
        light: The single point light.
        objects: Objects in declaration order.
    """

    light: PointLight
    objects: list[SceneObject] = field(default_factory=list)

    def add(self, *objects: SceneObject) -> None:
        """Append objects to the scene."""
        self.objects.extend(objects)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with every object.

        Args:
            ray: Ray in world space.

        Returns:
            All intersections sorted by t, possibly empty.
        """
        xs: list[Intersection] = []
        for obj in self.objects:
            xs.extend(obj.intersect(ray))
        return sort_intersections(xs)

    def is_shadowed(self, point: Point) -> bool:
        """Check whether any object lies between a point and the light."""
        v = self.light.position - point
        distance = v.magnitude()
        shadow_ray = Ray(point, v.normalize())
        h = hit(self.intersect(shadow_ray))
        return h is not None and h.t < distance

    # =========================================================================
    # Recursive Shading
    # =========================================================================

    def shade_hit(self, comps: Computation, remaining: int = DEFAULT_DEPTH) -> Color:
        """Compute the color at a prepared hit.

        Args:
            comps: Precomputed shading state.
            remaining: Recursion budget left for secondary rays.

        Returns:
            Surface color plus reflected and refracted contributions.
        """
        material = comps.object.material
        surface = material.lighting(
            self.light,
            comps.object,
            comps.point,
            comps.eyev,
            comps.normalv,
            self.is_shadowed(comps.over_point),
        )
        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = comps.schlick()
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = DEFAULT_DEPTH) -> Color:
        """Trace a ray into the world.

        Args:
            ray: Ray in world space.
            remaining: Recursion budget for secondary rays.

        Returns:
            The color seen along the ray, black if nothing is hit.
        """
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return BLACK
        return self.shade_hit(prepare_computations(ray, h, xs), remaining)

    def reflected_color(self, comps: Computation, remaining: int = DEFAULT_DEPTH) -> Color:
        """Color arriving along the mirror direction, scaled by reflectivity."""
        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return BLACK
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computation, remaining: int = DEFAULT_DEPTH) -> Color:
        """Color arriving through the surface, scaled by transparency.

        The refracted direction follows Snell's law. Under total internal
        reflection no light is transmitted and the result is black.
        """
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return BLACK

        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency


def default_world() -> World:
    """Build the two-sphere reference world.

    A white light at (-10, 10, -10), a unit sphere with a green-ish diffuse
    material, and a concentric sphere scaled to radius 0.5 with the default
    material.
    """
    outer = SceneObject.sphere(
        Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
    )
    inner = SceneObject.sphere(transform=scaling(0.5, 0.5, 0.5))
    return World(PointLight(Point(-10.0, 10.0, -10.0), WHITE), [outer, inner])
