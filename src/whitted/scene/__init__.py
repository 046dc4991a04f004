"""Scene module for objects, intersections and shading.

Components:
    light: Point light source
    object: SceneObject, a shape with a material and cached transforms
    intersection: Hit records and hit selection
    computation: Precomputed shading state, Schlick reflectance
    world: The world and recursive Whitted shading
    description: Declarative scene files (import `whitted.scene.description`
        directly; it depends on the camera package)
"""

from .computation import Computation, prepare_computations
from .intersection import Intersection, hit, sort_intersections
from .light import PointLight
from .object import SceneObject
from .world import DEFAULT_DEPTH, World, default_world

__all__ = [
    "PointLight",
    "SceneObject",
    "Intersection",
    "hit",
    "sort_intersections",
    "Computation",
    "prepare_computations",
    "World",
    "default_world",
    "DEFAULT_DEPTH",
]
