"""Geometry module for shape primitives.

This module provides the implicit primitives and their intersection algorithms:

Components:
    plane: Infinite xz plane
    sphere: Unit sphere at the origin
    cube: Axis-aligned cube spanning [-1, 1] (slab method)
    cylinder: Unit-radius cylinder around y, optionally truncated and capped
    cone: Double-napped cone around y, optionally truncated and capped
    shape: The closed `Shape` union and shared interface

All primitives work in their own local space. Ray-object intersection
follows the pattern:
    ts = shape.intersect(local_ray)
    normal = shape.normal_at(local_point)
"""

from .cone import Cone
from .cube import Cube, check_axis
from .cylinder import Cylinder
from .plane import Plane
from .shape import SHAPE_TYPES, LocalShape, Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "LocalShape",
    "SHAPE_TYPES",
    "Plane",
    "Sphere",
    "Cube",
    "check_axis",
    "Cylinder",
    "Cone",
]
