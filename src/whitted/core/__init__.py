"""Core math module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Points, vectors, colors and the EPSILON tolerance
    matrix: Square matrices with cofactor-based inverse
    transforms: Translation, scaling, rotation, shearing and view matrices
    ray: Ray data structure
"""

from .matrix import IDENTITY, Matrix, NonInvertibleMatrixError
from .ray import Ray
from .transforms import (
    compose,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import BLACK, EPSILON, WHITE, Color, Point, Tuple, Vector

__all__ = [
    "EPSILON",
    "Tuple",
    "Point",
    "Vector",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "IDENTITY",
    "NonInvertibleMatrixError",
    "Ray",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "compose",
]
