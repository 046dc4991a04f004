"""Factory functions for 4x4 transform matrices.

Each builder returns a new `Matrix`. Transforms compose by matrix
multiplication; `compose` multiplies an ordered list left to right, which is
how scene descriptions chain their primitives.

Example:
    >>> import math
    >>> from whitted.core.transforms import compose, rotation_y, scaling, translation
    >>> m = compose([translation(0.0, 1.0, 0.0), rotation_y(math.pi / 4), scaling(2.0, 2.0, 2.0)])
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.tuples import Point, Vector


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale along each axis. Negative factors reflect."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    """Rotate around the x axis (left-handed)."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    """Rotate around the y axis (left-handed)."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    """Rotate around the z axis (left-handed)."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each coordinate in proportion to the other two.

    Args:
        xy: Amount x moves in proportion to y.
        xz: Amount x moves in proportion to z.
        yx: Amount y moves in proportion to x.
        yz: Amount y moves in proportion to z.
        zx: Amount z moves in proportion to x.
        zy: Amount z moves in proportion to y.

    Returns:
        The shearing matrix.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Point, to_point: Point, up: Vector) -> Matrix:
    """Build the world-to-camera transform for an eye looking at a point.

    The result orients the world so that the eye sits at the origin looking
    down -z with `up` (projected to be orthogonal to the view direction)
    along +y.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction; need not be normalized or orthogonal.

    Returns:
        The view transformation matrix.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)


def compose(transforms: Iterable[Matrix]) -> Matrix:
    """Multiply transforms left to right.

    Args:
        transforms: Matrices in the order they appear in the product.

    Returns:
        The product, or the identity for an empty sequence.
    """
    result = IDENTITY
    for transform in transforms:
        result = result @ transform
    return result
