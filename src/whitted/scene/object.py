"""Scene objects: a shape placed in the world with a material.

A `SceneObject` binds one shape, one material and one world transform. The
inverse of the transform and the transpose of that inverse are cached and
recomputed together whenever the transform is assigned, so points and
normals can be converted between world and object space without repeated
matrix inversion.

Objects compare by identity: two objects with identical fields are still
distinct participants when tracking which surfaces a ray is inside.

Example:
    >>> from whitted.core.transforms import scaling, translation
    >>> from whitted.scene.object import SceneObject
    >>> ball = SceneObject.sphere(transform=translation(0.0, 1.0, 0.0) @ scaling(0.5, 0.5, 0.5))
    >>> floor = SceneObject.plane()
"""

from __future__ import annotations

import math

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vector
from whitted.geometry import Cone, Cube, Cylinder, Plane, Shape, Sphere
from whitted.materials.material import Material
from whitted.scene.intersection import Intersection


class SceneObject:
    """A shape with a material and a world transform.

    Attributes:
        shape: The primitive, defined in its local space.
        material: Surface properties.
        transform: Object-to-world matrix. Assigning it refreshes the caches.
        inverse: Cached world-to-object matrix.
        inverse_transpose: Cached transpose of `inverse`, for normals.
    """

    def __init__(
        self,
        shape: Shape,
        material: Material | None = None,
        transform: Matrix = IDENTITY,
    ) -> None:
        """Create an object.

        Args:
            shape: The primitive to place.
            material: Surface properties (default material if None).
            transform: Object-to-world transform.

        Raises:
            NonInvertibleMatrixError: If the transform is singular.
        """
        self.shape = shape
        self.material = material if material is not None else Material()
        self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix) -> None:
        # Compute before assigning so a singular matrix leaves no stale caches
        inverse = transform.inverse()
        inverse_transpose = inverse.transpose()
        self._transform = transform
        self._inverse = inverse
        self._inverse_transpose = inverse_transpose

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    @property
    def inverse_transpose(self) -> Matrix:
        return self._inverse_transpose

    def __repr__(self) -> str:
        return f"SceneObject(shape={self.shape!r}, material={self.material!r})"

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def sphere(cls, material: Material | None = None, transform: Matrix = IDENTITY) -> SceneObject:
        return cls(Sphere(), material, transform)

    @classmethod
    def plane(cls, material: Material | None = None, transform: Matrix = IDENTITY) -> SceneObject:
        return cls(Plane(), material, transform)

    @classmethod
    def cube(cls, material: Material | None = None, transform: Matrix = IDENTITY) -> SceneObject:
        return cls(Cube(), material, transform)

    @classmethod
    def cylinder(
        cls,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
        material: Material | None = None,
        transform: Matrix = IDENTITY,
    ) -> SceneObject:
        return cls(Cylinder(minimum, maximum, closed), material, transform)

    @classmethod
    def cone(
        cls,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
        material: Material | None = None,
        transform: Matrix = IDENTITY,
    ) -> SceneObject:
        return cls(Cone(minimum, maximum, closed), material, transform)

    # =========================================================================
    # Intersection and Normals
    # =========================================================================

    def local_intersect(self, ray: Ray) -> list[float]:
        """Intersect a world-space ray, returning raw t values."""
        return self.shape.intersect(ray.transform(self._inverse))

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this object.

        Args:
            ray: Ray in world space.

        Returns:
            Intersections tagged with this object, in the shape's order.
        """
        return [Intersection(t, self) for t in self.local_intersect(ray)]

    def world_to_object(self, point: Point) -> Point:
        return self._inverse @ point

    def normal_to_world(self, normal: Vector) -> Vector:
        return (self._inverse_transpose @ normal).normalize()

    def normal_at(self, world_point: Point) -> Vector:
        """Compute the unit surface normal at a world-space point.

        The point is taken into object space, the shape supplies the local
        normal, and the inverse-transpose carries it back so that it stays
        perpendicular under non-uniform scaling.
        """
        local_normal = self.shape.normal_at(self.world_to_object(world_point))
        return self.normal_to_world(local_normal)
