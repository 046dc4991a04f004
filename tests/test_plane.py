"""Unit tests for plane intersection and normals."""

from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vector
from whitted.geometry import Plane


class TestPlane:
    """Tests for the xz plane in local space."""

    def test_normal_is_constant(self):
        """The normal is +y everywhere."""
        plane = Plane()
        up = Vector(0.0, 1.0, 0.0)
        assert plane.normal_at(Point(0.0, 0.0, 0.0)) == up
        assert plane.normal_at(Point(10.0, 0.0, -10.0)) == up
        assert plane.normal_at(Point(-5.0, 0.0, 150.0)) == up

    def test_parallel_ray(self):
        """A ray parallel to the plane misses."""
        assert Plane().intersect(Ray(Point(0.0, 10.0, 0.0), Vector(0.0, 0.0, 1.0))) == []

    def test_coplanar_ray(self):
        """A ray lying in the plane misses."""
        assert Plane().intersect(Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0))) == []

    def test_from_above(self):
        """A ray coming down hits once."""
        assert Plane().intersect(Ray(Point(0.0, 1.0, 0.0), Vector(0.0, -1.0, 0.0))) == [1.0]

    def test_from_below(self):
        """A ray coming up hits once."""
        assert Plane().intersect(Ray(Point(0.0, -1.0, 0.0), Vector(0.0, 1.0, 0.0))) == [1.0]
