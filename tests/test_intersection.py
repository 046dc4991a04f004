"""Unit tests for intersection records and hit selection."""

from whitted.scene.intersection import Intersection, hit, sort_intersections
from whitted.scene.object import SceneObject


class TestIntersection:
    """Tests for Intersection equality."""

    def test_fields(self):
        """An intersection records t and the object."""
        s = SceneObject.sphere()
        i = Intersection(3.5, s)
        assert i.t == 3.5
        assert i.object is s

    def test_equality_uses_object_identity(self):
        """Same t on different (but identical-looking) objects is different."""
        a = SceneObject.sphere()
        b = SceneObject.sphere()
        assert Intersection(1.0, a) == Intersection(1.0, a)
        assert Intersection(1.0, a) != Intersection(1.0, b)


class TestHit:
    """Tests for hit selection."""

    def test_all_positive(self):
        """The smallest t wins."""
        s = SceneObject.sphere()
        i1, i2 = Intersection(1.0, s), Intersection(2.0, s)
        assert hit([i2, i1]) is i1

    def test_some_negative(self):
        """Intersections behind the origin are ignored."""
        s = SceneObject.sphere()
        i1, i2 = Intersection(-1.0, s), Intersection(1.0, s)
        assert hit([i2, i1]) is i2

    def test_all_negative(self):
        """No hit when everything is behind the origin."""
        s = SceneObject.sphere()
        assert hit([Intersection(-2.0, s), Intersection(-1.0, s)]) is None

    def test_zero_is_not_a_hit(self):
        """t = 0 lies at the origin and does not count."""
        s = SceneObject.sphere()
        assert hit([Intersection(0.0, s)]) is None

    def test_lowest_nonnegative(self):
        """The hit is the lowest positive t regardless of order."""
        s = SceneObject.sphere()
        xs = [
            Intersection(5.0, s),
            Intersection(7.0, s),
            Intersection(-3.0, s),
            Intersection(2.0, s),
        ]
        assert hit(xs) is xs[3]

    def test_empty(self):
        """An empty list has no hit."""
        assert hit([]) is None


class TestSort:
    """Tests for sorting intersections."""

    def test_sorted_by_t(self):
        """Intersections are ordered by ascending t."""
        s = SceneObject.sphere()
        xs = sort_intersections([Intersection(t, s) for t in (5.0, -3.0, 2.0, 7.0)])
        assert [x.t for x in xs] == [-3.0, 2.0, 5.0, 7.0]

    def test_stable_for_ties(self):
        """Equal t values keep their input order."""
        a = SceneObject.sphere()
        b = SceneObject.sphere()
        xs = sort_intersections([Intersection(1.0, a), Intersection(1.0, b)])
        assert xs[0].object is a
        assert xs[1].object is b
