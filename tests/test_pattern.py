"""Unit tests for procedural patterns.

Tests cover:
- Stripe, ring, gradient and checker evaluation in pattern space
- World -> object -> pattern space conversion
"""

import pytest
from conftest import PositionPattern

from whitted.core.matrix import IDENTITY
from whitted.core.transforms import scaling, translation
from whitted.core.tuples import BLACK, WHITE, Color, Point
from whitted.materials.pattern import (
    PATTERN_TYPES,
    CheckerPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)
from whitted.scene.object import SceneObject


class TestStripePattern:
    """Tests for stripes along x."""

    def test_constant_in_y_and_z(self):
        """Stripes only vary with x."""
        pattern = StripePattern(WHITE, BLACK)
        for point in (Point(0.0, 0.0, 0.0), Point(0.0, 1.0, 0.0), Point(0.0, 0.0, 2.0)):
            assert pattern.pattern_at(point) == WHITE

    @pytest.mark.parametrize(
        "x,expected",
        [(0.0, WHITE), (0.9, WHITE), (1.0, BLACK), (-0.1, BLACK), (-1.0, BLACK), (-1.1, WHITE)],
    )
    def test_alternates_in_x(self, x, expected):
        """Colors alternate on unit steps, including across zero."""
        assert StripePattern(WHITE, BLACK).pattern_at(Point(x, 0.0, 0.0)) == expected

    def test_object_transform(self):
        """The object's transform applies before the pattern."""
        obj = SceneObject.sphere(transform=scaling(2.0, 2.0, 2.0))
        assert StripePattern(WHITE, BLACK).at_object(obj, Point(1.5, 0.0, 0.0)) == WHITE

    def test_pattern_transform(self):
        """The pattern's own transform applies."""
        obj = SceneObject.sphere()
        pattern = StripePattern(WHITE, BLACK, transform=scaling(2.0, 2.0, 2.0))
        assert pattern.at_object(obj, Point(1.5, 0.0, 0.0)) == WHITE

    def test_both_transforms(self):
        """Object and pattern transforms combine."""
        obj = SceneObject.sphere(transform=scaling(2.0, 2.0, 2.0))
        pattern = StripePattern(WHITE, BLACK, transform=translation(0.5, 0.0, 0.0))
        assert pattern.at_object(obj, Point(2.5, 0.0, 0.0)) == WHITE


class TestPatternSpace:
    """Tests for the world -> object -> pattern conversion."""

    def test_default_transform(self):
        """Patterns start with the identity transform."""
        assert PositionPattern().transform == IDENTITY

    def test_object_transform(self):
        """A point is first taken into object space."""
        obj = SceneObject.sphere(transform=scaling(2.0, 2.0, 2.0))
        color = PositionPattern().at_object(obj, Point(2.0, 3.0, 4.0))
        assert color == Color(1.0, 1.5, 2.0)

    def test_pattern_transform(self):
        """Then into pattern space."""
        obj = SceneObject.sphere()
        pattern = PositionPattern(scaling(2.0, 2.0, 2.0))
        assert pattern.at_object(obj, Point(2.0, 3.0, 4.0)) == Color(1.0, 1.5, 2.0)

    def test_both(self):
        """Both inverses are applied in order."""
        obj = SceneObject.sphere(transform=scaling(2.0, 2.0, 2.0))
        pattern = PositionPattern(translation(0.5, 1.0, 1.5))
        assert pattern.at_object(obj, Point(2.5, 3.0, 3.5)) == Color(0.75, 0.5, 0.25)

    def test_reassigning_transform_refreshes_inverse(self):
        """Setting the transform recomputes the cached inverse."""
        pattern = PositionPattern()
        pattern.transform = translation(1.0, 0.0, 0.0)
        assert pattern.inverse == translation(-1.0, 0.0, 0.0)

    def test_base_class_is_abstract(self):
        """The base pattern has no colors of its own."""
        with pytest.raises(TypeError):
            Pattern()

    def test_incomplete_subclass_fails_at_construction(self):
        """A pattern without pattern_at cannot be instantiated."""

        class Incomplete(Pattern):
            pass

        with pytest.raises(TypeError):
            Incomplete()


class TestOtherPatterns:
    """Tests for gradient, ring and checker patterns."""

    @pytest.mark.parametrize(
        "x,expected",
        [
            (0.0, WHITE),
            (0.25, Color(0.75, 0.75, 0.75)),
            (0.5, Color(0.5, 0.5, 0.5)),
            (0.75, Color(0.25, 0.25, 0.25)),
        ],
    )
    def test_gradient(self, x, expected):
        """Gradients interpolate linearly between the two colors."""
        assert GradientPattern(WHITE, BLACK).pattern_at(Point(x, 0.0, 0.0)) == expected

    @pytest.mark.parametrize(
        "point,expected",
        [
            (Point(0.0, 0.0, 0.0), WHITE),
            (Point(1.0, 0.0, 0.0), BLACK),
            (Point(0.0, 0.0, 1.0), BLACK),
            (Point(0.708, 0.0, 0.708), BLACK),
        ],
    )
    def test_ring(self, point, expected):
        """Rings extend in both x and z."""
        assert RingPattern(WHITE, BLACK).pattern_at(point) == expected

    @pytest.mark.parametrize(
        "point,expected",
        [
            (Point(0.0, 0.0, 0.0), WHITE),
            (Point(0.99, 0.0, 0.0), WHITE),
            (Point(1.01, 0.0, 0.0), BLACK),
            (Point(0.0, 0.99, 0.0), WHITE),
            (Point(0.0, 1.01, 0.0), BLACK),
            (Point(0.0, 0.0, 0.99), WHITE),
            (Point(0.0, 0.0, 1.01), BLACK),
        ],
    )
    def test_checker_repeats_in_each_dimension(self, point, expected):
        """Checkers alternate along every axis."""
        assert CheckerPattern(WHITE, BLACK).pattern_at(point) == expected

    def test_checker_symmetric_in_y(self):
        """Just below the xz plane matches just above it."""
        pattern = CheckerPattern(WHITE, BLACK)
        assert pattern.pattern_at(Point(0.0, -0.5, 0.0)) == WHITE
        assert pattern.pattern_at(Point(0.0, -1.5, 0.0)) == BLACK

    def test_registry(self):
        """Patterns are registered by name."""
        assert PATTERN_TYPES["checker"] is CheckerPattern
        assert set(PATTERN_TYPES) == {"stripe", "ring", "gradient", "checker"}
