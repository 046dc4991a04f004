"""Pytest configuration for raytracer tests.

This module provides shared fixtures and helpers for all test modules.
"""

import pytest

from whitted.core.matrix import IDENTITY
from whitted.core.tuples import Color, Point
from whitted.materials.material import Material
from whitted.materials.pattern import Pattern
from whitted.scene.object import SceneObject
from whitted.scene.world import default_world as make_default_world


class PositionPattern(Pattern):
    """Pattern that returns the pattern-space point as a color.

    Makes pattern-space conversions directly observable.
    """

    def pattern_at(self, point: Point) -> Color:
        return Color(point.x, point.y, point.z)


def glass_sphere(transform=IDENTITY, refractive_index=1.5):
    """Create a fully transparent unit sphere with the given refractive index."""
    return SceneObject.sphere(
        Material(transparency=1.0, refractive_index=refractive_index),
        transform,
    )


@pytest.fixture
def default_world():
    """The two concentric spheres lit from (-10, 10, -10)."""
    return make_default_world()


def assert_color(actual, expected, tol=1e-5):
    """Compare colors with a tolerance suited to five-digit reference values."""
    assert actual.isclose(expected, tol), f"{actual!r} != {expected!r}"
