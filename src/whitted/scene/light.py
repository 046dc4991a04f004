"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.tuples import Color, Point


@dataclass(frozen=True)
class PointLight:
    """A light with a position and intensity, without area or falloff.

    Attributes:
        position: Light position in world space.
        intensity: Color and brightness of the emitted light.
    """

    position: Point
    intensity: Color
