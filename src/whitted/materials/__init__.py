"""Materials module for surface appearance.

This module implements the surface description used by the shading pipeline:

Components:
    pattern: Procedural color patterns with their own transforms
    material: Phong material and the local lighting function

Each material provides:
    - lighting(): Phong shading of a point for one point light
    - reflective / transparency / refractive_index: secondary-ray controls
"""

from .material import DIAMOND_INDEX, GLASS_INDEX, VACUUM_INDEX, WATER_INDEX, Material
from .pattern import (
    PATTERN_TYPES,
    CheckerPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)

__all__ = [
    "Material",
    "VACUUM_INDEX",
    "WATER_INDEX",
    "GLASS_INDEX",
    "DIAMOND_INDEX",
    "Pattern",
    "StripePattern",
    "RingPattern",
    "GradientPattern",
    "CheckerPattern",
    "PATTERN_TYPES",
]
