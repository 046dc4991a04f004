"""Phong material model.

A material describes how a surface responds to light: its base color (or a
pattern), the ambient/diffuse/specular weights of the Phong model, and the
coefficients that drive secondary rays (reflectivity, transparency and the
refractive index of the medium inside the surface).

Lighting model:
    effective = base_color * light.intensity
    ambient   = effective * ambient
    diffuse   = effective * diffuse * dot(lightv, normalv)
    specular  = light.intensity * specular * dot(reflectv, eyev)^shininess

Diffuse and specular vanish when the light is behind the surface; specular
also vanishes when the reflection points away from the eye. A point in
shadow receives the ambient term only.

Example:
    >>> from whitted.core.tuples import Color
    >>> from whitted.materials.material import Material
    >>> glass = Material(color=Color(0.1, 0.1, 0.1), transparency=0.9, refractive_index=1.5)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.tuples import BLACK, WHITE, Color, Point, Vector
from whitted.materials.pattern import Pattern

if TYPE_CHECKING:
    from whitted.scene.light import PointLight
    from whitted.scene.object import SceneObject

# Common refractive indices
VACUUM_INDEX = 1.0
WATER_INDEX = 1.333
GLASS_INDEX = 1.5
DIAMOND_INDEX = 2.417


@dataclass
class Material:
    """Optical properties of a surface.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Weight of the ambient term (typically 0 to 1).
        diffuse: Weight of the diffuse term (typically 0 to 1).
        specular: Weight of the specular highlight (typically 0 to 1).
        shininess: Specular exponent; larger values give smaller highlights.
        pattern: Optional pattern overriding `color`.
        reflective: Mirror reflectivity in [0, 1].
        transparency: Fraction of light transmitted, in [0, 1].
        refractive_index: Index of refraction of the interior (> 0).
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Pattern | None = None
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM_INDEX

    def __post_init__(self) -> None:
        if not 0.0 <= self.reflective <= 1.0:
            raise ValueError(f"reflective must be in [0, 1], got {self.reflective}")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"transparency must be in [0, 1], got {self.transparency}")
        if self.refractive_index <= 0.0:
            raise ValueError(f"refractive_index must be positive, got {self.refractive_index}")

    def lighting(
        self,
        light: PointLight,
        obj: SceneObject,
        point: Point,
        eyev: Vector,
        normalv: Vector,
        in_shadow: bool = False,
    ) -> Color:
        """Compute the Phong color of a surface point.

        Args:
            light: The point light illuminating the surface.
            obj: Object owning this material, used to evaluate the pattern.
            point: Surface point in world space.
            eyev: Unit vector from the point toward the eye.
            normalv: Unit surface normal at the point.
            in_shadow: Whether the light is blocked from the point.

        Returns:
            The unclamped sum of ambient, diffuse and specular terms.
        """
        if self.pattern is not None:
            base = self.pattern.at_object(obj, point)
        else:
            base = self.color

        effective_color = base * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        lightv = (light.position - point).normalize()
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0.0:
            return ambient

        diffuse = effective_color * self.diffuse * light_dot_normal

        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            factor = reflect_dot_eye**self.shininess
            specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular
