"""Declarative scene descriptions.

A scene can be described as plain data (a nested mapping, typically read
from a JSON or YAML file) and turned into a `World` and a `Camera`. Parsing
and building are separate steps:

    scene_from_dict(mapping) -> SceneDescription   # schema checks (pydantic)
    build_scene(description) -> (World, Camera)    # matrices and materials

Both steps report problems as `SceneDescriptionError`, so a malformed file
is rejected before any rendering starts.

Transforms are lists of primitive steps composed left to right, the same
way `compose` multiplies them:

    [["translate", 0, 1, 0], ["rotate_y", 0.785], ["scale", 2, 2, 2]]

Example:
    >>> from whitted.scene.description import build_scene, load_scene
    >>> world, camera = build_scene(load_scene("examples/scenes/showcase.json"))
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Annotated, Any, Literal, Optional

import yaml
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    ValidationError,
    conint,
    model_validator,
)

from whitted.camera.camera import Camera
from whitted.core.matrix import IDENTITY, Matrix, NonInvertibleMatrixError
from whitted.core.transforms import (
    compose,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from whitted.core.tuples import Color, Point, Vector
from whitted.geometry import SHAPE_TYPES, Cone, Cylinder
from whitted.materials.material import Material
from whitted.materials.pattern import PATTERN_TYPES, Pattern
from whitted.scene.light import PointLight
from whitted.scene.object import SceneObject
from whitted.scene.world import World

logger = logging.getLogger(__name__)

# Transform kind -> (builder, number of arguments)
TRANSFORM_BUILDERS: dict[str, tuple[Callable[..., Matrix], int]] = {
    "translate": (translation, 3),
    "scale": (scaling, 3),
    "rotate_x": (rotation_x, 1),
    "rotate_y": (rotation_y, 1),
    "rotate_z": (rotation_z, 1),
    "shear": (shearing, 6),
}

ShapeKind = Literal["plane", "sphere", "cube", "cylinder", "cone"]
PatternKind = Literal["stripe", "ring", "gradient", "checker"]
TransformKind = Literal["translate", "scale", "rotate_x", "rotate_y", "rotate_z", "shear"]

# Shapes that accept minimum / maximum / closed
_BOUNDED_SHAPES = {"cylinder", "cone"}

# StrictFloat takes ints but not bools or numeric strings
Triple = tuple[StrictFloat, StrictFloat, StrictFloat]
UnitFloat = Annotated[StrictFloat, Field(ge=0.0, le=1.0)]
PixelCount = conint(strict=True, gt=0)


class SceneDescriptionError(ValueError):
    """Raised when a scene description is malformed or cannot be built."""


# =============================================================================
# Transform Steps
# =============================================================================


def _split_step(value: Any) -> Any:
    # ["translate", 1, 2, 3] -> ("translate", (1, 2, 3))
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)) and value:
        return (value[0], tuple(value[1:]))
    return value


def _check_arity(step: tuple[str, tuple[float, ...]]) -> tuple[str, tuple[float, ...]]:
    kind, args = step
    arity = TRANSFORM_BUILDERS[kind][1]
    if len(args) != arity:
        raise ValueError(f"{kind} takes {arity} argument(s), got {len(args)}")
    return step


TransformStep = Annotated[
    tuple[TransformKind, tuple[StrictFloat, ...]],
    BeforeValidator(_split_step),
    AfterValidator(_check_arity),
]


# =============================================================================
# Description Models
# =============================================================================


class _Description(BaseModel):
    model_config = ConfigDict(extra="forbid")


class LightDescription(_Description):
    position: Triple = (-10.0, 10.0, -10.0)
    intensity: Triple = (1.0, 1.0, 1.0)


class CameraDescription(_Description):
    """Camera placement and image size.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        field_of_view: Field of view in radians, in (0, pi).
        from_point: Eye position (key "from").
        to_point: Point the eye looks at (key "to").
        up: Approximate up direction.
    """

    width: PixelCount = 100
    height: PixelCount = 50
    field_of_view: Annotated[StrictFloat, Field(gt=0.0, lt=math.pi)] = math.pi / 3.0
    from_point: Triple = Field((0.0, 1.5, -5.0), alias="from")
    to_point: Triple = Field((0.0, 1.0, 0.0), alias="to")
    up: Triple = (0.0, 1.0, 0.0)


class PatternDescription(_Description):
    kind: PatternKind = Field(..., alias="type")
    a: Triple
    b: Triple
    transform: list[TransformStep] = Field(default_factory=list)


class MaterialDescription(_Description):
    """Material values; omitted fields keep the `Material` defaults."""

    color: Triple = (1.0, 1.0, 1.0)
    ambient: Annotated[StrictFloat, Field(ge=0.0)] = 0.1
    diffuse: Annotated[StrictFloat, Field(ge=0.0)] = 0.9
    specular: Annotated[StrictFloat, Field(ge=0.0)] = 0.9
    shininess: Annotated[StrictFloat, Field(gt=0.0)] = 200.0
    reflective: UnitFloat = 0.0
    transparency: UnitFloat = 0.0
    refractive_index: Annotated[StrictFloat, Field(gt=0.0)] = 1.0
    pattern: Optional[PatternDescription] = None


class ObjectDescription(_Description):
    """One object: a shape kind, its bounds, transform and material."""

    shape: ShapeKind
    transform: list[TransformStep] = Field(default_factory=list)
    material: MaterialDescription = Field(default_factory=MaterialDescription)
    minimum: StrictFloat = -math.inf
    maximum: StrictFloat = math.inf
    closed: StrictBool = False

    @model_validator(mode="after")
    def check_bounds(self) -> ObjectDescription:
        bounds = {"minimum", "maximum", "closed"} & self.model_fields_set
        if bounds and self.shape not in _BOUNDED_SHAPES:
            raise ValueError(
                f"{', '.join(sorted(bounds))} only apply to "
                f"{' and '.join(sorted(_BOUNDED_SHAPES))}"
            )
        return self


class SceneDescription(_Description):
    light: LightDescription = Field(default_factory=LightDescription)
    camera: CameraDescription = Field(default_factory=CameraDescription)
    objects: list[ObjectDescription] = Field(default_factory=list)


# =============================================================================
# Parsing
# =============================================================================


def _location(loc: Sequence[int | str]) -> str:
    # ("objects", 1, "material", "color") -> "objects[1].material.color"
    where = ""
    for part in loc:
        if isinstance(part, int):
            where += f"[{part}]"
        else:
            where += f".{part}" if where else str(part)
    return where or "scene"


def scene_from_dict(data: Mapping[str, Any]) -> SceneDescription:
    """Parse a nested mapping into a scene description.

    Args:
        data: Mapping with optional "light", "camera" and "objects" entries.

    Returns:
        The parsed description. Omitted values take their defaults.

    Raises:
        SceneDescriptionError: On unknown keys, shapes, patterns or transform
            kinds, wrong argument counts, or values of the wrong type or
            out of range. The message names every offending location.
    """
    try:
        return SceneDescription.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(f"{_location(err['loc'])}: {err['msg']}" for err in e.errors())
        raise SceneDescriptionError(f"Invalid scene description: {problems}") from e


def load_scene(filepath: str | Path) -> SceneDescription:
    """Read a scene description from a JSON or YAML file.

    The format is chosen by suffix: `.yaml` and `.yml` are read as YAML,
    anything else as JSON.

    Raises:
        SceneDescriptionError: If the file cannot be decoded or the content
            is not a valid description.
    """
    path = Path(filepath)
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise SceneDescriptionError(f"Cannot decode {path}: {e}") from e

    logger.debug("Loaded scene description from %s", path)
    return scene_from_dict(data if data is not None else {})


# =============================================================================
# Building
# =============================================================================


def _build_transform(steps: Sequence[TransformStep]) -> Matrix:
    if not steps:
        return IDENTITY
    return compose(TRANSFORM_BUILDERS[kind][0](*args) for kind, args in steps)


def _build_pattern(description: PatternDescription) -> Pattern:
    pattern_cls = PATTERN_TYPES[description.kind]
    return pattern_cls(
        Color(*description.a),
        Color(*description.b),
        transform=_build_transform(description.transform),
    )


def _build_material(description: MaterialDescription) -> Material:
    pattern = None
    if description.pattern is not None:
        pattern = _build_pattern(description.pattern)
    return Material(
        color=Color(*description.color),
        ambient=description.ambient,
        diffuse=description.diffuse,
        specular=description.specular,
        shininess=description.shininess,
        pattern=pattern,
        reflective=description.reflective,
        transparency=description.transparency,
        refractive_index=description.refractive_index,
    )


def _build_object(description: ObjectDescription) -> SceneObject:
    shape_cls = SHAPE_TYPES[description.shape]
    if shape_cls in (Cylinder, Cone):
        shape = shape_cls(description.minimum, description.maximum, description.closed)
    else:
        shape = shape_cls()
    return SceneObject(
        shape,
        _build_material(description.material),
        _build_transform(description.transform),
    )


def build_scene(description: SceneDescription) -> tuple[World, Camera]:
    """Construct the world and camera for a description.

    Args:
        description: A parsed scene description.

    Returns:
        (world, camera) ready to render.

    Raises:
        SceneDescriptionError: If a transform is singular or a material or
            camera value is out of range.
    """
    light = PointLight(
        Point(*description.light.position),
        Color(*description.light.intensity),
    )
    world = World(light)
    for index, obj in enumerate(description.objects):
        try:
            world.add(_build_object(obj))
        except NonInvertibleMatrixError as e:
            raise SceneDescriptionError(f"objects[{index}]: singular transform") from e
        except ValueError as e:
            raise SceneDescriptionError(f"objects[{index}]: {e}") from e

    cam = description.camera
    try:
        camera = Camera(
            cam.width,
            cam.height,
            cam.field_of_view,
            view_transform(Point(*cam.from_point), Point(*cam.to_point), Vector(*cam.up)),
        )
    except NonInvertibleMatrixError as e:
        raise SceneDescriptionError("camera: degenerate view (from, to and up are collinear)") from e
    except ValueError as e:
        raise SceneDescriptionError(f"camera: {e}") from e

    logger.info(
        "Built scene with %d object(s), camera %dx%d",
        len(world.objects),
        camera.hsize,
        camera.vsize,
    )
    return world, camera
