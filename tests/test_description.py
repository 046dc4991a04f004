"""Unit tests for declarative scene descriptions.

Tests cover:
- Parsing mappings with defaults and full detail
- Rejection of malformed descriptions
- Loading JSON and YAML files
- Building the world and camera
"""

import json
import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from whitted.core.ray import Ray
from whitted.core.transforms import scaling, translation
from whitted.core.tuples import Color, Point, Vector
from whitted.geometry import Cone, Cube, Cylinder, Plane, Sphere
from whitted.materials.pattern import CheckerPattern
from whitted.scene.description import (
    CameraDescription,
    LightDescription,
    SceneDescriptionError,
    build_scene,
    load_scene,
    scene_from_dict,
)

SHOWCASE = Path(__file__).resolve().parents[1] / "examples" / "scenes" / "showcase.json"

SIMPLE_SCENE = {
    "light": {"position": [0, 10, -10], "intensity": [1, 1, 1]},
    "camera": {
        "width": 20,
        "height": 10,
        "field_of_view": 1.0,
        "from": [0, 0, -5],
        "to": [0, 0, 0],
        "up": [0, 1, 0],
    },
    "objects": [
        {
            "shape": "sphere",
            "transform": [["translate", 0, 0, 1], ["scale", 2, 2, 2]],
            "material": {
                "color": [1, 0.2, 0.2],
                "reflective": 0.3,
                "pattern": {"type": "checker", "a": [1, 1, 1], "b": [0, 0, 0]},
            },
        },
        {"shape": "cylinder", "minimum": 0, "maximum": 2, "closed": True},
    ],
}


class TestSceneFromDict:
    """Tests for parsing nested mappings."""

    def test_empty_scene_uses_defaults(self):
        """An empty mapping yields the default light and camera."""
        scene = scene_from_dict({})
        assert scene.light == LightDescription()
        assert scene.camera == CameraDescription()
        assert scene.objects == []

    def test_full_scene(self):
        """Every section is parsed into floats and tuples."""
        scene = scene_from_dict(SIMPLE_SCENE)
        assert scene.light.position == (0.0, 10.0, -10.0)
        assert scene.camera.width == 20
        assert scene.camera.from_point == (0.0, 0.0, -5.0)

        sphere, cylinder = scene.objects
        assert sphere.shape == "sphere"
        assert sphere.transform == [("translate", (0.0, 0.0, 1.0)), ("scale", (2.0, 2.0, 2.0))]
        assert sphere.material.color == (1.0, 0.2, 0.2)
        assert sphere.material.reflective == 0.3
        assert sphere.material.diffuse == 0.9
        assert sphere.material.pattern.kind == "checker"

        assert cylinder.minimum == 0.0
        assert cylinder.maximum == 2.0
        assert cylinder.closed is True

    def test_unbounded_by_default(self):
        """Cylinders without bounds are infinite and open."""
        (obj,) = scene_from_dict({"objects": [{"shape": "cone"}]}).objects
        assert obj.minimum == -math.inf
        assert obj.maximum == math.inf
        assert obj.closed is False

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"lights": {}},
            {"objects": [{"shape": "torus"}]},
            {"objects": [{"shape": "sphere", "colour": [1, 0, 0]}]},
            {"objects": [{"shape": "sphere", "transform": [["skew", 1]]}]},
            {"objects": [{"shape": "sphere", "transform": [["translate", 1, 2]]}]},
            {"objects": [{"shape": "sphere", "transform": "scale"}]},
            {"objects": [{"shape": "sphere", "minimum": 0}]},
            {"objects": [{"shape": "cylinder", "closed": "yes"}]},
            {"objects": [{"shape": "sphere", "material": {"ambient": "high"}}]},
            {"objects": [{"shape": "sphere", "material": {"color": [1, 0]}}]},
            {"objects": [{"shape": "sphere", "material": {"pattern": {"type": "plaid"}}}]},
            {"objects": [{"shape": "sphere", "material": {"pattern": {"type": "ring", "a": [1, 1, 1]}}}]},
            {"objects": "sphere"},
            {"camera": {"width": 0}},
            {"camera": {"height": 10.5}},
            {"camera": {"from": [0, 0, True]}},
            {"objects": [{"shape": "sphere", "transform": [["rotate_y", True]]}]},
            {"objects": [{"shape": "sphere", "transform": [[]]}]},
        ],
    )
    def test_malformed(self, data):
        """Malformed descriptions are rejected before building."""
        with pytest.raises(SceneDescriptionError):
            scene_from_dict(data)

    def test_error_names_location(self):
        """Errors point at the offending entry."""
        with pytest.raises(SceneDescriptionError, match=r"objects\[1\]"):
            scene_from_dict({"objects": [{"shape": "plane"}, {"shape": "torus"}]})

    def test_validation_error_is_chained(self):
        """The underlying schema error stays available as the cause."""
        with pytest.raises(SceneDescriptionError) as excinfo:
            scene_from_dict({"objects": [{"shape": "torus"}]})
        assert isinstance(excinfo.value.__cause__, ValidationError)


class TestLoadScene:
    """Tests for reading description files."""

    def test_json(self, tmp_path):
        """JSON files are decoded by default."""
        path = tmp_path / "scene.json"
        path.write_text(json.dumps(SIMPLE_SCENE))
        scene = load_scene(path)
        assert len(scene.objects) == 2

    def test_yaml(self, tmp_path):
        """.yaml files are decoded as YAML."""
        path = tmp_path / "scene.yaml"
        path.write_text(
            "camera:\n"
            "  width: 8\n"
            "  height: 4\n"
            "objects:\n"
            "  - shape: cube\n"
            "    transform:\n"
            "      - [rotate_y, 0.5]\n"
        )
        scene = load_scene(str(path))
        assert scene.camera.width == 8
        assert scene.objects[0].shape == "cube"
        assert scene.objects[0].transform == [("rotate_y", (0.5,))]

    def test_empty_yaml(self, tmp_path):
        """An empty YAML file is an empty scene."""
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_scene(path).objects == []

    def test_undecodable(self, tmp_path):
        """Syntax errors become description errors."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SceneDescriptionError):
            load_scene(path)

    def test_not_utf8(self, tmp_path):
        """Undecodable bytes become description errors."""
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"camera:\n  width: \xff\xfe\n")
        with pytest.raises(SceneDescriptionError, match="Cannot decode"):
            load_scene(path)

    def test_missing_file(self, tmp_path):
        """A missing file raises the usual OSError."""
        with pytest.raises(FileNotFoundError):
            load_scene(tmp_path / "nope.json")


class TestBuildScene:
    """Tests for constructing the world and camera."""

    def test_build(self):
        """Objects, materials and the camera are constructed."""
        world, camera = build_scene(scene_from_dict(SIMPLE_SCENE))
        assert world.light.position == Point(0.0, 10.0, -10.0)
        assert (camera.hsize, camera.vsize) == (20, 10)

        sphere, cylinder = world.objects
        assert isinstance(sphere.shape, Sphere)
        assert sphere.transform == translation(0.0, 0.0, 1.0) @ scaling(2.0, 2.0, 2.0)
        assert sphere.material.color == Color(1.0, 0.2, 0.2)
        assert isinstance(sphere.material.pattern, CheckerPattern)
        assert cylinder.shape == Cylinder(0.0, 2.0, True)

    def test_build_transform_order(self):
        """Transform steps are multiplied left to right."""
        world, _ = build_scene(scene_from_dict(SIMPLE_SCENE))
        sphere = world.objects[0]
        # translate(0, 0, 1) @ scale(2): the unit sphere spans z in [-1, 3]
        ts = sphere.local_intersect(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0)))
        assert sorted(ts) == pytest.approx([4.0, 8.0])

    def test_singular_transform(self):
        """A zero scale cannot be inverted."""
        scene = scene_from_dict(
            {"objects": [{"shape": "plane", "transform": [["scale", 1, 0, 1]]}]}
        )
        with pytest.raises(SceneDescriptionError, match="singular"):
            build_scene(scene)

    def test_invalid_material(self):
        """Out-of-range material values are rejected while parsing."""
        with pytest.raises(SceneDescriptionError, match=r"objects\[0\]\.material\.transparency"):
            scene_from_dict({"objects": [{"shape": "sphere", "material": {"transparency": 1.5}}]})

    def test_invalid_field_of_view(self):
        """A field of view of pi or more is rejected while parsing."""
        with pytest.raises(SceneDescriptionError, match=r"camera\.field_of_view"):
            scene_from_dict({"camera": {"field_of_view": 4.0}})

    def test_overridden_size_checked_by_camera(self):
        """Values changed after parsing are still checked when building."""
        scene = scene_from_dict({})
        scene.camera.width = 0
        with pytest.raises(SceneDescriptionError, match="camera"):
            build_scene(scene)

    def test_degenerate_view(self):
        """Looking along the up vector has no orientation."""
        scene = scene_from_dict({"camera": {"from": [0, 0, 0], "to": [0, 5, 0]}})
        with pytest.raises(SceneDescriptionError, match="camera"):
            build_scene(scene)

    def test_showcase(self):
        """The bundled example scene builds every shape."""
        world, camera = build_scene(load_scene(SHOWCASE))
        kinds = {type(obj.shape) for obj in world.objects}
        assert kinds == {Plane, Sphere, Cube, Cylinder, Cone}
        assert len(world.objects) == 7
        assert (camera.hsize, camera.vsize) == (200, 100)
