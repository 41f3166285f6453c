"""Tests for scene loading through the engine registries."""

from __future__ import annotations

import json

import pytest

from linepoints import (
    SceneConfig,
    SceneConfigError,
    SceneFileEngine,
    Segment,
    ShapeEngine,
    ShapeSpec,
    VectorRectangle,
    build_objects,
    default_scene,
    load_scene,
)
from linepoints.engines import FunctionalRegistry

SCENE = {
    "passes": 3,
    "strict": True,
    "objects": [
        {"kind": "rectangle", "x": 1, "y": 1, "width": 10, "height": 10},
        {"kind": "line", "start": [0, 0], "end": [0, 5]},
    ],
}


@pytest.fixture
def json_scene(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(SCENE))
    return path


@pytest.fixture
def yaml_scene(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text(
        "passes: 3\n"
        "strict: true\n"
        "objects:\n"
        "  - kind: rectangle\n"
        "    x: 1\n"
        "    y: 1\n"
        "    width: 10\n"
        "    height: 10\n"
        "  - kind: line\n"
        "    start: [0, 0]\n"
        "    end: [0, 5]\n"
    )
    return path


@pytest.fixture
def toml_scene(tmp_path):
    path = tmp_path / "scene.toml"
    path.write_text(
        "passes = 3\n"
        "strict = true\n"
        "\n"
        "[[objects]]\n"
        'kind = "rectangle"\n'
        "x = 1\n"
        "y = 1\n"
        "width = 10\n"
        "height = 10\n"
        "\n"
        "[[objects]]\n"
        'kind = "line"\n'
        "start = [0, 0]\n"
        "end = [0, 5]\n"
    )
    return path


class TestLoadScene:
    """Scene files of every supported format load to the same config."""

    @pytest.mark.parametrize("fixture", ["json_scene", "yaml_scene", "toml_scene"])
    def test_formats(self, fixture, request):
        scene = load_scene(request.getfixturevalue(fixture))
        assert scene.passes == 3
        assert scene.strict is True
        assert [spec.kind for spec in scene.objects] == ["rectangle", "line"]
        assert scene.objects[0].params == {"x": 1, "y": 1, "width": 10, "height": 10}

    def test_yml_alias(self, tmp_path):
        path = tmp_path / "scene.yml"
        path.write_text("objects: []\n")
        assert load_scene(path).objects == []

    def test_defaults(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("{}")
        scene = load_scene(str(path))
        assert scene.passes == 2
        assert scene.strict is False

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "scene.ini"
        path.write_text("")
        with pytest.raises(SceneConfigError) as excinfo:
            load_scene(path)
        assert "ini" in str(excinfo.value)

    def test_missing_extension(self, tmp_path):
        path = tmp_path / "scene"
        path.write_text("{}")
        with pytest.raises(SceneConfigError):
            load_scene(path)

    def test_document_must_be_a_mapping(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("[1, 2]")
        with pytest.raises(SceneConfigError) as excinfo:
            load_scene(path)
        assert excinfo.value.context["actual_type"] == "list"

    def test_invalid_document(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps({"passes": 0, "colour": "red"}))
        with pytest.raises(SceneConfigError) as excinfo:
            load_scene(path)
        hints = " ".join(excinfo.value.suggestions)
        assert "passes" in hints
        assert "colour" in hints

    def test_missing_file(self, tmp_path):
        path = tmp_path / "absent.json"
        with pytest.raises(SceneConfigError) as excinfo:
            load_scene(path)
        assert excinfo.value.context["error_type"] == "FileNotFoundError"
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    @pytest.mark.parametrize(
        "name, content, error_type",
        [
            ("scene.json", "{not json", "JSONDecodeError"),
            ("scene.yaml", "objects: [", "ParserError"),
            ("scene.toml", "passes = = 2", "TOMLDecodeError"),
        ],
    )
    def test_malformed_file(self, tmp_path, name, content, error_type):
        path = tmp_path / name
        path.write_text(content)
        with pytest.raises(SceneConfigError) as excinfo:
            load_scene(path)
        assert excinfo.value.context["error_type"] == error_type
        assert str(path) in str(excinfo.value)


class TestBuildObjects:
    """Shape specs become vector objects through ShapeEngine."""

    def test_build(self):
        scene = SceneConfig.model_validate(SCENE)
        rectangle, line = build_objects(scene)

        assert isinstance(rectangle, VectorRectangle)
        assert len(rectangle) == 4
        assert list(line) == [Segment((0, 0), (0, 5))]

    def test_default_scene(self):
        objects = build_objects(default_scene())
        assert [repr(o) for o in objects] == [
            "VectorRectangle(x=1, y=1, width=10, height=10)",
            "VectorRectangle(x=3, y=3, width=6, height=6)",
        ]

    def test_unknown_kind(self):
        scene = SceneConfig(objects=[ShapeSpec(kind="circle", radius=3)])
        with pytest.raises(SceneConfigError) as excinfo:
            build_objects(scene)
        assert "rectangle" in " ".join(excinfo.value.suggestions)

    def test_invalid_parameters(self):
        scene = SceneConfig(objects=[ShapeSpec(kind="rectangle", x=1, y=1, width=2)])
        with pytest.raises(SceneConfigError) as excinfo:
            build_objects(scene)
        assert excinfo.value.context == {"kind": "rectangle", "index": 0}


class TestFunctionalRegistry:
    """The registry behind SceneFileEngine and ShapeEngine."""

    def test_default_engines(self):
        assert set(SceneFileEngine.keys()) == {"json", "yaml", "yml", "toml"}
        assert set(ShapeEngine.keys()) == {"rectangle", "line"}

    def test_register_as_decorator(self):
        registry = FunctionalRegistry("Test")

        @registry.register_artifact
        def square(size: int):
            return size * size

        assert registry.get_artifact("square") is square
        assert registry.has_identifier("square")
        assert list(registry) == ["square"]

    def test_register_with_key(self):
        registry = FunctionalRegistry("Test")
        registry.register_artifact(len, key="length")
        assert registry.get_artifact("length") is len

    def test_duplicate_registration(self):
        registry = FunctionalRegistry("Test")
        registry.register_artifact(len)
        with pytest.raises(SceneConfigError):
            registry.register_artifact(len)

    def test_non_callable(self):
        with pytest.raises(SceneConfigError):
            FunctionalRegistry("Test").register_artifact(42)
