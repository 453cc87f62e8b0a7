"""
Test the generated Python source and the module built from it.
"""

import dataclasses
import enum
import json
import logging

import pytest

from gltfgen import runtime
from gltfgen.compiler import compile_schema, generate_source
from gltfgen.emitter import Emitter, class_name, field_name, member_name
from gltfgen.errors import DecodeError, MissingField
from gltfgen.items import (
    Array,
    EnumDefinition,
    EnumOption,
    Map,
    NamedProperty,
    PassthroughExtension,
    Primitive,
    PrimitiveKind,
    StructDefinition,
    StructRef,
    Unknown,
)
from gltfgen.registry import TypeRegistry

NUMBER = Primitive(PrimitiveKind.NUMBER)

SCHEMAS = {
    "scene.schema.json": {
        "title": "Scene",
        "type": "object",
        "description": "A tiny scene.",
        "properties": {
            "a": {"type": "integer", "minimum": 0, "maximum": 10},
            "b": {"type": "array", "items": {"type": "number"}},
            "translation": {
                "type": "array",
                "items": {"type": "number"},
                "minItems": 3,
                "maxItems": 3,
            },
            "mode": {
                "anyOf": [
                    {"enum": [1], "description": "A"},
                    {"enum": [2], "description": "B"},
                    {"type": "integer"},
                ]
            },
            "alphaMode": {
                "anyOf": [
                    {"enum": ["OPAQUE"]},
                    {"enum": ["MASK"], "description": "Cut out below a threshold."},
                    {"type": "string"},
                ]
            },
            "attributes": {
                "type": "object",
                "additionalProperties": {"type": "integer", "minimum": 0},
            },
            "info": {"$ref": "info.schema.json"},
            "extensions": {"type": "object"},
            "extras": {},
            "class": {"type": "string"},
        },
        "required": ["a", "info"],
    },
    "info.schema.json": {
        "title": "Info",
        "type": "object",
        "description": "Details.",
        "properties": {"version": {"type": "string"}},
        "required": ["version"],
    },
}


@pytest.fixture
def schema_dir(tmp_path):
    for name, schema in SCHEMAS.items():
        (tmp_path / name).write_text(json.dumps(schema), encoding="utf-8")
    return tmp_path


@pytest.fixture
def module(schema_dir, import_source):
    source = generate_source(schema_dir, "scene.schema.json")
    return import_source(source, "gltfgen_test_scene")


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Mesh Primitive", "MeshPrimitive"),
        ("Sampler wrapS", "SamplerWrapS"),
        ("glTF", "GlTF"),
        ("glTF Child of Root Property", "GlTFChildOfRootProperty"),
        ("3D thing", "T3DThing"),
        ("", "Model"),
    ],
)
def test_class_name(title, expected):
    assert class_name(title) == expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("byteOffset", "byte_offset"),
        ("KHR_materials_unlit", "khr_materials_unlit"),
        ("class", "class_"),
        ("aspectRatio", "aspect_ratio"),
        ("x", "x"),
    ],
)
def test_field_name(key, expected):
    assert field_name(key) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("UNSIGNED_BYTE", "UNSIGNED_BYTE"),
        ("image/jpeg", "IMAGE_JPEG"),
        ("translation", "TRANSLATION"),
        ("5126", "VALUE_5126"),
    ],
)
def test_member_name(name, expected):
    assert member_name(name) == expected


def test_type_expressions():
    registry = TypeRegistry()
    registry.register("Info", StructDefinition("Info"))
    emitter = Emitter(registry)

    assert emitter.type_expression(Array(NUMBER, 3, 3)) == "Tuple[float, float, float]"
    assert emitter.type_expression(Array(NUMBER)) == "Tuple[float, ...]"
    assert emitter.type_expression(Array(NUMBER, 1, 16)) == "Tuple[float, ...]"
    assert emitter.type_expression(Map(Primitive(PrimitiveKind.INTEGER))) == "Dict[str, int]"
    assert emitter.type_expression(Array(StructRef(0))) == "Tuple[Info, ...]"
    assert emitter.type_expression(Unknown()) == "Any"
    assert emitter.type_expression(PassthroughExtension()) == "Any"


def test_codec_expressions():
    emitter = Emitter(TypeRegistry())
    assert emitter.codec_expression(Primitive(PrimitiveKind.INTEGER)) == "_rt.integer()"
    assert emitter.codec_expression(
        Primitive(PrimitiveKind.INTEGER, minimum=0)) == "_rt.integer(0)"
    assert emitter.codec_expression(
        Primitive(PrimitiveKind.INTEGER, 4, 252)) == "_rt.integer(4, 252)"
    assert emitter.codec_expression(Array(NUMBER, 3, 3)) == "_rt.array(_rt.NUMBER, 3, 3)"
    assert emitter.codec_expression(Array(NUMBER, 1)) == "_rt.array(_rt.NUMBER, 1)"
    assert emitter.codec_expression(Array(NUMBER)) == "_rt.array(_rt.NUMBER)"
    assert emitter.codec_expression(Unknown()) == "_rt.PASSTHROUGH"


def test_deterministic(schema_dir):
    """Compiling the same tree twice gives byte-identical source."""
    first = generate_source(schema_dir, "scene.schema.json")
    second = generate_source(schema_dir, "scene.schema.json")
    assert first == second
    assert first.startswith("# Generated by gltfgen from scene.schema.json.")


def test_source_layout(schema_dir):
    source = generate_source(schema_dir, "scene.schema.json")
    # enums come before the structs, dependencies before their users
    assert source.index("class SceneMode(enum.IntEnum):") < source.index("class Info:")
    assert source.index("class Info:") < source.index("class Scene:")
    assert "class SceneAlphaMode(str, enum.Enum):" in source
    assert "    A = 1\n    B = 2\n" in source
    assert "    OPAQUE = 'OPAQUE'" in source
    assert "    # Cut out below a threshold.\n    MASK = 'MASK'" in source
    assert "translation: Optional[Tuple[float, float, float]]" in source
    assert "    b: Tuple[float, ...] = _rt.optional('b', _rt.array(_rt.NUMBER))" in source
    assert "attributes: Dict[str, int] = _rt.optional('attributes', _rt.mapping(_rt.integer(0)))" in source
    assert "    a: int = _rt.required('a', _rt.integer(0, 10))" in source
    assert "    extensions: Any = _rt.optional('extensions', _rt.PASSTHROUGH)" in source
    assert "class_: Optional[str] = _rt.optional('class', _rt.STRING)" in source


def test_diagnostics(schema_dir, caplog):
    emitter = compile_schema(schema_dir, "scene.schema.json").emitter()
    with caplog.at_level(logging.DEBUG, logger="gltfgen.emitter"):
        emitter.emit()
    messages = [str(d) for d in emitter.diagnostics]
    assert "Scene.extras: untyped schema, kept as raw JSON" in messages
    assert "Scene.extensions: extension slot, kept as raw JSON" in messages
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1

    # diagnostics are not duplicated by emitting twice
    emitter.emit()
    assert len(emitter.diagnostics) == 2


def test_duplicate_names():
    registry = TypeRegistry()
    registry.add_enum(EnumDefinition(
        title="Thing Kind",
        kind=PrimitiveKind.INTEGER,
        options=(EnumOption("Same", 1), EnumOption("Same", 2)),
    ))
    registry.register("Thing Kind", StructDefinition(
        "Thing Kind",
        properties=(
            NamedProperty("fooBar", NUMBER),
            NamedProperty("foo_bar", NUMBER),
        ),
    ))
    emitter = Emitter(registry)
    source = emitter.emit()

    # the struct keeps the plain name, the enum yields
    assert "class ThingKind:" in source
    assert "class ThingKind_2(enum.IntEnum):" in source
    assert "    SAME = 1\n    SAME_2 = 2" in source
    assert "    foo_bar_2: Optional[float]" in source
    assert len(emitter.diagnostics) == 3


def test_number_enum_sentence_names():
    registry = TypeRegistry()
    registry.add_enum(EnumDefinition(
        title="Scale",
        kind=PrimitiveKind.NUMBER,
        options=(EnumOption("Half size", 0.5), EnumOption("Placeholder", 1.0)),
    ))
    source = Emitter(registry).emit()
    assert "class Scale(float, enum.Enum):" in source
    assert "    VALUE_0_5 = 0.5" in source
    assert "    PLACEHOLDER = 1.0" in source


def test_built_module(module):
    assert issubclass(module.SceneMode, enum.IntEnum)
    assert module.SceneMode.A == 1
    assert module.SceneMode.B == 2
    assert len(module.SceneMode) == 2
    assert module.SceneAlphaMode.MASK == "MASK"
    assert module.Scene.__doc__ == "A tiny scene."
    assert dataclasses.is_dataclass(module.Scene)
    assert set(runtime.field_specs(module.Scene)) == {
        "a", "b", "translation", "mode", "alpha_mode", "attributes",
        "info", "extensions", "extras", "class_"}


def test_decode_defaults(module):
    """Absent optional fields get their defaults."""
    scene = module.Scene.from_json({"a": 3, "info": {"version": "2.0"}})
    assert scene.a == 3
    assert scene.info == module.Info(version="2.0")
    assert scene.b == ()
    assert scene.attributes == {}
    assert scene.translation is None
    assert scene.mode is None
    assert scene.extensions is None


def test_decode_values(module):
    scene = module.Scene.from_json({
        "a": 10,
        "b": [1, 2.5],
        "translation": [0, 1, 2],
        "mode": 2,
        "alphaMode": "MASK",
        "attributes": {"POSITION": 0, "NORMAL": 1},
        "info": {"version": "2.0", "unknown": True},
        "extensions": {"KHR_x": {"y": 1}},
        "extras": [1, "two"],
        "class": "c",
    })
    assert scene.b == (1.0, 2.5)
    assert scene.translation == (0.0, 1.0, 2.0)
    assert scene.mode is module.SceneMode.B
    assert scene.alpha_mode is module.SceneAlphaMode.MASK
    assert scene.attributes == {"POSITION": 0, "NORMAL": 1}
    assert scene.extensions == {"KHR_x": {"y": 1}}
    assert scene.extras == [1, "two"]
    assert scene.class_ == "c"

    with pytest.raises(dataclasses.FrozenInstanceError):
        scene.a = 4


def test_decode_required_missing(module):
    with pytest.raises(MissingField) as exc:
        module.Scene.from_json({"info": {"version": "2.0"}})
    assert "'a'" in str(exc.value)

    # missing fields in nested objects carry their location
    with pytest.raises(MissingField) as exc:
        module.Scene.from_json({"a": 1, "info": {}})
    assert exc.value.path == "$.info"
    assert runtime.try_decode(module.Scene, {"a": 1, "info": {}}) is None


@pytest.mark.parametrize(
    "value",
    [
        {"a": 11, "info": {"version": "2.0"}},
        {"a": -1, "info": {"version": "2.0"}},
        {"a": True, "info": {"version": "2.0"}},
        {"a": "1", "info": {"version": "2.0"}},
        {"a": 1, "info": []},
        [],
    ],
)
def test_decode_required_invalid(module, value):
    with pytest.raises(DecodeError):
        runtime.decode(module.Scene, value)


@pytest.mark.parametrize(
    "field, value",
    [
        ("translation", [1, 2]),
        ("translation", [1, 2, 3, 4]),
        ("mode", 3),
        ("alphaMode", "BLEND"),
        ("b", "no"),
        ("attributes", {"POSITION": -1}),
    ],
)
def test_decode_optional_invalid(module, field, value, caplog):
    """An optional field that does not decode falls back to its default."""
    with caplog.at_level(logging.WARNING, logger="gltfgen.runtime"):
        scene = module.Scene.from_json({"a": 1, "info": {"version": "2.0"}, field: value})
    attribute = {"alphaMode": "alpha_mode"}.get(field, field)
    assert getattr(scene, attribute) == getattr(
        module.Scene.from_json({"a": 1, "info": {"version": "2.0"}}), attribute)
    assert any(field in r.getMessage() for r in caplog.records)
