"""
Test the append-only type registry.
"""

import pytest

from gltfgen.items import (
    EnumDefinition,
    EnumOption,
    EnumRef,
    NamedProperty,
    Primitive,
    PrimitiveKind,
    StructDefinition,
    StructRef,
)
from gltfgen.registry import TypeRegistry


def struct(title, *names):
    return StructDefinition(
        title=title,
        properties=tuple(
            NamedProperty(name, Primitive(PrimitiveKind.STRING)) for name in names),
    )


def test_register_returns_fresh_handles():
    registry = TypeRegistry()
    assert registry.register("A", struct("A")) == 0
    assert registry.register("B", struct("B")) == 1
    assert len(registry) == 2
    assert registry.lookup("B") == 1
    assert registry.lookup("C") is None
    assert "A" in registry
    assert "C" not in registry


def test_register_deduplicates_by_title():
    """A second registration keeps the first definition."""
    registry = TypeRegistry()
    first = struct("A", "x")
    assert registry.register("A", first) == 0
    assert registry.register("A", struct("A", "y")) == 0

    assert len(registry.structs) == 1
    assert registry.struct(0) is first


def test_enums_are_not_deduplicated():
    registry = TypeRegistry()
    definition = EnumDefinition(
        title="Sampler wrapS",
        kind=PrimitiveKind.INTEGER,
        options=(EnumOption("REPEAT", 10497),),
    )
    assert registry.add_enum(definition) == 0
    assert registry.add_enum(definition) == 1
    assert registry.enums == (definition, definition)


def test_definition_lookup():
    registry = TypeRegistry()
    s = struct("A")
    e = EnumDefinition(title="E", kind=PrimitiveKind.STRING)
    registry.register("A", s)
    registry.add_enum(e)

    assert registry.definition(StructRef(0)) is s
    assert registry.definition(EnumRef(0)) is e
    with pytest.raises(TypeError):
        registry.definition(Primitive(PrimitiveKind.BOOLEAN))


def test_views_are_snapshots():
    """The structs view cannot be used to mutate the registry."""
    registry = TypeRegistry()
    registry.register("A", struct("A"))
    view = registry.structs
    assert isinstance(view, tuple)
    registry.register("B", struct("B"))
    assert len(view) == 1
    assert len(registry.structs) == 2
