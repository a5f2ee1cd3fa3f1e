from __future__ import annotations

import pytest

from levelbuilder.builder.errors import ResolutionError
from levelbuilder.builder.identifiers import display_name, type_identifier
from levelbuilder.builder.registry import (
    REGISTRY,
    FactoryShape,
    GeneratorRegistry,
    load_generators,
    register_generator,
)
from levelbuilder.builder.spec import GeneratorSpec
from levelbuilder.generators import CoordinateGenerator, SpawnPoint, SpriteGenerator, Wall


def test_display_name_strips_qualifier_and_module():
    assert display_name("levelbuilder.generators.features.Torch, editor") == "Torch"
    assert display_name("Generators.Wall, Assembly-CSharp-Editor, Version=0.0.0.0") == "Wall"
    assert display_name("Torch") == "Torch"


def test_type_identifier_is_module_qualified():
    assert type_identifier(Wall) == "levelbuilder.generators.features.Wall"


def test_register_class_uses_declared_shape():
    registry = GeneratorRegistry()

    @register_generator(registry=registry)
    class Beacon(SpriteGenerator):
        pass

    entry = registry.resolve(type_identifier(Beacon))
    assert entry.shape is FactoryShape.SPRITE
    assert entry.factory is Beacon
    assert len(registry) == 1


def test_register_class_shape_override():
    registry = GeneratorRegistry()
    entry = registry.register_class(CoordinateGenerator, FactoryShape.SPRITE)
    assert entry.shape is FactoryShape.SPRITE


def test_register_class_without_shape_is_rejected():
    class Plain:
        pass

    with pytest.raises(ValueError):
        GeneratorRegistry().register_class(Plain)


def test_resolve_unknown_lists_available():
    registry = GeneratorRegistry()
    registry.register("a.One", object, FactoryShape.COORDS)
    with pytest.raises(ResolutionError) as exc:
        registry.resolve("a.Two")
    assert exc.value.available == ["a.One"]
    assert "a.One" in str(exc.value)


@pytest.mark.parametrize("identifier", [None, "", 42])
def test_resolve_unset_or_malformed(identifier):
    with pytest.raises(ResolutionError):
        GeneratorRegistry().resolve(identifier)


def test_unregister_and_clear():
    registry = GeneratorRegistry()
    registry.register("a.One", object, FactoryShape.COORDS)
    registry.register("a.Two", object, FactoryShape.SPRITE)
    registry.unregister("a.One")
    assert "a.One" not in registry
    assert registry.identifiers() == ["a.Two"]
    registry.clear()
    assert len(registry) == 0


def test_load_generators_registers_builtins():
    identifiers = load_generators()
    for name in ("SpawnPoint", "ExitDoor", "Decoration", "Wall", "Torch"):
        assert f"levelbuilder.generators.features.{name}" in identifiers
    assert REGISTRY.get("levelbuilder.generators.features.ExitDoor").shape is FactoryShape.COORDS


def test_load_generators_unknown_module():
    with pytest.raises(ResolutionError):
        load_generators(["levelbuilder.generators.does_not_exist"])


def test_load_generators_refills_cleared_registry():
    load_generators()
    REGISTRY.clear()
    identifiers = load_generators()
    assert "levelbuilder.generators.features.SpawnPoint" in identifiers
    built = GeneratorSpec().reset(SpawnPoint).by_coord(1.0, 2.0).build()
    assert isinstance(built, SpawnPoint)


def test_load_generators_fills_given_registry():
    registry = GeneratorRegistry()
    identifiers = load_generators(["levelbuilder.generators.features"], registry=registry)
    assert len(registry) == 5
    assert identifiers == registry.identifiers()
    assert registry.resolve("levelbuilder.generators.features.Torch").shape is FactoryShape.SPRITE
