"""Deferred generator construction.

This module provides:
- Light and sprite export records (schema.py)
- Portable identifiers and display names (identifiers.py)
- The two-shape generator registry (registry.py)
- GeneratorSpec, the persistable builder record (spec.py)
"""

from levelbuilder.builder.errors import ConstructionError, GeneratorSpecError, ResolutionError
from levelbuilder.builder.identifiers import display_name, type_identifier
from levelbuilder.builder.registry import (
    REGISTRY,
    FactoryShape,
    GeneratorEntry,
    GeneratorRegistry,
    load_generators,
    register_generator,
)
from levelbuilder.builder.schema import LightSpec, SpriteDescriptor
from levelbuilder.builder.spec import GeneratorSpec

__all__ = [
    # Errors
    "GeneratorSpecError",
    "ResolutionError",
    "ConstructionError",
    # Identifiers
    "type_identifier",
    "display_name",
    # Registry
    "REGISTRY",
    "FactoryShape",
    "GeneratorEntry",
    "GeneratorRegistry",
    "load_generators",
    "register_generator",
    # Records
    "LightSpec",
    "SpriteDescriptor",
    "GeneratorSpec",
]
