"""
Generator Registry

Maps a portable identifier to a factory with one of two fixed calling
conventions:

- COORDS: factory(x, y)
- SPRITE: factory(x, y, descriptor)

Registration is explicit. Generator modules register on import, and
load_generators() imports the modules named in settings at startup and
registers their generators again into the target registry.
"""
from __future__ import annotations

import importlib
from enum import Enum
from typing import Any, Callable, Iterable

from pydantic import BaseModel

from levelbuilder.builder.errors import ResolutionError
from levelbuilder.builder.identifiers import type_identifier
from levelbuilder.logging_utils import get_logger
from levelbuilder.models.settings import get_settings

logger = get_logger("registry")


class FactoryShape(str, Enum):
    """Argument shapes a generator factory may accept."""

    COORDS = "coords"
    SPRITE = "sprite"


class GeneratorEntry(BaseModel):
    """Metadata for a registered generator."""

    identifier: str
    shape: FactoryShape
    factory: Callable[..., Any]


class GeneratorRegistry:
    """
    Registry of constructable generators keyed by portable identifier.

    Specs store only the identifier; the entry is looked up again on every
    build so a spec saved in one session resolves in the next.
    """

    def __init__(self):
        self._entries: dict[str, GeneratorEntry] = {}

    def register(self, identifier: str, factory: Callable[..., Any], shape: FactoryShape) -> GeneratorEntry:
        """Register (or replace) a factory under an identifier."""
        entry = GeneratorEntry(identifier=identifier, shape=FactoryShape(shape), factory=factory)
        if identifier in self._entries:
            logger.debug("Replacing generator %s", identifier)
        self._entries[identifier] = entry
        logger.debug("Registered generator %s (%s)", identifier, entry.shape.value)
        return entry

    def register_class(self, cls: type, shape: FactoryShape | None = None) -> GeneratorEntry:
        """Register a generator class under its portable identifier.

        The shape defaults to the class' own ``shape`` attribute.
        """
        if shape is None:
            shape = getattr(cls, "shape", None)
        if shape is None:
            raise ValueError(f"{cls.__qualname__} declares no factory shape")
        return self.register(type_identifier(cls), cls, shape)

    def unregister(self, identifier: str) -> None:
        self._entries.pop(identifier, None)

    def get(self, identifier: str) -> GeneratorEntry | None:
        """Get an entry by identifier."""
        return self._entries.get(identifier)

    def resolve(self, identifier: Any) -> GeneratorEntry:
        """
        Look up the entry for an identifier.

        Raises:
            ResolutionError: If the identifier is unset, not a string or unknown
        """
        if identifier is None or identifier == "":
            raise ResolutionError(identifier, reason="Generator identifier is unset")
        if not isinstance(identifier, str):
            raise ResolutionError(identifier, reason=f"Malformed generator identifier: {identifier!r}")
        entry = self._entries.get(identifier.strip())
        if entry is None:
            raise ResolutionError(identifier, available=self.identifiers())
        return entry

    def identifiers(self) -> list[str]:
        return sorted(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# Global registry instance
REGISTRY = GeneratorRegistry()

# Decorated generators per defining module, replayed by load_generators()
_DECLARED: dict[str, list[tuple[type, FactoryShape | None]]] = {}


def register_generator(cls: type | None = None, *, shape: FactoryShape | None = None, registry: GeneratorRegistry | None = None):
    """Class decorator registering a generator in REGISTRY (or ``registry``).

    Usable bare (``@register_generator``) or with arguments. The class is also
    remembered under its module so load_generators() can register it again
    after the registry has been cleared.
    """
    def decorate(target: type) -> type:
        (REGISTRY if registry is None else registry).register_class(target, shape)
        _DECLARED.setdefault(target.__module__, []).append((target, shape))
        return target

    if cls is not None:
        return decorate(cls)
    return decorate


def load_generators(modules: Iterable[str] | None = None, registry: GeneratorRegistry | None = None) -> list[str]:
    """
    Import generator modules and register their generators.

    Registration is repeated on every call, so a cleared registry (or a fresh
    one passed as ``registry``) is filled again from already-imported modules.

    Args:
        modules: Module paths to import; defaults to settings GENERATOR_MODULES
        registry: Registry to fill (default REGISTRY)

    Returns:
        The identifiers registered after loading

    Raises:
        ResolutionError: If a module cannot be imported
    """
    if registry is None:
        registry = REGISTRY
    if modules is None:
        modules = get_settings().GENERATOR_MODULES
    for module_name in modules:
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            logger.warning("Failed to load generator module %s: %s", module_name, e)
            raise ResolutionError(module_name, reason=f"Cannot import generator module {module_name!r}") from e
        declared = _DECLARED.get(module_name, [])
        for cls, shape in declared:
            registry.register_class(cls, shape)
        logger.info("Loaded generator module %s (%d generators)", module_name, len(declared))
    return registry.identifiers()
