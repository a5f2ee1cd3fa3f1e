"""Generator capability and the two constructor shapes."""
from __future__ import annotations

from typing import Any, ClassVar, Optional, Protocol

from levelbuilder.builder.registry import FactoryShape
from levelbuilder.builder.schema import SpriteDescriptor


class MapFeatureManager(Protocol):
    """Receives placements from generators. Owned by the hosting editor."""

    def place(self, code: str, x: float, y: float, sprite: Optional[dict[str, Any]] = None) -> Any: ...


class Generator(Protocol):
    def generate(self, manager: MapFeatureManager) -> Any: ...


class CoordinateGenerator:
    """Generator constructed from coordinates only: ``cls(x, y)``."""

    shape: ClassVar[FactoryShape] = FactoryShape.COORDS
    code: ClassVar[str] = "coordinate"

    def __init__(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def generate(self, manager: MapFeatureManager) -> Any:
        return manager.place(self.code, self.x, self.y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


class SpriteGenerator:
    """Generator constructed with a sprite: ``cls(x, y, descriptor)``."""

    shape: ClassVar[FactoryShape] = FactoryShape.SPRITE

    def __init__(self, x: float, y: float, descriptor: SpriteDescriptor) -> None:
        self.x = float(x)
        self.y = float(y)
        self.descriptor = descriptor

    @property
    def code(self) -> str:
        return self.descriptor.code

    def generate(self, manager: MapFeatureManager) -> Any:
        return manager.place(self.code, self.x, self.y, sprite=self.descriptor.export()["sprite"])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, path={self.descriptor.path!r})"
