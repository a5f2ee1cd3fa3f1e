"""Built-in map feature generators. Importing this module registers them."""
from __future__ import annotations

from typing import Any

from levelbuilder.builder.registry import register_generator
from levelbuilder.generators.base import CoordinateGenerator, MapFeatureManager, SpriteGenerator


@register_generator
class SpawnPoint(CoordinateGenerator):
    code = "spawn"


@register_generator
class ExitDoor(CoordinateGenerator):
    code = "exit"


@register_generator
class Decoration(SpriteGenerator):
    pass


@register_generator
class Wall(SpriteGenerator):
    """Places one sprite tile per unit of width, left to right from ``x``."""

    def generate(self, manager: MapFeatureManager) -> list[Any]:
        sprite = self.descriptor.export()["sprite"]
        columns = max(1, self.descriptor.width)
        return [manager.place(self.code, self.x + col, self.y, sprite=sprite) for col in range(columns)]


@register_generator
class Torch(SpriteGenerator):
    """Sprite plus a light source at the light record's coordinates, when present."""

    def generate(self, manager: MapFeatureManager) -> list[Any]:
        placed = [super().generate(manager)]
        light = self.descriptor.lights
        if light is not None:
            placed.append(manager.place("light", float(light["x"]), float(light["y"]), sprite={"lights": dict(light)}))
        return placed


__all__ = ["SpawnPoint", "ExitDoor", "Decoration", "Wall", "Torch"]
