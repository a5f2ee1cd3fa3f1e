"""Map feature generators.

Available generators (registered on import of ``features``):
- SpawnPoint, ExitDoor: built from coordinates only
- Decoration, Wall, Torch: built from coordinates and a sprite descriptor
"""

from .base import CoordinateGenerator, Generator, MapFeatureManager, SpriteGenerator
from .features import Decoration, ExitDoor, SpawnPoint, Torch, Wall
from .manager import FeatureLog, PlacedFeature

__all__ = [
    # Capability
    "Generator",
    "MapFeatureManager",
    "CoordinateGenerator",
    "SpriteGenerator",
    # Generators
    "SpawnPoint",
    "ExitDoor",
    "Decoration",
    "Wall",
    "Torch",
    # Managers
    "FeatureLog",
    "PlacedFeature",
]
