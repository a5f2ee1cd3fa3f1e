"""In-memory map feature manager for headless builds and tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from levelbuilder.logging_utils import get_logger

logger = get_logger("feature_log")


@dataclass
class PlacedFeature:
    code: str
    x: float
    y: float
    sprite: Optional[dict[str, Any]] = None


@dataclass
class FeatureLog:
    """Records every placement in call order."""

    features: list[PlacedFeature] = field(default_factory=list)

    def place(self, code: str, x: float, y: float, sprite: Optional[dict[str, Any]] = None) -> PlacedFeature:
        feature = PlacedFeature(code=code, x=x, y=y, sprite=sprite)
        self.features.append(feature)
        logger.debug("Placed %s at (%s, %s)", code, x, y)
        return feature

    def codes(self) -> list[str]:
        return [f.code for f in self.features]

    def __len__(self) -> int:
        return len(self.features)
