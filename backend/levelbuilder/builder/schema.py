"""Light and sprite records exported into generator construction arguments.

The descriptor layout keeps the short generator code beside a nested
``sprite`` object:

  {"code": "Torch", "sprite": {"width": 4, "height": 4, "lights": {...}, "path": "..."}}
"""
from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel, Field

from levelbuilder.models.settings import get_settings


def _dumps(payload: dict[str, Any]) -> str:
  return json.dumps(payload, indent=get_settings().EXPORT_INDENT)


class LightSpec(BaseModel):
  """Light placement plus parameters that only the generator interprets."""
  x: float = Field(0.0, description="Light x, independent of the owning spec's x.")
  y: float = Field(0.0, description="Light y, independent of the owning spec's y.")
  color: str = Field("#ffffff", description="Hex colour of the light.")
  intensity: float = Field(1.0, ge=0.0, description="Relative brightness.")
  radius: float = Field(1.0, ge=0.0, description="Falloff radius in tiles.")

  def export(self) -> dict[str, Any]:
    return {
      "x": self.x,
      "y": self.y,
      "color": self.color,
      "intensity": self.intensity,
      "radius": self.radius,
    }

  def to_json(self) -> str:
    return _dumps(self.export())


class SpriteDescriptor(BaseModel):
  """Third construction argument for generators that need a sprite."""
  code: str
  width: int = 0
  height: int = 0
  lights: Optional[dict[str, Any]] = Field(None, description="Light fragment, absent when the spec has no lights.")
  path: str

  def export(self) -> dict[str, Any]:
    sprite: dict[str, Any] = {"width": self.width, "height": self.height}
    if self.lights is not None:
      sprite["lights"] = dict(self.lights)
    sprite["path"] = self.path
    return {"code": self.code, "sprite": sprite}

  def to_json(self) -> str:
    return _dumps(self.export())


__all__ = [
  "LightSpec",
  "SpriteDescriptor",
]
