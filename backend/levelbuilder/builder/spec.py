"""GeneratorSpec: persistable parameters for deferred generator construction.

An editor owns one spec per placement. It resets the spec with a target
generator, configures it through the ``by_*`` calls, and finally calls
``build()`` to get the generator. Every field is a primitive, a string or the
nested light record, so the spec survives save/reload of the editing session;
the generator class is looked up again at build time.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field

from levelbuilder.builder.errors import ConstructionError, ResolutionError
from levelbuilder.builder.identifiers import display_name, type_identifier
from levelbuilder.builder.registry import REGISTRY, FactoryShape, GeneratorRegistry
from levelbuilder.builder.schema import LightSpec, SpriteDescriptor
from levelbuilder.logging_utils import get_logger

logger = get_logger("spec")


def _check_arity(identifier: str, factory: Callable[..., Any], args: tuple[Any, ...], expected: FactoryShape) -> None:
  """Raise ConstructionError when ``factory`` cannot be called with ``args``."""
  try:
    signature = inspect.signature(factory)
  except (TypeError, ValueError):
    # No introspectable signature; the call itself decides
    return
  try:
    signature.bind(*args)
  except TypeError as e:
    logger.warning("Generator %s rejects the %s shape: %s", identifier, expected.value, e)
    raise ConstructionError(identifier, expected.value, expected.value, detail=str(e)) from e


class GeneratorSpec(BaseModel):
  """Mutable builder record. Configuration calls return the spec for chaining.

  Size coupling: ``by_width`` mirrors its value into ``height`` only while
  height is still 0, and ``by_height`` mirrors into ``width`` only while width
  is still 0. An explicit call on the other dimension afterwards overrides the
  mirrored value and never couples back.
  """
  x: float = 0.0
  y: float = 0.0
  width: int = Field(0, description="Sprite width; 0 means unset.")
  height: int = Field(0, description="Sprite height; 0 means unset.")
  path: Optional[str] = Field(None, description="Sprite asset path; unset/empty selects the (x, y) shape.")
  has_lights: bool = False
  lights: LightSpec = Field(default_factory=LightSpec, description="Meaningful only when has_lights is set.")
  type_name: Optional[str] = Field(None, description="Portable identifier of the generator to build.")

  # ----- lifecycle -----

  def reset(self, target_type: type | str | None) -> "GeneratorSpec":
    self.x = 0.0
    self.y = 0.0
    self.width = 0
    self.height = 0
    self.path = None
    self.has_lights = False
    self.lights = LightSpec()
    if target_type is None:
      self.type_name = None
    elif isinstance(target_type, str):
      self.type_name = target_type or None
    else:
      self.type_name = type_identifier(target_type)
    return self

  def copy_from(self, other: "GeneratorSpec") -> "GeneratorSpec":
    self.x = other.x
    self.y = other.y
    self.width = other.width
    self.height = other.height
    self.path = other.path
    self.type_name = other.type_name
    self.has_lights = other.has_lights
    self.lights = other.lights.model_copy(deep=True)
    return self

  # ----- configuration -----

  def by_coord(self, x: float, y: float) -> "GeneratorSpec":
    self.x = x
    self.y = y
    return self

  def by_light_coord(self, x: float, y: float) -> "GeneratorSpec":
    # Leaves has_lights untouched; before by_light_data this edits the default record.
    self.lights.x = x
    self.lights.y = y
    return self

  def by_path(self, path: Optional[str]) -> "GeneratorSpec":
    self.path = path
    return self

  def by_width(self, width: int) -> "GeneratorSpec":
    self.width = width
    if self.height == 0:
      self.height = width
    return self

  def by_height(self, height: int) -> "GeneratorSpec":
    self.height = height
    if self.width == 0:
      self.width = height
    return self

  def by_light_data(self, data: LightSpec) -> "GeneratorSpec":
    self.lights = data.model_copy(deep=True)
    self.has_lights = True
    return self

  # ----- export / construction -----

  @property
  def needs_sprite(self) -> bool:
    return bool(self.path)

  def light_fragment(self) -> Optional[dict[str, Any]]:
    if not self.has_lights:
      return None
    return self.lights.export()

  def sprite_descriptor(self) -> SpriteDescriptor:
    return SpriteDescriptor(
      code=display_name(self.type_name or ""),
      width=self.width,
      height=self.height,
      lights=self.light_fragment(),
      path=self.path or "",
    )

  def build(self, registry: GeneratorRegistry | None = None) -> Any:
    """Resolve ``type_name`` and construct the generator.

    Without a path the factory receives ``(x, y)``; with one it receives
    ``(x, y, descriptor)``. No other shape is tried.

    Raises:
      ResolutionError: ``type_name`` does not name a registered generator.
      ConstructionError: the generator does not take the selected shape.
    """
    if registry is None:
      registry = REGISTRY
    try:
      entry = registry.resolve(self.type_name)
    except ResolutionError:
      logger.warning("Cannot resolve generator %r", self.type_name)
      raise

    expected = FactoryShape.SPRITE if self.needs_sprite else FactoryShape.COORDS
    if entry.shape is not expected:
      logger.warning("Shape mismatch for %s: registered %s, spec needs %s", entry.identifier, entry.shape.value, expected.value)
      raise ConstructionError(entry.identifier, expected.value, entry.shape.value)

    if expected is FactoryShape.COORDS:
      args: tuple[Any, ...] = (self.x, self.y)
    else:
      args = (self.x, self.y, self.sprite_descriptor())
    logger.debug("Building %s with %s shape", entry.identifier, expected.value)
    _check_arity(entry.identifier, entry.factory, args, expected)
    return entry.factory(*args)

  # ----- persistence -----

  def dumps(self) -> str:
    return self.model_dump_json()

  @classmethod
  def loads(cls, text: str | bytes) -> "GeneratorSpec":
    return cls.model_validate_json(text)


__all__ = ["GeneratorSpec"]
