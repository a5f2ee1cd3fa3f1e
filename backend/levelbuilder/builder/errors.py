"""Failures surfaced by GeneratorSpec.build() and the generator registry."""
from __future__ import annotations


class GeneratorSpecError(ValueError):
  """Base class for spec resolution and construction failures."""


class ResolutionError(GeneratorSpecError):
  """The type identifier is unset, malformed or not registered."""

  def __init__(self, identifier: object, available: list[str] | None = None, reason: str | None = None):
    self.identifier = identifier
    self.available = list(available or [])
    if reason is None:
      reason = f"Unknown generator: {identifier!r}"
    if self.available:
      reason = f"{reason}. Available: {', '.join(self.available)}"
    super().__init__(reason)


class ConstructionError(GeneratorSpecError):
  """The resolved generator does not accept the selected argument shape."""

  def __init__(self, identifier: str, expected: str, actual: str, detail: str | None = None):
    self.identifier = identifier
    self.expected = expected
    self.actual = actual
    message = f"Generator {identifier!r} does not accept the {expected!r} shape (registered as {actual!r})"
    if detail:
      message = f"{message}: {detail}"
    super().__init__(message)
