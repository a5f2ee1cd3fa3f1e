"""Portable generator identifiers.

Specs persist a plain string rather than a class so that a saved level can be
reopened before the module defining the generator has been imported.
"""
from __future__ import annotations

QUALIFIER_SEPARATOR = ","


def type_identifier(cls: type) -> str:
  return f"{cls.__module__}.{cls.__qualname__}"


def display_name(identifier: str) -> str:
  """Short code for an identifier: drop any qualifier, keep the last dotted part.

  >>> display_name("levelbuilder.generators.features.Torch, editor")
  'Torch'
  """
  head = identifier.split(QUALIFIER_SEPARATOR, 1)[0].strip()
  return head.rsplit(".", 1)[-1]
