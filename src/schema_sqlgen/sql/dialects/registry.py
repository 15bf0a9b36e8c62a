"""Dialect registry: capability bundles (with their type tables) by name."""

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from ..core.type_rules import TypeRule
from .base import DialectCapability


class UnknownDialectError(KeyError):
    """Raised when a dialect name is not registered."""


_DIALECT_REGISTRY: Dict[str, DialectCapability] = {}


def register_dialect(
    capability: DialectCapability, type_map: Optional[Mapping[str, TypeRule]] = None
) -> DialectCapability:
    """
    Register a dialect bundle.

    When ``type_map`` is given it is attached to the stored bundle, replacing
    the bundle's own table. Returns the bundle as registered.
    """
    name = capability.name.lower()
    if name in _DIALECT_REGISTRY:
        raise ValueError(
            f"Dialect '{name}' is already registered. "
            "Use a different name or derive a variant with dataclasses.replace."
        )
    if type_map is not None:
        capability = replace(capability, type_map=MappingProxyType(dict(type_map)))
    _DIALECT_REGISTRY[name] = capability
    return capability


def get_dialect(name: str) -> DialectCapability:
    """Retrieve a dialect bundle by name (case-insensitive)."""
    key = name.strip().lower()
    if key not in _DIALECT_REGISTRY:
        raise UnknownDialectError(
            f"Dialect '{name}' not found in registry. Available: {list_dialects()}"
        )
    return _DIALECT_REGISTRY[key]


def get_type_map(name: str) -> Mapping[str, TypeRule]:
    """Retrieve the type table for a registered dialect."""
    return get_dialect(name).type_map


def unregister_dialect(name: str) -> None:
    """Remove a dialect from the registry."""
    del _DIALECT_REGISTRY[get_dialect(name).name.lower()]


def list_dialects() -> List[str]:
    """List all registered dialect names."""
    return sorted(_DIALECT_REGISTRY.keys())


__all__ = [
    "UnknownDialectError",
    "register_dialect",
    "unregister_dialect",
    "get_dialect",
    "get_type_map",
    "list_dialects",
]
