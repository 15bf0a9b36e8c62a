"""Core SQL utilities package."""

from .identifier import (
    DEFAULT_MAX_IDENTIFIER_LENGTH,
    FALLBACK_CONSTRAINT_NAME,
    escape_identifier,
    qualify,
    resolve_constraint_name,
)
from .type_rules import FixedLiteral, Parameterized, Rename, Sized, TypeRule

__all__ = [
    "DEFAULT_MAX_IDENTIFIER_LENGTH",
    "FALLBACK_CONSTRAINT_NAME",
    "escape_identifier",
    "qualify",
    "resolve_constraint_name",
    "TypeRule",
    "Rename",
    "Parameterized",
    "FixedLiteral",
    "Sized",
]
