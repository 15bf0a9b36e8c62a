"""
Dialect capability bundle.

A dialect is a value, not a subclass: the writers are given a
``DialectCapability`` and consult it for escaping, statement termination,
identifier length, the unique-constraint template and the type table.
Variants of a built-in dialect are derived with ``dataclasses.replace`` and
keep the type table of the bundle they were derived from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from types import MappingProxyType
from typing import Callable, Mapping

from ..core.identifier import DEFAULT_MAX_IDENTIFIER_LENGTH, escape_identifier
from ..core.type_rules import TypeRule

DEFAULT_UNIQUE_CONSTRAINT_FORMAT = (
    "ALTER TABLE {table} ADD CONSTRAINT {name} UNIQUE ({columns})"
)


def double_quote_escape(name: str) -> str:
    """ANSI identifier quoting: ``"name"``."""
    return escape_identifier(name, '"')


bracket_escape: Callable[[str], str] = partial(escape_identifier, open_quote="[", close_quote="]")
backtick_escape: Callable[[str], str] = partial(escape_identifier, open_quote="`")


@dataclass(frozen=True)
class DialectCapability:
    """
    Per-dialect behaviors consulted by the DDL writers.

    Attributes:
        name: Registry name (lowercase)
        escape: Identifier escape function
        line_ending: Token appended to every statement
        max_identifier_length: Longest constraint name the engine accepts
        unique_constraint_format: Template with ``{table}``, ``{name}`` and
            ``{columns}`` placeholders
        type_map: Declared type token to ``TypeRule``; filled in by
            ``register_dialect``
    """

    name: str
    escape: Callable[[str], str] = double_quote_escape
    line_ending: str = ";"
    max_identifier_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
    unique_constraint_format: str = DEFAULT_UNIQUE_CONSTRAINT_FORMAT
    type_map: Mapping[str, TypeRule] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )


__all__ = [
    "DEFAULT_UNIQUE_CONSTRAINT_FORMAT",
    "DialectCapability",
    "double_quote_escape",
    "bracket_escape",
    "backtick_escape",
]
