"""
Output rules for the per-dialect data type tables.

Each dialect maps a declared type token to one of these rules. Rules render
from the column's precision, scale and length only; nullability is written
elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from schema_sqlgen.model import Column


class TypeRule(Protocol):
    """Protocol for data type output rules."""

    def render(self, column: Column) -> str: ...


@dataclass(frozen=True)
class Rename:
    """Token maps to a fixed type name, e.g. ``INT`` -> ``INTEGER``."""

    literal: str

    def render(self, column: Column) -> str:
        return self.literal


@dataclass(frozen=True)
class Parameterized:
    """
    Numeric type written as ``"<NAME> (<precision>,<scale>)"``.

    Note the space before the parenthesis and none after the comma. Without a
    precision only the name is written; without a scale only the precision.
    """

    name: str

    def render(self, column: Column) -> str:
        if column.precision is None:
            return self.name
        if column.scale is None:
            return f"{self.name} ({column.precision})"
        return f"{self.name} ({column.precision},{column.scale})"


@dataclass(frozen=True)
class FixedLiteral:
    """
    Constant declaration with its own precision/scale, e.g. ``DECIMAL(19,4)``.

    The column's precision and scale are ignored. The literal is written
    exactly as given (no space before the parenthesis).
    """

    literal: str

    def render(self, column: Column) -> str:
        return self.literal


@dataclass(frozen=True)
class Sized:
    """
    Character or binary type written as ``"<NAME> (<length>)"``.

    Introspection reports unbounded columns (``VARCHAR(MAX)``) as length -1;
    those and columns without a length use ``unbounded`` when set, else the
    bare name.
    """

    name: str
    unbounded: Optional[str] = None

    def render(self, column: Column) -> str:
        if column.length is None or column.length <= 0:
            return self.unbounded or self.name
        return f"{self.name} ({column.length})"


__all__ = ["TypeRule", "Rename", "Parameterized", "FixedLiteral", "Sized"]
