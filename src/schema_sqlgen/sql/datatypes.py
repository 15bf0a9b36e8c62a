"""
Data type mapping engine.

Translates a column's declared type token into the type syntax of a target
dialect, using the type table carried by the dialect's capability bundle.

Lookup is an exact, case-sensitive match on the token. Tokens a dialect does
not list are returned unchanged: an unfamiliar token is usually already a
native type of the target (introspection ran against the same engine) and
rewriting it would do more harm than passing it through.

Usage:
    >>> from schema_sqlgen.model import Column
    >>> from schema_sqlgen.sql.datatypes import map_type
    >>> map_type(Column("AMOUNT", "NUMBER", precision=10, scale=2), "db2")
    'NUMERIC (10,2)'
    >>> map_type(Column("FEE", "MONEY"), "db2")
    'DECIMAL(19,4)'
"""

from __future__ import annotations

from typing import Union

from schema_sqlgen.model import Column
from schema_sqlgen.utils.logging import get_logger

from .core.type_rules import FixedLiteral, Parameterized, Rename, Sized, TypeRule
from .dialects import DialectCapability, get_dialect

logger = get_logger(__name__)


def map_type(column: Column, dialect: Union[str, DialectCapability]) -> str:
    """
    Map a column's declared type to the dialect's type declaration.

    Args:
        column: Column carrying ``data_type`` and optional precision, scale
            and length
        dialect: Registered dialect name or capability bundle; a bundle is
            used as given, so variants derived with ``dataclasses.replace``
            map with the table of the bundle they came from

    Returns:
        Type declaration without nullability; the original token when the
        dialect has no rule for it; an empty string when the column has no
        declared type

    Raises:
        UnknownDialectError: If a dialect name is not registered
    """
    capability = dialect if isinstance(dialect, DialectCapability) else get_dialect(dialect)

    token = column.data_type
    if not token:
        return ""

    rule = capability.type_map.get(token)
    if rule is None:
        logger.debug(
            "data_type_passed_through",
            dialect=capability.name,
            column=column.name,
            data_type=token,
        )
        return token
    return rule.render(column)


__all__ = [
    "map_type",
    "TypeRule",
    "Rename",
    "Parameterized",
    "FixedLiteral",
    "Sized",
]
