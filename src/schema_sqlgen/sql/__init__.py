"""
SQL module for dialect-aware DDL generation.

Provides identifier quoting and naming policy, dialect capability bundles,
column type mapping and constraint statement builders.
"""

from .core.identifier import escape_identifier, qualify, resolve_constraint_name
from .datatypes import map_type
from .dialects import (
    DialectCapability,
    UnknownDialectError,
    get_dialect,
    list_dialects,
    register_dialect,
)
from .operations.constraints import ConstraintWriter, ConstraintWriterError

__all__ = [
    "escape_identifier",
    "qualify",
    "resolve_constraint_name",
    "map_type",
    "DialectCapability",
    "UnknownDialectError",
    "get_dialect",
    "list_dialects",
    "register_dialect",
    "ConstraintWriter",
    "ConstraintWriterError",
]
