"""
Dialect capability provider.

Built-in dialects are registered on import:

    >>> from schema_sqlgen.sql.dialects import get_dialect
    >>> get_dialect("DB2").escape("ORDERS")
    '"ORDERS"'

Adding a dialect means building one ``DialectCapability`` and one type table
and passing both to ``register_dialect``, which stores the bundle with the
table attached.
"""

from . import db2, mysql, oracle, postgresql, sqlserver
from .base import (
    DEFAULT_UNIQUE_CONSTRAINT_FORMAT,
    DialectCapability,
    backtick_escape,
    bracket_escape,
    double_quote_escape,
)
from .registry import (
    UnknownDialectError,
    get_dialect,
    get_type_map,
    list_dialects,
    register_dialect,
    unregister_dialect,
)

for _module in (sqlserver, db2, oracle, mysql, postgresql):
    register_dialect(_module.DIALECT, _module.TYPE_MAP)

__all__ = [
    "DEFAULT_UNIQUE_CONSTRAINT_FORMAT",
    "DialectCapability",
    "double_quote_escape",
    "bracket_escape",
    "backtick_escape",
    "UnknownDialectError",
    "register_dialect",
    "unregister_dialect",
    "get_dialect",
    "get_type_map",
    "list_dialects",
]
