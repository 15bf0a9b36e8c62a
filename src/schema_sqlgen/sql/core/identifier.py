"""
SQL identifier handling utilities.

Quoting, schema qualification and constraint-name policy for generated DDL.
Dialects build their escape function from ``escape_identifier``; the writers
never quote identifiers any other way.
"""

from typing import Callable, Optional

DEFAULT_MAX_IDENTIFIER_LENGTH = 128

# Name used when a constraint arrives without one
FALLBACK_CONSTRAINT_NAME = "CON"


def _is_escaped(name: str, open_quote: str, close_quote: str) -> bool:
    if len(name) < 2 or not (name.startswith(open_quote) and name.endswith(close_quote)):
        return False
    inner = name[len(open_quote) : -len(close_quote)]
    return close_quote not in inner.replace(close_quote * 2, "")


def escape_identifier(
    name: str, open_quote: str = '"', close_quote: Optional[str] = None
) -> str:
    """
    Quote a SQL identifier (table, column or constraint name).

    Embedded closing quotes are doubled. A name that is already a valid quoted
    identifier (wrapped in the quote pair, every inner closing quote doubled)
    is returned as is, so escaping twice never double-quotes.

    Args:
        name: The identifier to quote
        open_quote: Opening quote character
        close_quote: Closing quote character (defaults to ``open_quote``)

    Returns:
        Properly quoted identifier

    Examples:
        >>> escape_identifier("ORDERS")
        '"ORDERS"'
        >>> escape_identifier('"ORDERS"')
        '"ORDERS"'
        >>> escape_identifier('column"name')
        '"column""name"'
        >>> escape_identifier("Order Details", "[", "]")
        '[Order Details]'
        >>> escape_identifier("[a]b]", "[", "]")
        '[[a]]b]]]'
    """
    close_quote = close_quote or open_quote
    if _is_escaped(name, open_quote, close_quote):
        return name
    escaped = name.replace(close_quote, close_quote * 2)
    return f"{open_quote}{escaped}{close_quote}"


def qualify(
    escape: Callable[[str], str],
    name: str,
    schema: Optional[str] = None,
    include_schema: bool = False,
) -> str:
    """
    Escape a name, prefixing the escaped schema when qualification is on.

    Args:
        escape: Dialect escape function
        name: Object name
        schema: Owning schema (may be empty)
        include_schema: Caller's schema-qualification setting

    Returns:
        ``escape(schema) + "." + escape(name)`` or just ``escape(name)``

    Examples:
        >>> qualify(escape_identifier, "ORDERS", "SALES", include_schema=True)
        '"SALES"."ORDERS"'
        >>> qualify(escape_identifier, "ORDERS", "SALES")
        '"ORDERS"'
    """
    if include_schema and schema:
        return f"{escape(schema)}.{escape(name)}"
    return escape(name)


def resolve_constraint_name(
    name: Optional[str], max_length: int = DEFAULT_MAX_IDENTIFIER_LENGTH
) -> str:
    """
    Apply the constraint naming policy.

    Empty names become ``"CON"``. Names longer than ``max_length`` are cut to
    ``max_length`` characters; collisions this may create are left to the
    caller.

    Examples:
        >>> resolve_constraint_name("")
        'CON'
        >>> resolve_constraint_name("FK_ORDER_CUSTOMER", max_length=8)
        'FK_ORDER'
    """
    if not name:
        return FALLBACK_CONSTRAINT_NAME
    # Translated names may exceed the target limit
    if len(name) > max_length:
        return name[:max_length]
    return name


__all__ = [
    "DEFAULT_MAX_IDENTIFIER_LENGTH",
    "FALLBACK_CONSTRAINT_NAME",
    "escape_identifier",
    "qualify",
    "resolve_constraint_name",
]
