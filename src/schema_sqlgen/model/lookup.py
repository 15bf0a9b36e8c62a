"""Foreign-key target resolution against a borrowed schema handle."""

from __future__ import annotations

from typing import List, Optional

from .core import Constraint, DatabaseSchema


def referenced_columns(
    constraint: Constraint, schema: Optional[DatabaseSchema]
) -> Optional[List[str]]:
    """
    Resolve the target columns of a foreign key.

    Resolution order:
    1. columns already resolved on the constraint itself
    2. the referenced table's key named by ``refers_to_constraint``
       (primary key or unique key)
    3. the referenced table's primary key

    Args:
        constraint: Foreign key constraint
        schema: Schema holding the referenced table (may be None)

    Returns:
        Ordered target column names, or None when the target cannot be found
    """
    if constraint.referenced_columns:
        return list(constraint.referenced_columns)
    if schema is None or not constraint.refers_to_table:
        return None

    table = schema.find_table(constraint.refers_to_table, constraint.refers_to_schema)
    if table is None:
        return None

    keys = [table.primary_key] if table.primary_key else []
    keys.extend(table.unique_keys)
    if constraint.refers_to_constraint:
        for key in keys:
            if key.name == constraint.refers_to_constraint:
                return list(key.columns)

    if table.primary_key is not None and table.primary_key.columns:
        return list(table.primary_key.columns)
    return None


__all__ = ["referenced_columns"]
