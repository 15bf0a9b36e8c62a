"""Schema model consumed by the DDL writers."""

from .core import Column, Constraint, ConstraintType, DatabaseSchema, Table
from .lookup import referenced_columns

__all__ = [
    "ConstraintType",
    "Column",
    "Constraint",
    "Table",
    "DatabaseSchema",
    "referenced_columns",
]
