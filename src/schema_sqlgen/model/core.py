"""Vendor-neutral schema model read by the DDL writers.

Tables, columns and constraints are populated upstream (usually by schema
introspection) and are treated as read-only by everything in ``schema_sqlgen.sql``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ConstraintType(Enum):
    """Table-level integrity rule kinds."""

    PRIMARY_KEY = "primary_key"
    UNIQUE_KEY = "unique_key"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"


@dataclass
class Column:
    """A table column with its declared (dialect-native) type token."""

    name: str
    data_type: Optional[str] = None
    nullable: bool = True
    precision: Optional[int] = None
    scale: Optional[int] = None
    length: Optional[int] = None


@dataclass
class Constraint:
    """
    A primary key, unique key, foreign key or check constraint.

    Check constraints carry ``expression``. Foreign keys carry
    ``refers_to_table`` and optionally ``refers_to_schema``,
    ``refers_to_constraint`` (the referenced key's name),
    ``referenced_columns`` (already resolved target columns) and the
    ``delete_rule``/``update_rule`` action tokens
    (CASCADE, NO ACTION, SET DEFAULT, SET NULL).
    """

    constraint_type: ConstraintType
    name: Optional[str] = None
    columns: List[str] = field(default_factory=list)
    expression: Optional[str] = None
    refers_to_table: Optional[str] = None
    refers_to_schema: Optional[str] = None
    refers_to_constraint: Optional[str] = None
    referenced_columns: Optional[List[str]] = None
    delete_rule: Optional[str] = None
    update_rule: Optional[str] = None


@dataclass
class Table:
    """A table and its constraint collections."""

    name: str
    schema_owner: Optional[str] = None
    columns: List[Column] = field(default_factory=list)
    primary_key: Optional[Constraint] = None
    unique_keys: List[Constraint] = field(default_factory=list)
    foreign_keys: List[Constraint] = field(default_factory=list)
    check_constraints: List[Constraint] = field(default_factory=list)

    def add_constraint(self, constraint: Constraint) -> None:
        """File a constraint into the collection for its kind."""
        kind = constraint.constraint_type
        if kind == ConstraintType.PRIMARY_KEY:
            if self.primary_key is not None:
                raise ValueError(
                    f"Table '{self.name}' already has primary key "
                    f"'{self.primary_key.name}'"
                )
            self.primary_key = constraint
        elif kind == ConstraintType.UNIQUE_KEY:
            self.unique_keys.append(constraint)
        elif kind == ConstraintType.FOREIGN_KEY:
            self.foreign_keys.append(constraint)
        elif kind == ConstraintType.CHECK:
            self.check_constraints.append(constraint)
        else:
            raise ValueError(f"Unsupported constraint type: {kind!r}")


@dataclass
class DatabaseSchema:
    """The set of tables a foreign key may point into."""

    tables: List[Table] = field(default_factory=list)

    def find_table(self, name: str, owner: Optional[str] = None) -> Optional[Table]:
        """
        Find a table by name, preferring an exact schema-owner match.

        When ``owner`` is given but no table has that owner, a table with the
        same name in any schema is returned.
        """
        candidates = [t for t in self.tables if t.name == name]
        if owner:
            for table in candidates:
                if table.schema_owner == owner:
                    return table
        return candidates[0] if candidates else None


__all__ = [
    "ConstraintType",
    "Column",
    "Constraint",
    "Table",
    "DatabaseSchema",
]
