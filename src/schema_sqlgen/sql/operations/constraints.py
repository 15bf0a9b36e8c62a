"""
Constraint statement builders.

Writes ``ALTER TABLE ... ADD CONSTRAINT`` statements for primary keys, unique
keys, foreign keys and check constraints in the syntax of a target dialect.

Example:
    >>> from schema_sqlgen.model import Constraint, ConstraintType, Table
    >>> from schema_sqlgen.sql import ConstraintWriter
    >>> table = Table("ORDERS", primary_key=Constraint(
    ...     ConstraintType.PRIMARY_KEY, "PK_ORDERS", ["ORDER_ID"]))
    >>> ConstraintWriter("sqlserver").write_primary_key(table)
    'ALTER TABLE [ORDERS] ADD CONSTRAINT [PK_ORDERS] PRIMARY KEY ([ORDER_ID]);'
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Union

from schema_sqlgen.config import Settings, get_settings
from schema_sqlgen.model import (
    Constraint,
    ConstraintType,
    DatabaseSchema,
    Table,
    referenced_columns,
)
from schema_sqlgen.utils.logging import get_logger

from ..core.identifier import qualify, resolve_constraint_name
from ..dialects import DialectCapability, get_dialect

logger = get_logger(__name__)

CheckConstraintExcluder = Callable[[Constraint], bool]
CheckConstraintTranslator = Callable[[str], str]
ReferencedColumnsLookup = Callable[
    [Constraint, Optional[DatabaseSchema]], Optional[List[str]]
]

# Handled by column nullability, not by a table constraint
NOT_NULL_SUFFIX = " IS NOT NULL"


class ConstraintWriterError(ValueError):
    """Raised when a statement cannot be built for lack of a table or constraint identity."""


class ConstraintWriter:
    """
    Builder for constraint DDL statements.

    The writer is configured once and then only reads its inputs; calling any
    ``write_*`` method twice with the same table gives the same text.

    Args:
        dialect: Dialect name or capability bundle
        include_schema: Prefix table names with their escaped schema owner
        check_constraint_excluder: Predicate; check constraints it accepts
            are not written
        translate_check_constraint: Rewrites check expressions for the target
            dialect
        referenced_columns: Lookup resolving a foreign key's target columns
        schema: Schema the lookup searches for referenced tables
    """

    def __init__(
        self,
        dialect: Union[str, DialectCapability],
        include_schema: bool = False,
        check_constraint_excluder: Optional[CheckConstraintExcluder] = None,
        translate_check_constraint: Optional[CheckConstraintTranslator] = None,
        referenced_columns: ReferencedColumnsLookup = referenced_columns,
        schema: Optional[DatabaseSchema] = None,
    ):
        self.dialect = get_dialect(dialect) if isinstance(dialect, str) else dialect
        self.include_schema = include_schema
        self.check_constraint_excluder = check_constraint_excluder
        self.translate_check_constraint = translate_check_constraint
        self.referenced_columns = referenced_columns
        self.schema = schema

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, **kwargs
    ) -> "ConstraintWriter":
        """
        Build a writer from configured dialect and schema qualification.

        Keyword arguments are passed through (hooks, lookup, schema); an
        explicit ``include_schema`` overrides the configured one.
        """
        settings = settings or get_settings()
        kwargs.setdefault("include_schema", settings.include_schema)
        return cls(settings.dialect, **kwargs)

    # =========================================================================
    # TABLE CONSTRAINTS
    # =========================================================================

    def write_table_constraints(self, table: Table) -> str:
        """
        Write primary key, unique keys and check constraints, in that order.

        Foreign keys are left out; write them once every table exists
        (see ``write_schema_constraints``).

        Returns:
            Newline-terminated statements; empty string when there are none
        """
        statements: List[Optional[str]] = [self.write_primary_key(table)]
        statements.extend(self.write_unique_keys(table))
        statements.extend(self.write_check_constraints(table))
        return self._join(statements)

    def write_primary_key(self, table: Table) -> Optional[str]:
        """Write the table's primary key, or None if it has none."""
        self._require_table(table)
        if table.primary_key is None:
            return None
        return self._write_primary_key(table, table.primary_key)

    def write_unique_keys(self, table: Table) -> List[str]:
        """Write one statement per unique key."""
        return [self.write_unique_key(table, uk) for uk in table.unique_keys]

    def write_unique_key(self, table: Table, constraint: Constraint) -> str:
        """Write a unique key using the dialect's unique-constraint template."""
        self._require_constraint(constraint)
        statement = self.dialect.unique_constraint_format.format(
            table=self._table_name(table),
            name=self._constraint_name(constraint.name),
            columns=self._column_list(constraint.columns),
        )
        return self._terminate(statement)

    def write_check_constraints(self, table: Table) -> List[str]:
        """Write the table's check constraints, dropping skipped ones."""
        statements = (
            self.write_check_constraint(table, cc) for cc in table.check_constraints
        )
        return [s for s in statements if s]

    def write_check_constraint(
        self, table: Table, constraint: Constraint
    ) -> Optional[str]:
        """
        Write a check constraint.

        Returns None when the excluder accepts the constraint or when the
        expression is only an ``IS NOT NULL`` test.
        """
        self._require_table(table)
        self._require_constraint(constraint)
        if self.check_constraint_excluder and self.check_constraint_excluder(constraint):
            logger.debug(
                "check_constraint_excluded", table=table.name, constraint=constraint.name
            )
            return None

        expression = constraint.expression or ""
        # Remove one layer of wrapping; the template adds its own parentheses
        if expression.startswith("(") and expression.endswith(")"):
            expression = expression[1:-1]
        if expression.endswith(NOT_NULL_SUFFIX):
            logger.debug(
                "check_constraint_not_null_skipped",
                table=table.name,
                constraint=constraint.name,
                expression=expression,
            )
            return None

        if self.translate_check_constraint:
            expression = self.translate_check_constraint(expression)

        statement = "ALTER TABLE {table} ADD CONSTRAINT {name} CHECK ({expression})".format(
            table=self._table_name(table),
            name=self._constraint_name(constraint.name),
            expression=expression,
        )
        return self._terminate(statement)

    # =========================================================================
    # FOREIGN KEYS
    # =========================================================================

    def write_foreign_keys(self, table: Table) -> List[str]:
        """Write one statement per foreign key."""
        return [self.write_foreign_key(table, fk) for fk in table.foreign_keys]

    def write_foreign_key(self, table: Table, constraint: Constraint) -> str:
        """
        Write a foreign key.

        The referenced column list is written only when the lookup resolves
        it. Engines that infer the referenced primary key (SQL Server, Oracle)
        accept the short form; MySQL rejects it.
        """
        return self._write_foreign_key(table, constraint, self.schema)

    def _write_foreign_key(
        self,
        table: Table,
        constraint: Constraint,
        schema: Optional[DatabaseSchema],
    ) -> str:
        self._require_table(table)
        self._require_constraint(constraint)
        if not constraint.refers_to_table:
            raise ConstraintWriterError(
                f"Foreign key '{constraint.name}' on '{table.name}' has no referenced table"
            )

        target_columns = self.referenced_columns(constraint, schema)
        if target_columns:
            target_list = f" ({self._column_list(target_columns)})"
        else:
            target_list = ""
            logger.warning(
                "foreign_key_target_unresolved",
                table=table.name,
                constraint=constraint.name,
                refers_to_table=constraint.refers_to_table,
            )

        rules = ""
        if constraint.delete_rule:
            rules = f" ON DELETE {constraint.delete_rule}"
        if constraint.update_rule:
            rules += f" ON UPDATE {constraint.update_rule}"

        statement = (
            "ALTER TABLE {table} ADD CONSTRAINT {name} FOREIGN KEY ({columns}) "
            "REFERENCES {refers_to}{target_list}{rules}"
        ).format(
            table=self._table_name(table),
            name=self._constraint_name(constraint.name),
            columns=self._column_list(constraint.columns),
            refers_to=qualify(
                self.dialect.escape,
                constraint.refers_to_table,
                constraint.refers_to_schema,
                self.include_schema,
            ),
            target_list=target_list,
            rules=rules,
        )
        return self._terminate(statement)

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def write_constraint(self, table: Table, constraint: Constraint) -> Optional[str]:
        """
        Write a single constraint of any kind.

        Returns an empty string for an unrecognized constraint type, and None
        for a check constraint that is skipped.
        """
        self._require_constraint(constraint)
        kind = constraint.constraint_type
        if kind == ConstraintType.PRIMARY_KEY:
            self._require_table(table)
            return self._write_primary_key(table, constraint)
        if kind == ConstraintType.UNIQUE_KEY:
            return self.write_unique_key(table, constraint)
        if kind == ConstraintType.FOREIGN_KEY:
            return self.write_foreign_key(table, constraint)
        if kind == ConstraintType.CHECK:
            return self.write_check_constraint(table, constraint)
        return ""

    def write_schema_constraints(self, schema: DatabaseSchema) -> str:
        """
        Write constraints for every table in a schema.

        All primary, unique and check constraints come first, then all foreign
        keys, so every referenced key exists before a foreign key needs it.
        Foreign-key targets are resolved against ``schema`` unless the writer
        was built with its own.
        """
        lookup_schema = self.schema if self.schema is not None else schema
        blocks = [self.write_table_constraints(table) for table in schema.tables]
        foreign_keys = [
            self._write_foreign_key(table, fk, lookup_schema)
            for table in schema.tables
            for fk in table.foreign_keys
        ]
        logger.info(
            "schema_constraints_written",
            dialect=self.dialect.name,
            tables=len(schema.tables),
            foreign_keys=len(foreign_keys),
        )
        return "".join(blocks) + self._join(foreign_keys)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _write_primary_key(self, table: Table, constraint: Constraint) -> str:
        statement = "ALTER TABLE {table} ADD CONSTRAINT {name} PRIMARY KEY ({columns})".format(
            table=self._table_name(table),
            name=self._constraint_name(constraint.name),
            columns=self._column_list(constraint.columns),
        )
        return self._terminate(statement)

    def _table_name(self, table: Table) -> str:
        self._require_table(table)
        return qualify(
            self.dialect.escape, table.name, table.schema_owner, self.include_schema
        )

    def _constraint_name(self, name: Optional[str]) -> str:
        resolved = resolve_constraint_name(name, self.dialect.max_identifier_length)
        if name and resolved != name:
            logger.debug(
                "constraint_name_truncated",
                dialect=self.dialect.name,
                constraint=name,
                max_length=self.dialect.max_identifier_length,
            )
        return self.dialect.escape(resolved)

    def _column_list(self, columns: Sequence[str]) -> str:
        return ", ".join(self.dialect.escape(column) for column in columns)

    def _terminate(self, statement: str) -> str:
        return statement + self.dialect.line_ending

    @staticmethod
    def _join(statements: Sequence[Optional[str]]) -> str:
        return "".join(f"{statement}\n" for statement in statements if statement)

    @staticmethod
    def _require_table(table: Optional[Table]) -> None:
        if table is None or not table.name:
            raise ConstraintWriterError("A table with a name is required to write constraints")

    @staticmethod
    def _require_constraint(constraint: Optional[Constraint]) -> None:
        if constraint is None:
            raise ConstraintWriterError("A constraint is required")


__all__ = [
    "ConstraintWriter",
    "ConstraintWriterError",
    "CheckConstraintExcluder",
    "CheckConstraintTranslator",
    "ReferencedColumnsLookup",
]
