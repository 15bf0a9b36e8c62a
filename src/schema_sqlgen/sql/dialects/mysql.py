"""
MySQL dialect: backtick quoting, 64 character names.

MySQL adds unique keys with ``ADD UNIQUE <name>`` rather than
``ADD CONSTRAINT <name> UNIQUE``.
"""

from typing import Dict

from ..core.type_rules import FixedLiteral, Parameterized, Rename, Sized, TypeRule
from .base import DialectCapability, backtick_escape

DIALECT = DialectCapability(
    name="mysql",
    escape=backtick_escape,
    max_identifier_length=64,
    unique_constraint_format="ALTER TABLE {table} ADD UNIQUE {name} ({columns})",
)

TYPE_MAP: Dict[str, TypeRule] = {
    "INTEGER": Rename("INT"),
    "BIT": FixedLiteral("TINYINT(1)"),
    "BOOLEAN": FixedLiteral("TINYINT(1)"),
    "NUMBER": Parameterized("DECIMAL"),
    "NUMERIC": Parameterized("DECIMAL"),
    "DECIMAL": Parameterized("DECIMAL"),
    "DEC": Parameterized("DECIMAL"),
    "MONEY": FixedLiteral("DECIMAL(19,4)"),
    "SMALLMONEY": FixedLiteral("DECIMAL(10,4)"),
    # SQL Server FLOAT is double precision
    "FLOAT": Rename("DOUBLE"),
    "DOUBLE PRECISION": Rename("DOUBLE"),
    "BINARY_DOUBLE": Rename("DOUBLE"),
    "BINARY_FLOAT": Rename("FLOAT"),
    "VARCHAR": Sized("VARCHAR", unbounded="LONGTEXT"),
    "VARCHAR2": Sized("VARCHAR", unbounded="LONGTEXT"),
    "NVARCHAR": Sized("NATIONAL VARCHAR", unbounded="LONGTEXT"),
    "NVARCHAR2": Sized("NATIONAL VARCHAR", unbounded="LONGTEXT"),
    "NCHAR": Sized("NATIONAL CHAR"),
    "CLOB": Rename("LONGTEXT"),
    "NCLOB": Rename("LONGTEXT"),
    "NTEXT": Rename("LONGTEXT"),
    "XML": Rename("LONGTEXT"),
    "DATETIME2": Rename("DATETIME"),
    "SMALLDATETIME": Rename("DATETIME"),
    "VARBINARY": Sized("VARBINARY", unbounded="LONGBLOB"),
    "RAW": Sized("VARBINARY", unbounded="LONGBLOB"),
    "BLOB": Rename("LONGBLOB"),
    "BYTEA": Rename("LONGBLOB"),
    "IMAGE": Rename("LONGBLOB"),
    "UNIQUEIDENTIFIER": FixedLiteral("CHAR(36)"),
    "UUID": FixedLiteral("CHAR(36)"),
}
