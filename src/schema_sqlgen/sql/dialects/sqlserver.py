"""Microsoft SQL Server dialect: bracket quoting, 128 character names."""

from typing import Dict

from ..core.type_rules import Parameterized, Rename, Sized, TypeRule
from .base import DialectCapability, bracket_escape

DIALECT = DialectCapability(name="sqlserver", escape=bracket_escape)

TYPE_MAP: Dict[str, TypeRule] = {
    "INTEGER": Rename("INT"),
    "BOOLEAN": Rename("BIT"),
    "BOOL": Rename("BIT"),
    "NUMBER": Parameterized("NUMERIC"),
    "NUMERIC": Parameterized("NUMERIC"),
    "DECIMAL": Parameterized("DECIMAL"),
    "DEC": Parameterized("DECIMAL"),
    "DOUBLE": Rename("FLOAT"),
    "DOUBLE PRECISION": Rename("FLOAT"),
    "BINARY_DOUBLE": Rename("FLOAT"),
    "BINARY_FLOAT": Rename("REAL"),
    "VARCHAR": Sized("VARCHAR", unbounded="VARCHAR(MAX)"),
    "VARCHAR2": Sized("VARCHAR", unbounded="VARCHAR(MAX)"),
    "NVARCHAR": Sized("NVARCHAR", unbounded="NVARCHAR(MAX)"),
    "NVARCHAR2": Sized("NVARCHAR", unbounded="NVARCHAR(MAX)"),
    "CLOB": Rename("VARCHAR(MAX)"),
    "TEXT": Rename("VARCHAR(MAX)"),
    "NCLOB": Rename("NVARCHAR(MAX)"),
    "NTEXT": Rename("NVARCHAR(MAX)"),
    # SQL Server's own TIMESTAMP is a row version, not a date
    "TIMESTAMP": Rename("DATETIME2"),
    "VARBINARY": Sized("VARBINARY", unbounded="VARBINARY(MAX)"),
    "RAW": Sized("VARBINARY", unbounded="VARBINARY(MAX)"),
    "BLOB": Rename("VARBINARY(MAX)"),
    "BYTEA": Rename("VARBINARY(MAX)"),
    "IMAGE": Rename("VARBINARY(MAX)"),
    "UUID": Rename("UNIQUEIDENTIFIER"),
}
