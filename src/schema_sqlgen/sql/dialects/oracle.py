"""Oracle dialect: ANSI quoting, 30 character names."""

from typing import Dict

from ..core.type_rules import FixedLiteral, Parameterized, Rename, Sized, TypeRule
from .base import DialectCapability, double_quote_escape

DIALECT = DialectCapability(
    name="oracle",
    escape=double_quote_escape,
    max_identifier_length=30,
)

TYPE_MAP: Dict[str, TypeRule] = {
    "INT": FixedLiteral("NUMBER(10)"),
    "INTEGER": FixedLiteral("NUMBER(10)"),
    "SMALLINT": FixedLiteral("NUMBER(5)"),
    "TINYINT": FixedLiteral("NUMBER(3)"),
    "BIGINT": FixedLiteral("NUMBER(19)"),
    "BIT": FixedLiteral("NUMBER(1)"),
    "BOOLEAN": FixedLiteral("NUMBER(1)"),
    "NUMBER": Parameterized("NUMBER"),
    "NUMERIC": Parameterized("NUMBER"),
    "DECIMAL": Parameterized("NUMBER"),
    "DEC": Parameterized("NUMBER"),
    "MONEY": FixedLiteral("NUMBER(19,4)"),
    "SMALLMONEY": FixedLiteral("NUMBER(10,4)"),
    "DOUBLE": Rename("BINARY_DOUBLE"),
    "DOUBLE PRECISION": Rename("BINARY_DOUBLE"),
    "REAL": Rename("BINARY_FLOAT"),
    "VARCHAR": Sized("VARCHAR2", unbounded="CLOB"),
    "VARCHAR2": Sized("VARCHAR2", unbounded="CLOB"),
    "NVARCHAR": Sized("NVARCHAR2", unbounded="NCLOB"),
    "NVARCHAR2": Sized("NVARCHAR2", unbounded="NCLOB"),
    "CHAR": Sized("CHAR"),
    "NCHAR": Sized("NCHAR"),
    "TEXT": Rename("CLOB"),
    "NTEXT": Rename("NCLOB"),
    "DATETIME": Rename("TIMESTAMP"),
    "DATETIME2": Rename("TIMESTAMP"),
    "SMALLDATETIME": Rename("DATE"),
    "VARBINARY": Sized("RAW", unbounded="BLOB"),
    "IMAGE": Rename("BLOB"),
    "BYTEA": Rename("BLOB"),
    "UNIQUEIDENTIFIER": FixedLiteral("RAW(16)"),
    "UUID": FixedLiteral("RAW(16)"),
    "XML": Rename("XMLTYPE"),
}
