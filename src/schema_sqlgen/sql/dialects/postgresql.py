"""PostgreSQL dialect: ANSI quoting, 63 character names (NAMEDATALEN - 1)."""

from typing import Dict

from ..core.type_rules import FixedLiteral, Parameterized, Rename, Sized, TypeRule
from .base import DialectCapability, double_quote_escape

DIALECT = DialectCapability(
    name="postgresql",
    escape=double_quote_escape,
    max_identifier_length=63,
)

TYPE_MAP: Dict[str, TypeRule] = {
    "INT": Rename("INTEGER"),
    "TINYINT": Rename("SMALLINT"),
    "BIT": Rename("BOOLEAN"),
    "NUMBER": Parameterized("NUMERIC"),
    "NUMERIC": Parameterized("NUMERIC"),
    "DECIMAL": Parameterized("NUMERIC"),
    "DEC": Parameterized("NUMERIC"),
    "MONEY": FixedLiteral("NUMERIC(19,4)"),
    "SMALLMONEY": FixedLiteral("NUMERIC(10,4)"),
    "FLOAT": Rename("DOUBLE PRECISION"),
    "DOUBLE": Rename("DOUBLE PRECISION"),
    "BINARY_DOUBLE": Rename("DOUBLE PRECISION"),
    "BINARY_FLOAT": Rename("REAL"),
    "VARCHAR": Sized("VARCHAR", unbounded="TEXT"),
    "VARCHAR2": Sized("VARCHAR", unbounded="TEXT"),
    "NVARCHAR": Sized("VARCHAR", unbounded="TEXT"),
    "NVARCHAR2": Sized("VARCHAR", unbounded="TEXT"),
    "NCHAR": Sized("CHAR"),
    "CLOB": Rename("TEXT"),
    "NCLOB": Rename("TEXT"),
    "NTEXT": Rename("TEXT"),
    "LONGTEXT": Rename("TEXT"),
    "DATETIME": Rename("TIMESTAMP"),
    "DATETIME2": Rename("TIMESTAMP"),
    "SMALLDATETIME": Rename("TIMESTAMP"),
    "DATETIMEOFFSET": Rename("TIMESTAMPTZ"),
    "VARBINARY": Rename("BYTEA"),
    "RAW": Rename("BYTEA"),
    "BLOB": Rename("BYTEA"),
    "LONGBLOB": Rename("BYTEA"),
    "IMAGE": Rename("BYTEA"),
    "UNIQUEIDENTIFIER": Rename("UUID"),
    "XMLTYPE": Rename("XML"),
}
