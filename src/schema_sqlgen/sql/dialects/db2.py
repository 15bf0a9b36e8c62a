"""IBM DB2 (LUW) dialect: ANSI quoting, 128 character names."""

from typing import Dict

from ..core.type_rules import FixedLiteral, Parameterized, Rename, Sized, TypeRule
from .base import DialectCapability, double_quote_escape

DIALECT = DialectCapability(name="db2", escape=double_quote_escape)

TYPE_MAP: Dict[str, TypeRule] = {
    # Integers
    "INT": Rename("INTEGER"),
    "INTEGER": Rename("INTEGER"),
    "SMALLINT": Rename("SMALLINT"),
    "TINYINT": Rename("SMALLINT"),
    "BIT": Rename("SMALLINT"),
    "BOOLEAN": Rename("SMALLINT"),
    "BIGINT": Rename("BIGINT"),
    # Exact numerics
    "NUMBER": Parameterized("NUMERIC"),
    "NUMERIC": Parameterized("NUMERIC"),
    "DECIMAL": Parameterized("DECIMAL"),
    "DEC": Parameterized("DECIMAL"),
    "MONEY": FixedLiteral("DECIMAL(19,4)"),
    "SMALLMONEY": FixedLiteral("DECIMAL(10,4)"),
    # Approximate numerics
    "FLOAT": Rename("DOUBLE"),
    "DOUBLE PRECISION": Rename("DOUBLE"),
    "BINARY_DOUBLE": Rename("DOUBLE"),
    "BINARY_FLOAT": Rename("REAL"),
    # Character
    "VARCHAR": Sized("VARCHAR", unbounded="CLOB"),
    "VARCHAR2": Sized("VARCHAR", unbounded="CLOB"),
    "NVARCHAR": Sized("VARGRAPHIC", unbounded="DBCLOB"),
    "NVARCHAR2": Sized("VARGRAPHIC", unbounded="DBCLOB"),
    "CHAR": Sized("CHAR"),
    "NCHAR": Sized("GRAPHIC"),
    "TEXT": Rename("CLOB"),
    "NTEXT": Rename("DBCLOB"),
    "NCLOB": Rename("DBCLOB"),
    # Date/time
    "DATETIME": Rename("TIMESTAMP"),
    "DATETIME2": Rename("TIMESTAMP"),
    "SMALLDATETIME": Rename("TIMESTAMP"),
    # Binary
    "VARBINARY": Sized("VARBINARY", unbounded="BLOB"),
    "IMAGE": Rename("BLOB"),
    "BYTEA": Rename("BLOB"),
    "UNIQUEIDENTIFIER": FixedLiteral("CHAR(16) FOR BIT DATA"),
}
