"""schema-sqlgen: constraint and column type DDL for many database dialects."""

__version__ = "0.1.0"
