"""Shared utilities for schema-sqlgen."""

from schema_sqlgen.utils.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
