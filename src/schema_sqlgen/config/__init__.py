"""Configuration management for schema-sqlgen.

Usage:
    >>> from schema_sqlgen.config import get_settings
    >>> settings = get_settings()
    >>> settings.dialect
    'sqlserver'
"""

from schema_sqlgen.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
