"""Structured logging framework using structlog.

Loggers returned by ``get_logger`` render events as JSON (ISO-8601 timestamps,
logger name, level, long SQL statements truncated) and hand them to the
standard library logger of the same name. Nothing is configured on import:
the host application owns handlers and levels, or calls ``configure_logging``
for stdout plus optional file output.

``configure_logging`` reads schema_sqlgen.config.settings:
- SQLGEN_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- SQLGEN_LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- SQLGEN_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from schema_sqlgen.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("constraints_written", table="ORDERS", dialect="db2")
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, MutableMapping

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from schema_sqlgen.config import get_settings

# Event keys that may carry generated DDL
STATEMENT_KEYS = ("statement", "expression")

STATEMENT_PREVIEW_LENGTH = 200

_configured = False


def truncate_statement(value: str, limit: int = STATEMENT_PREVIEW_LENGTH) -> str:
    """Shorten a SQL statement for log output.

    Example:
        >>> truncate_statement("ALTER TABLE x ADD CONSTRAINT y CHECK (a > 0)", limit=11)
        'ALTER TABLE...'
    """
    if len(value) <= limit:
        return value
    return value[:limit] + "..."


def statement_preview_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that truncates SQL text in event_dict."""
    for key in STATEMENT_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = truncate_statement(value)
    return event_dict


def _get_log_level() -> int:
    """Get log level from settings, falling back to the raw environment."""
    try:
        level_name = get_settings().log_level
    except ValidationError:
        level_name = os.getenv("SQLGEN_LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    """Check if file logging is enabled."""
    try:
        return get_settings().log_to_file
    except ValidationError:
        log_to_file = os.getenv("SQLGEN_LOG_TO_FILE", "").lower()
        return log_to_file in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    try:
        log_dir = Path(get_settings().log_file_dir)
    except ValidationError:
        log_dir = Path(os.getenv("SQLGEN_LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: sqlgen-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"sqlgen-{date_str}.log"


PROCESSORS: list[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    statement_preview_processor,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def configure_logging() -> None:
    """Attach stdout (and optional file) handlers to the root logger.

    For applications that run the generator directly; libraries embedding it
    keep their own logging setup. Also configures structlog with the same
    processor chain. Repeated calls are no-ops.
    """
    global _configured
    if _configured:
        return

    level = _get_log_level()

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[],
    )
    logging.root.setLevel(level)

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    structlog.configure(
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger over the standard library logger ``name``.

    The JSON processor chain is bound to the logger itself and does not depend
    on the global structlog configuration.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = [
    "configure_logging",
    "get_logger",
    "truncate_statement",
    "statement_preview_processor",
]
