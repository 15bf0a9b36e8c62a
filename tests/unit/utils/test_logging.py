"""Unit tests for structured logging framework.

Tests cover:
- get_logger returns a structlog BoundLogger
- JSON rendering with logger name and ISO timestamps
- Truncation of long SQL statements in events
- Explicit configuration of root handlers
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler

import pytest
import structlog

from schema_sqlgen.utils import logging as sqlgen_logging
from schema_sqlgen.utils.logging import (
    STATEMENT_PREVIEW_LENGTH,
    configure_logging,
    get_logger,
    statement_preview_processor,
    truncate_statement,
)


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "warning")


@pytest.mark.unit
def test_get_logger_renders_json(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = get_logger("my_test_logger")
    logger.info("test_event", dialect="db2")

    assert len(caplog.records) >= 1
    log_data = json.loads(caplog.records[-1].getMessage())
    assert log_data["logger"] == "my_test_logger"
    assert log_data["event"] == "test_event"
    assert log_data["dialect"] == "db2"
    assert log_data["level"] == "info"
    assert "timestamp" in log_data


@pytest.mark.unit
def test_truncate_statement_short_value() -> None:
    assert truncate_statement("ALTER TABLE x") == "ALTER TABLE x"


@pytest.mark.unit
def test_truncate_statement_long_value() -> None:
    statement = "X" * (STATEMENT_PREVIEW_LENGTH + 50)
    result = truncate_statement(statement)

    assert result == "X" * STATEMENT_PREVIEW_LENGTH + "..."


@pytest.mark.unit
def test_statement_preview_processor_only_touches_sql_keys() -> None:
    long_text = "Y" * (STATEMENT_PREVIEW_LENGTH + 1)
    event_dict = {"event": "e", "statement": long_text, "table": long_text}

    result = statement_preview_processor(None, "info", event_dict)

    assert result["statement"].endswith("...")
    assert result["table"] == long_text


@pytest.mark.unit
def test_long_expression_truncated_in_output(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("sql_logger").info("check_written", expression="a > 0 AND " * 100)

    log_data = json.loads(caplog.records[-1].getMessage())
    assert len(log_data["expression"]) == STATEMENT_PREVIEW_LENGTH + 3



@pytest.fixture
def root_logger(monkeypatch: pytest.MonkeyPatch):
    """Root logger restored (handlers, level, structlog defaults) after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setattr(sqlgen_logging, "_configured", False)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.unit
def test_get_logger_leaves_root_handlers_alone(root_logger: logging.Logger) -> None:
    before = root_logger.handlers[:]

    get_logger("quiet_logger").warning("nothing_configured")

    assert root_logger.handlers == before


@pytest.mark.unit
def test_configure_logging_adds_stdout_handler(
    root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SQLGEN_LOG_LEVEL", "DEBUG")
    before = len(root_logger.handlers)

    configure_logging()

    assert len(root_logger.handlers) == before + 1
    assert isinstance(root_logger.handlers[-1], logging.StreamHandler)
    assert root_logger.level == logging.DEBUG


@pytest.mark.unit
def test_configure_logging_runs_once(root_logger: logging.Logger) -> None:
    before = len(root_logger.handlers)

    configure_logging()
    configure_logging()

    assert len(root_logger.handlers) == before + 1


@pytest.mark.unit
def test_configure_logging_to_file(
    root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    monkeypatch.setenv("SQLGEN_LOG_TO_FILE", "true")
    monkeypatch.setenv("SQLGEN_LOG_FILE_DIR", str(tmp_path))

    configure_logging()

    file_handlers = [
        h for h in root_logger.handlers if isinstance(h, TimedRotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename.startswith(str(tmp_path))
