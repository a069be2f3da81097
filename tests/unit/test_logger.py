"""
Unit tests for structured logging.
"""

import io
import json
import logging

from src.observability.logger import (
    DEFAULT_LOGGER_NAME,
    CustomJsonFormatter,
    get_logger,
    log_operation,
    setup_logger,
)


def capture(logger: logging.Logger) -> io.StringIO:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(CustomJsonFormatter(fmt="%(timestamp)s %(level)s %(logger)s %(message)s"))
    logger.handlers = [handler]
    return stream


def test_setup_logger_replaces_handlers():
    logger = setup_logger("niwalog-records-test", level="DEBUG", format_type="text")
    setup_logger("niwalog-records-test", level="DEBUG", format_type="text")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_module_loggers_are_children():
    assert get_logger("src.export.driver").name == f"{DEFAULT_LOGGER_NAME}.src.export.driver"
    assert get_logger().name == DEFAULT_LOGGER_NAME


def test_json_formatter_fields():
    logger = logging.getLogger("niwalog-records-json-test")
    logger.setLevel(logging.INFO)
    stream = capture(logger)

    logger.info("hello", extra={"entity": "employee"})

    payload = json.loads(stream.getvalue())
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "niwalog-records-json-test"
    assert payload["entity"] == "employee"


def test_log_operation_reports_failure():
    logger = logging.getLogger("niwalog-records-op-test")
    logger.setLevel(logging.DEBUG)
    stream = capture(logger)

    try:
        with log_operation("Exporting CSV", logger=logger, artifact_name="x.csv"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert lines[-1]["status"] == "error"
    assert lines[-1]["error_type"] == "RuntimeError"
    assert lines[-1]["artifact_name"] == "x.csv"
