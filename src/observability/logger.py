"""
Structured JSON logging for niwalog-records

Every validation and export step logs through here so that runs can be
grepped as JSON lines (or read as plain text during local development).
Module loggers hang off one application logger, which owns the handler.
"""
import logging
import os
import sys
import time

from pythonjsonlogger import jsonlogger

DEFAULT_LOGGER_NAME = "niwalog-records"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

JSON_FORMAT = "%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Adds timestamp, level, logger, module and function to each JSON line."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = log_record.get("timestamp") or self.formatTime(record, self.datefmt)
        log_record["level"] = (log_record.get("level") or record.levelname).upper()
        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return CustomJsonFormatter(fmt=JSON_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt="%H:%M:%S")


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Configure a logger with a single stderr handler.

    Calling it again reconfigures the logger in place (the CLI does this
    after parsing --log-level / --log-format).

    Args:
        name: Logger name
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL; defaults to the
            LOG_LEVEL environment variable, then INFO
        format_type: "json" or "text"; defaults to LOG_FORMAT, then json

    Returns:
        The configured logger
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    log_level = LOG_LEVELS.get(level_name, logging.INFO)
    format_type = (format_type or os.getenv("LOG_FORMAT") or "json").lower()

    # stdout carries CLI results only
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(format_type))

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers = [handler]
    logger.propagate = False
    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the application logger.

    ``get_logger(__name__)`` in ``src.export.driver`` returns
    ``niwalog-records.src.export.driver``. The application logger is set up
    with defaults the first time any logger is requested.
    """
    app_logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if not app_logger.handlers:
        setup_logger(DEFAULT_LOGGER_NAME)

    if name == DEFAULT_LOGGER_NAME or name.startswith(DEFAULT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return app_logger.getChild(name)


class log_operation:
    """
    Log the start, outcome and duration of a block.

    Extra keyword fields are attached to every line; they must not shadow
    LogRecord attributes (use ``artifact_name``, not ``filename``).
    Exceptions are logged and re-raised.

    Usage:
        with log_operation("Exporting CSV", logger=logger, artifact_name="report.csv"):
            ...
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = extra_fields
        self.started: float | None = None

    def _fields(self, **fields) -> dict:
        return {"operation": self.operation_name, **fields, **self.extra_fields}

    def __enter__(self):
        self.started = time.perf_counter()
        self.logger.debug(f"Starting: {self.operation_name}", extra=self._fields())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = round(time.perf_counter() - self.started, 3)

        if exc_type is None:
            self.logger.info(
                f"Completed: {self.operation_name}",
                extra=self._fields(duration_seconds=elapsed, status="success"),
            )
        else:
            self.logger.error(
                f"Failed: {self.operation_name}",
                extra=self._fields(
                    duration_seconds=elapsed,
                    status="error",
                    error_type=exc_type.__name__,
                    error_message=str(exc_val),
                ),
            )
        return False
