"""
Structured logging for rulechain

Every rulechain module logs through a logger named after itself
(rulechain.core.rules.validation, ...). Output is JSON lines by default,
produced by python-json-logger, or plain text for local debugging.
Level and format come from LOG_LEVEL / LOG_FORMAT unless given explicitly.
"""
import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import IO, Any, Iterator

from pythonjsonlogger import jsonlogger

ROOT_LOGGER_NAME = "rulechain"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMATS = ("json", "text")

JSON_FIELDS = "%(timestamp)s %(level)s %(logger)s %(function)s %(message)s"
TEXT_FIELDS = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class RuleJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter emitting one object per log line

    Always present: timestamp, level, logger, function, message. Anything
    passed through `extra=` (validator, attributes, error_code, ...) is
    added as a top-level key.
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = log_record.get("timestamp") or self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["function"] = f"{record.module}.{record.funcName}"


def resolve_level(level: str | None = None) -> int:
    """Map a level name (or $LOG_LEVEL) to a logging level, INFO if unknown."""
    name = level or os.getenv("LOG_LEVEL", "INFO")
    return LOG_LEVELS.get(name.upper(), logging.INFO)


def build_formatter(format_type: str | None = None) -> logging.Formatter:
    """
    Create the formatter for a format name (or $LOG_FORMAT)

    Args:
        format_type: "json" or "text"; anything else falls back to json
    """
    format_type = (format_type or os.getenv("LOG_FORMAT", "json")).lower()
    if format_type == "text":
        return logging.Formatter(fmt=TEXT_FIELDS, datefmt="%H:%M:%S")
    return RuleJsonFormatter(fmt=JSON_FIELDS, datefmt="%Y-%m-%dT%H:%M:%S")


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """
    (Re)configure a logger with a single stream handler

    Args:
        name: Logger name
        level: Level name, defaults to $LOG_LEVEL
        format_type: "json" or "text", defaults to $LOG_FORMAT
        stream: Output stream, defaults to the current sys.stderr so that
                CLI reports on stdout stay parseable

    Returns:
        The configured logger
    """
    log_level = resolve_level(level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(format_type))

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return the named logger, configuring it from the environment on first use."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logger(name)
    return logger


def configure_logging(level: str | None = None, format_type: str | None = None) -> list[str]:
    """
    Re-apply level and format to every rulechain logger created so far

    Module loggers are configured when first imported, before a .env file or
    command-line options are read; the CLI calls this once those are known.

    Returns:
        Names of the loggers that were reconfigured
    """
    names = sorted(
        name for name in logging.root.manager.loggerDict
        if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")
    ) or [ROOT_LOGGER_NAME]

    for name in names:
        setup_logger(name, level=level, format_type=format_type)
    return names


@contextmanager
def log_operation(
    operation_name: str, logger: logging.Logger | None = None, **fields: Any
) -> Iterator[dict[str, Any]]:
    """
    Log the start and outcome of an operation with its duration

    Yields a dict the caller can fill with results; its keys are added to the
    completion entry.

    Usage:
        with log_operation("Checking records", logger=logger, records=10) as outcome:
            outcome["failed"] = 2
    """
    logger = logger or get_logger()
    outcome: dict[str, Any] = {}
    started = time.perf_counter()

    logger.info(f"Starting: {operation_name}", extra={"operation": operation_name, **fields})
    try:
        yield outcome
    except Exception as e:
        logger.error(
            f"Failed: {operation_name}",
            extra={
                "operation": operation_name,
                "duration_seconds": round(time.perf_counter() - started, 3),
                "status": "error",
                "error_type": type(e).__name__,
                "error_message": str(e),
                **fields,
            },
        )
        raise

    logger.info(
        f"Completed: {operation_name}",
        extra={
            "operation": operation_name,
            "duration_seconds": round(time.perf_counter() - started, 3),
            "status": "success",
            **fields,
            **outcome,
        },
    )
