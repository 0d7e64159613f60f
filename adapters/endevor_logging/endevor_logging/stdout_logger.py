# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Stdout logger emitting one JSON object per build-log line."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import Logger, redact_fields, redact_message

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class StdoutLogger(Logger):
    """Logger that writes structured JSON records to stdout.

    Records are also forwarded to the stdlib logger of the same name so that
    handlers configured by the hosting process (and pytest's ``caplog``) see
    them.

    Sensitive structured fields and the ``-pass`` value of a logged Topaz CLI
    command line are masked before anything is written.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Minimum level written to stdout (DEBUG, INFO, WARNING, ERROR)
            name: Logger name, reported in every record

        Raises:
            ValueError: If level is not recognized
        """
        self.level = level.upper()
        self.name = name or "endevor"

        if self.level not in LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(LEVELS)}")

        self._stdlib_logger = logging.getLogger(self.name)
        self._stdlib_logger.setLevel(logging.NOTSET)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if LEVELS[level] < LEVELS[self.level]:
            return

        exc_info = kwargs.pop("exc_info", None)
        message = redact_message(message)
        kwargs = redact_fields(kwargs)

        record = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if kwargs:
            record["extra"] = kwargs

        try:
            print(json.dumps(record, default=str), file=sys.stdout, flush=True)
        except (TypeError, ValueError) as e:
            print(f"{level}: {message} (JSON serialization failed: {e})", file=sys.stderr, flush=True)

        extra = {"extra": kwargs} if kwargs else None
        self._stdlib_logger.log(LEVELS[level], message, exc_info=exc_info, extra=extra)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._log("ERROR", message, **kwargs)
