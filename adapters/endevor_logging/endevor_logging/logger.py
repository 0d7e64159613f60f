# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Abstract build logger interface."""

import re
from abc import ABC, abstractmethod
from typing import Any

REDACTED = "********"

# Structured field names whose values never reach a log record.
SENSITIVE_FIELDS = frozenset({"password", "pass", "passwd", "secret"})

# Password argument of a Topaz CLI command line.
_CLI_PASSWORD = re.compile(r"(?<!\S)(-pass\s+)(\"[^\"]*\"|\S+)")


def redact_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Return ``fields`` with sensitive values replaced by ``REDACTED``."""
    return {key: REDACTED if key.lower() in SENSITIVE_FIELDS else value for key, value in fields.items()}


def redact_message(message: str) -> str:
    """Mask the value following a ``-pass`` argument in a command line."""
    return _CLI_PASSWORD.sub(lambda match: match.group(1) + REDACTED, message)


class Logger(ABC):
    """Abstract base class for loggers used by the SCM adapters.

    Every method accepts structured keyword data so that a checkout can be
    traced by job, host and credential id without formatting them into the
    message text.
    """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info-level message."""
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning-level message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error-level message."""
        pass

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug-level message."""
        pass

    @abstractmethod
    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error-level message from inside an exception handler."""
        pass
