# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""In-memory logger for tests."""

from typing import Any

from .logger import Logger, redact_fields, redact_message


class SilentLogger(Logger):
    """Logger that keeps every record in memory and prints nothing.

    Records are not filtered by level, so tests can assert on debug output.
    Sensitive values are masked the same way ``StdoutLogger`` masks them.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        self.level = level.upper()
        self.name = name or "endevor"
        self.logs: list[dict[str, Any]] = []

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        entry: dict[str, Any] = {"level": level, "message": redact_message(message)}
        if kwargs:
            entry["extra"] = redact_fields(kwargs)
        self.logs.append(entry)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def clear_logs(self) -> None:
        """Drop all stored records."""
        self.logs.clear()

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Return stored records, optionally only those at ``level``."""
        if level is None:
            return self.logs
        return [entry for entry in self.logs if entry["level"] == level]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Return True if any stored record contains ``message``."""
        return any(message in entry["message"] for entry in self.get_logs(level))
