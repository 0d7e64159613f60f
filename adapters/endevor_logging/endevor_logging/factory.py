# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Factory functions for creating logger instances."""

import os

from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger


def _default(value: str | None, env_var: str, fallback: str) -> str:
    return value or os.getenv(env_var) or fallback


def create_logger(
    logger_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
) -> Logger:
    """Create a logger.

    Args:
        logger_type: "stdout" or "silent". Defaults to LOG_TYPE env or "stdout".
        level: DEBUG, INFO, WARNING or ERROR. Defaults to LOG_LEVEL env or "INFO".
        name: Logger name. Defaults to LOG_NAME env or "endevor".

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type is not recognized

    Example:
        >>> logger = create_logger(logger_type="stdout", level="DEBUG", name="endevor-scm")
        >>> logger.info("Checkout started", host="mainframe", port="30947")
    """
    logger_type = _default(logger_type, "LOG_TYPE", "stdout").lower()
    level = _default(level, "LOG_LEVEL", "INFO").upper()
    name = _default(name, "LOG_NAME", "endevor")

    if logger_type == "stdout":
        return StdoutLogger(level=level, name=name)
    elif logger_type == "silent":
        return SilentLogger(level=level, name=name)
    else:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. "
            f"Must be one of: stdout, silent"
        )
