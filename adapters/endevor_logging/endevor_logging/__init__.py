# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Endevor SCM Logging Adapter.

Structured logging shared by the validation, credential and retrieval
adapters and by the SCM service.

Example:
    >>> from endevor_logging import create_logger
    >>> logger = create_logger(logger_type="stdout", level="INFO", name="endevor-scm")
    >>> logger.info("Retrieval finished", elements=12)
"""

__version__ = "0.1.0"

from .factory import create_logger
from .logger import REDACTED, Logger, redact_fields, redact_message
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

__all__ = [
    "__version__",
    "Logger",
    "REDACTED",
    "redact_fields",
    "redact_message",
    "SilentLogger",
    "StdoutLogger",
    "create_logger",
]
