# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Endevor source retrieval through the Topaz CLI."""

from .base import SourceRetriever
from .changelog import (
    calculate_file_hash,
    diff_fingerprints,
    fingerprint_directory,
    read_change_log,
    write_change_log,
)
from .exceptions import ChangeLogError, CliNotFoundError, RetrievalError
from .models import ChangeLogEntry, RetrievalResult
from .topaz_cli import TopazCliRetriever, format_filter, mask_command

__all__ = [
    "SourceRetriever",
    "TopazCliRetriever",
    "RetrievalResult",
    "ChangeLogEntry",
    "format_filter",
    "mask_command",
    "calculate_file_hash",
    "fingerprint_directory",
    "diff_fingerprints",
    "write_change_log",
    "read_change_log",
    "RetrievalError",
    "CliNotFoundError",
    "ChangeLogError",
]

__version__ = "0.1.0"
