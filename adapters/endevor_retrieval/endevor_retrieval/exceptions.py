# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Exceptions for source retrieval."""


class RetrievalError(Exception):
    """Base exception for retrieval errors."""
    pass


class CliNotFoundError(RetrievalError):
    """Raised when the Topaz CLI script cannot be located."""
    pass


class ChangeLogError(RetrievalError):
    """Raised when a change log cannot be written or read."""
    pass
