# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Exceptions for configuration validation."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import ValidationResult


class EndevorConfigError(Exception):
    """Base exception for configuration errors."""
    pass


class ConfigurationError(EndevorConfigError):
    """Raised when a retrieval configuration fails validation.

    Attributes:
        failures: Every failing field result, in field order
    """

    def __init__(self, failures: list["ValidationResult"]):
        self.failures = list(failures)
        messages = "; ".join(f"{failure.field}: {failure.message}" for failure in self.failures)
        super().__init__(f"Invalid Endevor configuration: {messages}")


class CodePageCatalogError(EndevorConfigError):
    """Raised when the code page catalog data is malformed or unreadable."""
    pass
