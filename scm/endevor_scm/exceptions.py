# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Exceptions raised by the SCM service."""

from endevor_config import ValidationResult


class CheckoutAbortedError(Exception):
    """Raised when a checkout cannot produce source for the build.

    Attributes:
        failures: Field validation failures; empty when the retrieval itself failed
    """

    def __init__(self, message: str, failures: list[ValidationResult] | None = None):
        super().__init__(message)
        self.failures = list(failures or [])

    @property
    def invalid_configuration(self) -> bool:
        return bool(self.failures)
