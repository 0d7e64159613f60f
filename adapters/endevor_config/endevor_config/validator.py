# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Validation and normalization of Endevor retrieval configuration fields.

Each ``validate_*`` function takes the raw form value and returns a
``ValidationResult``; none of them raises. ``ConfigurationValidator`` applies
all of them to a ``RetrievalConfiguration`` and can block a retrieval attempt
with ``ensure_valid``.
"""

import re
from collections.abc import Callable, Sequence

from .code_pages import lookup_code_page_catalog
from .exceptions import ConfigurationError
from .models import (
    CODE_PAGE_FIELD,
    CREDENTIALS_ID_FIELD,
    FIELDS,
    FILE_EXTENSION_FIELD,
    FILTER_PATTERN_FIELD,
    HOST_PORT_DELIMITER,
    HOST_PORT_FIELD,
    CodePage,
    HostPort,
    RetrievalConfiguration,
    ValidationErrorCode,
    ValidationResult,
)

_DECIMAL_DIGITS = re.compile(r"[0-9]+")


def _trim(raw: str | None) -> str:
    return "" if raw is None else raw.strip()


def _fail(field: str, error: ValidationErrorCode) -> ValidationResult:
    return ValidationResult(field=field, error=error)


def validate_host_port(raw: str | None) -> ValidationResult:
    """Validate a ``host:port`` pair.

    Returns:
        A result whose value is a ``HostPort`` on success. Failures are
        EMPTY, WRONG_SEGMENT_COUNT, MISSING_HOST, MISSING_PORT or
        NON_NUMERIC_PORT. The port is not range-checked.
    """
    value = _trim(raw)
    if not value:
        return _fail(HOST_PORT_FIELD, ValidationErrorCode.EMPTY)

    segments = value.split(HOST_PORT_DELIMITER)
    if len(segments) != 2:
        return _fail(HOST_PORT_FIELD, ValidationErrorCode.WRONG_SEGMENT_COUNT)

    host, port = (segment.strip() for segment in segments)
    if not host:
        return _fail(HOST_PORT_FIELD, ValidationErrorCode.MISSING_HOST)
    if not port:
        return _fail(HOST_PORT_FIELD, ValidationErrorCode.MISSING_PORT)
    if not _DECIMAL_DIGITS.fullmatch(port):
        return _fail(HOST_PORT_FIELD, ValidationErrorCode.NON_NUMERIC_PORT)

    return ValidationResult(field=HOST_PORT_FIELD, value=HostPort(host=host, port=port))


def validate_filter_pattern(raw: str | None) -> ValidationResult:
    """Validate the element filter; its syntax is left to the Topaz CLI."""
    value = _trim(raw)
    if not value:
        return _fail(FILTER_PATTERN_FIELD, ValidationErrorCode.EMPTY)
    return ValidationResult(field=FILTER_PATTERN_FIELD, value=value)


def validate_file_extension(raw: str | None) -> ValidationResult:
    """Validate the file extension assigned to retrieved elements.

    Only letters and decimal digits are accepted; numeric symbols such as
    "½", "²" or "Ⅻ" are not.
    """
    value = _trim(raw)
    if not value:
        return _fail(FILE_EXTENSION_FIELD, ValidationErrorCode.EMPTY)
    if not all(char.isalpha() or char.isdecimal() for char in value):
        return _fail(FILE_EXTENSION_FIELD, ValidationErrorCode.NOT_ALPHANUMERIC)
    return ValidationResult(field=FILE_EXTENSION_FIELD, value=value)


def validate_credentials_id(raw: str | None) -> ValidationResult:
    """Validate the credential reference.

    Only presence is checked here; resolving the id is up to a
    ``CredentialResolver``.
    """
    value = _trim(raw)
    if not value:
        return _fail(CREDENTIALS_ID_FIELD, ValidationErrorCode.EMPTY)
    return ValidationResult(field=CREDENTIALS_ID_FIELD, value=value)


def validate_code_page(raw: str | None, catalog: Sequence[CodePage] | None = None) -> ValidationResult:
    """Validate that the code page is one of the catalog entries.

    Args:
        raw: Submitted code page identifier
        catalog: Catalog to check against; defaults to the packaged catalog
    """
    value = _trim(raw)
    if not value:
        return _fail(CODE_PAGE_FIELD, ValidationErrorCode.EMPTY)

    entries = lookup_code_page_catalog() if catalog is None else catalog
    if value not in {entry.id for entry in entries}:
        return _fail(CODE_PAGE_FIELD, ValidationErrorCode.UNKNOWN_CODE_PAGE)
    return ValidationResult(field=CODE_PAGE_FIELD, value=value)


class ConfigurationValidator:
    """Validates every field of a ``RetrievalConfiguration``.

    Example:
        >>> validator = ConfigurationValidator()
        >>> config = RetrievalConfiguration("mvs1:30947", "PROD/FIN/*", "cbl", "tso-user", "1047")
        >>> validator.ensure_valid(config)
    """

    def __init__(self, catalog: Sequence[CodePage] | None = None):
        """Initialize the validator.

        Args:
            catalog: Code page catalog; the packaged catalog is loaded when omitted
        """
        self.catalog = tuple(catalog) if catalog is not None else lookup_code_page_catalog()
        self._checks: dict[str, Callable[[str | None], ValidationResult]] = {
            HOST_PORT_FIELD: validate_host_port,
            FILTER_PATTERN_FIELD: validate_filter_pattern,
            FILE_EXTENSION_FIELD: validate_file_extension,
            CREDENTIALS_ID_FIELD: validate_credentials_id,
            CODE_PAGE_FIELD: lambda raw: validate_code_page(raw, self.catalog),
        }

    def check(self, field: str, raw: str | None) -> ValidationResult:
        """Validate one field by its form name.

        Raises:
            KeyError: If ``field`` is not a configuration field
        """
        if field not in self._checks:
            raise KeyError(f"Unknown configuration field: {field}. Must be one of: {', '.join(FIELDS)}")
        return self._checks[field](raw)

    def validate(self, config: RetrievalConfiguration) -> dict[str, ValidationResult]:
        """Validate all fields independently, keyed by form field name."""
        return {field: self.check(field, raw) for field, raw in config.field_values().items()}

    def failures(self, config: RetrievalConfiguration) -> list[ValidationResult]:
        """Return only the failing field results."""
        return [result for result in self.validate(config).values() if not result.ok]

    def ensure_valid(self, config: RetrievalConfiguration) -> None:
        """Raise unless every field passes.

        Raises:
            ConfigurationError: Carrying every failing field result
        """
        failures = self.failures(config)
        if failures:
            raise ConfigurationError(failures)
