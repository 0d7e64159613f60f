# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""User-facing validation messages."""

from .models import (
    CODE_PAGE_FIELD,
    CREDENTIALS_ID_FIELD,
    FILE_EXTENSION_FIELD,
    FILTER_PATTERN_FIELD,
    HOST_PORT_FIELD,
    ValidationErrorCode,
)

DISPLAY_NAME = "Endevor"

_MESSAGES: dict[tuple[str, ValidationErrorCode], str] = {
    (HOST_PORT_FIELD, ValidationErrorCode.EMPTY): "Host:port is required",
    (HOST_PORT_FIELD, ValidationErrorCode.WRONG_SEGMENT_COUNT): "Host:port must be in the format host:port",
    (HOST_PORT_FIELD, ValidationErrorCode.MISSING_HOST): "Host is missing from host:port",
    (HOST_PORT_FIELD, ValidationErrorCode.MISSING_PORT): "Port is missing from host:port",
    (HOST_PORT_FIELD, ValidationErrorCode.NON_NUMERIC_PORT): "Port must be numeric",
    (FILTER_PATTERN_FIELD, ValidationErrorCode.EMPTY): "Filter pattern is required",
    (FILE_EXTENSION_FIELD, ValidationErrorCode.EMPTY): "File extension is required",
    (FILE_EXTENSION_FIELD, ValidationErrorCode.NOT_ALPHANUMERIC): "File extension must contain only letters and digits",
    (CREDENTIALS_ID_FIELD, ValidationErrorCode.EMPTY): "Login credentials are required",
    (CODE_PAGE_FIELD, ValidationErrorCode.EMPTY): "Code page is required",
    (CODE_PAGE_FIELD, ValidationErrorCode.UNKNOWN_CODE_PAGE): "Code page is not a supported code page",
}


def message_for(field: str, error: ValidationErrorCode) -> str:
    """Return the message for a field failure.

    Unknown combinations fall back to a generic message naming the field.
    """
    return _MESSAGES.get((field, error), f"{field} is invalid ({error.value})")
