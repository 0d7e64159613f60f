# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Value types for Endevor retrieval configuration and validation results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

HOST_PORT_DELIMITER = ":"

# Form field names, as submitted by the configuration UI.
HOST_PORT_FIELD = "hostPort"
FILTER_PATTERN_FIELD = "filterPattern"
FILE_EXTENSION_FIELD = "fileExtension"
CREDENTIALS_ID_FIELD = "credentialsId"
CODE_PAGE_FIELD = "codePage"

FIELDS = (
    HOST_PORT_FIELD,
    FILTER_PATTERN_FIELD,
    FILE_EXTENSION_FIELD,
    CREDENTIALS_ID_FIELD,
    CODE_PAGE_FIELD,
)


class ValidationErrorCode(str, Enum):
    """Reasons a single configuration field can be rejected."""

    EMPTY = "empty"
    WRONG_SEGMENT_COUNT = "wrong_segment_count"
    MISSING_HOST = "missing_host"
    MISSING_PORT = "missing_port"
    NON_NUMERIC_PORT = "non_numeric_port"
    NOT_ALPHANUMERIC = "not_alphanumeric"
    UNKNOWN_CODE_PAGE = "unknown_code_page"


@dataclass(frozen=True)
class HostPort:
    """Normalized host and port of the mainframe connection."""

    host: str
    port: str

    def __str__(self) -> str:
        return f"{self.host}{HOST_PORT_DELIMITER}{self.port}"


@dataclass(frozen=True)
class CodePage:
    """Entry of the code page catalog."""

    id: str
    """Numeric code page identifier, e.g. "1047"."""

    description: str
    """Human-readable description shown in the selection list."""


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one configuration field.

    Either ``error`` is None and ``value`` holds the normalized value, or
    ``error`` names the reason and ``value`` is None.
    """

    field: str
    value: Any = None
    error: ValidationErrorCode | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """Field-specific message for a failure, None on success."""
        if self.error is None:
            return None

        from .messages import message_for

        return message_for(self.field, self.error)

    def to_dict(self) -> dict[str, Any]:
        """Render as the JSON shape consumed by form validation."""
        if self.ok:
            return {"field": self.field, "kind": "ok", "message": None}
        return {
            "field": self.field,
            "kind": "error",
            "error": self.error.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class RetrievalConfiguration:
    """Job-level configuration of an Endevor retrieval.

    Constructed once per job configuration and read-only for the lifetime of
    a build. Values are stored as submitted; use ``ConfigurationValidator``
    before relying on them.
    """

    host_port: str
    filter_pattern: str
    file_extension: str
    credentials_id: str
    code_page: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RetrievalConfiguration":
        """Build from form field names or snake_case keys; missing keys become ""."""
        def pick(field_name: str, attr: str) -> str:
            value = data.get(field_name, data.get(attr))
            return "" if value is None else str(value)

        return cls(
            host_port=pick(HOST_PORT_FIELD, "host_port"),
            filter_pattern=pick(FILTER_PATTERN_FIELD, "filter_pattern"),
            file_extension=pick(FILE_EXTENSION_FIELD, "file_extension"),
            credentials_id=pick(CREDENTIALS_ID_FIELD, "credentials_id"),
            code_page=pick(CODE_PAGE_FIELD, "code_page"),
        )

    def field_values(self) -> dict[str, str]:
        """Return the raw values keyed by form field name."""
        return {
            HOST_PORT_FIELD: self.host_port,
            FILTER_PATTERN_FIELD: self.filter_pattern,
            FILE_EXTENSION_FIELD: self.file_extension,
            CREDENTIALS_ID_FIELD: self.credentials_id,
            CODE_PAGE_FIELD: self.code_page,
        }

    @property
    def host(self) -> str:
        return self._split_host_port()[0]

    @property
    def port(self) -> str:
        return self._split_host_port()[1]

    def _split_host_port(self) -> tuple[str, str]:
        parts = self.host_port.strip().split(HOST_PORT_DELIMITER)
        if len(parts) != 2:
            return "", ""
        return parts[0].strip(), parts[1].strip()
