# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Endevor SCM Configuration Adapter.

Validation and normalization of the per-job retrieval configuration
(host:port, filter pattern, file extension, credential reference and code
page), the code page catalog, and the service-wide settings.

Example:
    >>> from endevor_config import validate_host_port
    >>> result = validate_host_port("mvs1:30947")
    >>> result.value.port
    '30947'
"""

__version__ = "0.1.0"

from .code_pages import (
    load_code_page_catalog,
    lookup_code_page_catalog,
    numeric_key,
    sort_code_pages,
)
from .exceptions import CodePageCatalogError, ConfigurationError, EndevorConfigError
from .messages import DISPLAY_NAME, message_for
from .models import (
    CODE_PAGE_FIELD,
    CREDENTIALS_ID_FIELD,
    FIELDS,
    FILE_EXTENSION_FIELD,
    FILTER_PATTERN_FIELD,
    HOST_PORT_FIELD,
    CodePage,
    HostPort,
    RetrievalConfiguration,
    ValidationErrorCode,
    ValidationResult,
)
from .providers import ConfigProvider, EnvConfigProvider, StaticConfigProvider, create_config_provider
from .settings import ScmSettings, load_settings
from .validator import (
    ConfigurationValidator,
    validate_code_page,
    validate_credentials_id,
    validate_file_extension,
    validate_filter_pattern,
    validate_host_port,
)

__all__ = [
    "__version__",
    # Validation
    "ConfigurationValidator",
    "validate_host_port",
    "validate_filter_pattern",
    "validate_file_extension",
    "validate_credentials_id",
    "validate_code_page",
    "message_for",
    "DISPLAY_NAME",
    # Models
    "RetrievalConfiguration",
    "HostPort",
    "CodePage",
    "ValidationErrorCode",
    "ValidationResult",
    "FIELDS",
    "HOST_PORT_FIELD",
    "FILTER_PATTERN_FIELD",
    "FILE_EXTENSION_FIELD",
    "CREDENTIALS_ID_FIELD",
    "CODE_PAGE_FIELD",
    # Code pages
    "lookup_code_page_catalog",
    "load_code_page_catalog",
    "sort_code_pages",
    "numeric_key",
    # Errors
    "EndevorConfigError",
    "ConfigurationError",
    "CodePageCatalogError",
    # Settings
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "create_config_provider",
    "ScmSettings",
    "load_settings",
]
