# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Service-wide settings of the Endevor SCM service."""

from dataclasses import dataclass

from .providers import ConfigProvider, EnvConfigProvider

DEFAULT_CLI_TIMEOUT_SECONDS = 3600
DEFAULT_CREDENTIALS_BASE_PATH = "/run/secrets/endevor"
DEFAULT_HTTP_PORT = 8000


@dataclass(frozen=True)
class ScmSettings:
    """Settings shared by every job, as opposed to per-job configuration."""

    topaz_cli_location: str = ""
    """Directory holding TopazCLI.sh / TopazCLI.bat."""

    cli_timeout_seconds: int = DEFAULT_CLI_TIMEOUT_SECONDS
    credential_resolver_type: str = "local"
    credentials_base_path: str = DEFAULT_CREDENTIALS_BASE_PATH
    http_port: int = DEFAULT_HTTP_PORT
    log_level: str = "INFO"


def load_settings(provider: ConfigProvider | None = None) -> ScmSettings:
    """Read settings from a provider, environment variables by default.

    Non-positive or unparseable integers fall back to their defaults.
    """
    provider = provider or EnvConfigProvider()

    timeout = provider.get_int("TOPAZ_CLI_TIMEOUT_SECONDS", DEFAULT_CLI_TIMEOUT_SECONDS)
    http_port = provider.get_int("HTTP_PORT", DEFAULT_HTTP_PORT)

    return ScmSettings(
        topaz_cli_location=str(provider.get("TOPAZ_CLI_LOCATION", "") or "").strip(),
        cli_timeout_seconds=timeout if timeout > 0 else DEFAULT_CLI_TIMEOUT_SECONDS,
        credential_resolver_type=str(provider.get("CREDENTIAL_RESOLVER_TYPE", "local") or "local").lower(),
        credentials_base_path=str(
            provider.get("CREDENTIALS_BASE_PATH", DEFAULT_CREDENTIALS_BASE_PATH) or DEFAULT_CREDENTIALS_BASE_PATH
        ),
        http_port=http_port if http_port > 0 else DEFAULT_HTTP_PORT,
        log_level=str(provider.get("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
