# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Configuration providers backing the SCM service settings."""

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


class ConfigProvider(ABC):
    """Abstract base class for configuration providers."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        raise NotImplementedError

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get a boolean value; unrecognized values yield ``default``."""
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        value_lower = str(value).lower()
        if value_lower in _TRUE_VALUES:
            return True
        if value_lower in _FALSE_VALUES:
            return False
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Get an integer value; unparseable values yield ``default``."""
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        try:
            return int(value)
        except (ValueError, TypeError):
            return default


class EnvConfigProvider(ConfigProvider):
    """Configuration provider that reads from environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key, default)


class StaticConfigProvider(ConfigProvider):
    """Configuration provider with static values (useful for tests)."""

    def __init__(self, config: dict[str, Any] | None = None):
        self._config = config if config is not None else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._config[key] = value


def create_config_provider(provider_type: str | None = None, **kwargs: Any) -> ConfigProvider:
    """Create a configuration provider by type.

    Args:
        provider_type: "env" or "static"
        **kwargs: ``environ`` for env, ``config`` for static

    Raises:
        ValueError: If provider_type is missing or unknown
    """
    if not provider_type:
        raise ValueError("provider_type parameter is required. Must be one of: env, static")

    provider_type = provider_type.lower()

    if provider_type == "env":
        return EnvConfigProvider(**kwargs)
    if provider_type == "static":
        return StaticConfigProvider(**kwargs)

    raise ValueError(f"Unknown provider_type: {provider_type}. Must be one of: env, static")
