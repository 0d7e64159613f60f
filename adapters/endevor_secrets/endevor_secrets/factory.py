# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Factory for creating credential resolvers."""

from typing import Any, cast

from .exceptions import CredentialResolverError
from .local_resolver import LocalFileCredentialResolver
from .resolver import CredentialResolver
from .static_resolver import StaticCredentialResolver


def create_credential_resolver(resolver_type: str, **kwargs: Any) -> CredentialResolver:
    """Create a credential resolver.

    Args:
        resolver_type: "local" or "static"
        **kwargs: Resolver-specific configuration

    Raises:
        CredentialResolverError: If resolver_type is unknown

    Example:
        >>> resolver = create_credential_resolver("local", base_path="/run/secrets/endevor")
    """
    resolvers: dict[str, type] = {
        "local": LocalFileCredentialResolver,
        "static": StaticCredentialResolver,
    }

    if resolver_type not in resolvers:
        raise CredentialResolverError(
            f"Unknown resolver type: {resolver_type}. "
            f"Available: {', '.join(resolvers.keys())}"
        )

    return cast(CredentialResolver, resolvers[resolver_type](**kwargs))
