# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Credential resolution for Endevor retrievals.

Resolves the credential reference of a job configuration to the mainframe
username and password passed to the Topaz CLI.

Example:
    >>> from endevor_secrets import create_credential_resolver
    >>> resolver = create_credential_resolver("local", base_path="/run/secrets/endevor")
    >>> credentials = resolver.resolve("tso-build-user")
"""

from .exceptions import CredentialError, CredentialNotFoundError, CredentialResolverError
from .resolver import CredentialResolver, UsernamePasswordCredentials
from .local_resolver import LocalFileCredentialResolver
from .static_resolver import StaticCredentialResolver
from .factory import create_credential_resolver

__all__ = [
    "CredentialResolver",
    "UsernamePasswordCredentials",
    "LocalFileCredentialResolver",
    "StaticCredentialResolver",
    "create_credential_resolver",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolverError",
]

__version__ = "0.1.0"
