# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Exceptions for credential resolution."""


class CredentialError(Exception):
    """Base exception for credential errors."""
    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a credential reference does not resolve to a credential."""
    pass


class CredentialResolverError(CredentialError):
    """Raised when the credential store cannot be read or is misconfigured."""
    pass
