# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""In-memory credential resolver."""

from collections.abc import Iterable

from .exceptions import CredentialNotFoundError
from .resolver import CredentialResolver, UsernamePasswordCredentials


class StaticCredentialResolver(CredentialResolver):
    """Credential resolver over a fixed set of credentials (useful for tests)."""

    def __init__(self, credentials: Iterable[UsernamePasswordCredentials] = ()):
        self._credentials = {credential.id: credential for credential in credentials}

    def add(self, credential: UsernamePasswordCredentials) -> None:
        self._credentials[credential.id] = credential

    def resolve(self, credentials_id: str) -> UsernamePasswordCredentials:
        try:
            return self._credentials[credentials_id]
        except KeyError:
            raise CredentialNotFoundError(f"Credential not found: {credentials_id}") from None

    def list_credentials(self) -> list[UsernamePasswordCredentials]:
        return [self._credentials[key] for key in sorted(self._credentials)]
