# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Base credential resolver interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .exceptions import CredentialError


@dataclass(frozen=True)
class UsernamePasswordCredentials:
    """Mainframe login resolved from a credential reference."""

    id: str
    username: str
    password: str = field(repr=False)
    description: str = ""

    @property
    def display_name(self) -> str:
        """Label for selection lists: ``username (description)`` or ``username``."""
        description = self.description.strip()
        if description:
            return f"{self.username} ({description})"
        return self.username


class CredentialResolver(ABC):
    """Abstract base class for credential stores.

    Implementations resolve the opaque credential reference stored in a job
    configuration to a username and password.
    """

    @abstractmethod
    def resolve(self, credentials_id: str) -> UsernamePasswordCredentials:
        """Resolve a credential reference.

        Raises:
            CredentialNotFoundError: If no credential has this id
            CredentialResolverError: If the store cannot be read
        """
        pass

    @abstractmethod
    def list_credentials(self) -> list[UsernamePasswordCredentials]:
        """Return every credential available for selection, ordered by id."""
        pass

    def credential_exists(self, credentials_id: str) -> bool:
        """Return True if ``credentials_id`` resolves."""
        try:
            self.resolve(credentials_id)
        except CredentialError:
            return False
        return True
