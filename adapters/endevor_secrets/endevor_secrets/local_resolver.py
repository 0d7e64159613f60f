# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Local filesystem credential resolver."""

import json
from pathlib import Path

from endevor_logging import create_logger

from .exceptions import CredentialNotFoundError, CredentialResolverError
from .resolver import CredentialResolver, UsernamePasswordCredentials

logger = create_logger(logger_type="stdout", level="INFO", name="endevor_secrets.local")

CREDENTIAL_FILE_SUFFIX = ".json"


class LocalFileCredentialResolver(CredentialResolver):
    """Resolves credentials stored as JSON files in a base directory.

    Each credential lives in ``<base_path>/<credentials_id>.json``::

        {"username": "TSOUSER", "password": "...", "description": "Build user"}

    Suitable for Docker or Kubernetes mounted secrets.

    Attributes:
        base_path: Directory containing credential files
    """

    def __init__(self, base_path: str):
        """Initialize the resolver.

        Raises:
            CredentialResolverError: If base_path does not exist or is not a directory
        """
        self.base_path = Path(base_path)

        if not self.base_path.exists():
            raise CredentialResolverError("Credential base path does not exist")

        if not self.base_path.is_dir():
            raise CredentialResolverError("Credential base path is not a directory")

        logger.info("Initialized local credential resolver")

    def _credential_path(self, credentials_id: str) -> Path:
        """Return the file for a credential id.

        Raises:
            CredentialResolverError: If the id escapes the base directory or is not a valid file name
        """
        try:
            candidate = (self.base_path / f"{credentials_id}{CREDENTIAL_FILE_SUFFIX}").resolve()
            base_resolved = self.base_path.resolve()
        except (OSError, ValueError) as e:
            raise CredentialResolverError(f"Invalid credential id {credentials_id!r}: {e}") from e

        try:
            candidate.relative_to(base_resolved)
        except ValueError as e:
            raise CredentialResolverError(
                f"Invalid credential id (path traversal detected): {credentials_id}"
            ) from e

        return candidate

    def _read(self, credentials_id: str, path: Path) -> UsernamePasswordCredentials:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CredentialResolverError(f"Failed to read credential {credentials_id}: {e}") from e
        except json.JSONDecodeError as e:
            raise CredentialResolverError(f"Credential {credentials_id} is not valid JSON") from e

        if not isinstance(data, dict):
            raise CredentialResolverError(f"Credential {credentials_id} must be a JSON object")

        username = data.get("username")
        password = data.get("password")
        if not isinstance(username, str) or not username.strip():
            raise CredentialResolverError(f"Credential {credentials_id} has no username")
        if not isinstance(password, str):
            raise CredentialResolverError(f"Credential {credentials_id} has no password")

        return UsernamePasswordCredentials(
            id=credentials_id,
            username=username.strip(),
            password=password,
            description=str(data.get("description") or ""),
        )

    def resolve(self, credentials_id: str) -> UsernamePasswordCredentials:
        if not credentials_id or not credentials_id.strip():
            raise CredentialNotFoundError("Credential id is empty")

        path = self._credential_path(credentials_id)
        if not path.is_file():
            raise CredentialNotFoundError(f"Credential not found: {credentials_id}")

        return self._read(credentials_id, path)

    def list_credentials(self) -> list[UsernamePasswordCredentials]:
        credentials = []
        for path in sorted(self.base_path.glob(f"*{CREDENTIAL_FILE_SUFFIX}")):
            if not path.is_file():
                continue
            credentials_id = path.name[: -len(CREDENTIAL_FILE_SUFFIX)]
            try:
                credentials.append(self._read(credentials_id, path))
            except CredentialResolverError as e:
                # Only the id is logged, never the file content
                logger.warning(f"Skipping unreadable credential '{credentials_id}': {e}")
        return credentials
