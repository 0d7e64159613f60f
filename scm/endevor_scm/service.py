# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Main Endevor SCM service implementation."""

import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from endevor_config import (
    DISPLAY_NAME,
    ConfigurationError,
    ConfigurationValidator,
    RetrievalConfiguration,
    ScmSettings,
    ValidationResult,
)
from endevor_logging import Logger, create_logger
from endevor_retrieval import RetrievalResult, SourceRetriever, TopazCliRetriever
from endevor_secrets import CredentialResolver, create_credential_resolver

from .exceptions import CheckoutAbortedError


class EndevorScmService:
    """Form descriptor operations and checkout for Endevor retrievals."""

    display_name = DISPLAY_NAME

    def __init__(
        self,
        validator: ConfigurationValidator,
        credential_resolver: CredentialResolver,
        retriever: SourceRetriever,
        logger: Optional[Logger] = None,
    ):
        """Initialize the SCM service.

        Args:
            validator: Validates per-job retrieval configuration
            credential_resolver: Lists the credentials offered in the form
            retriever: Runs the actual source retrieval
            logger: Build log; stdout JSON when omitted
        """
        self.validator = validator
        self.credential_resolver = credential_resolver
        self.retriever = retriever
        self.logger = logger or create_logger(logger_type="stdout", name="endevor_scm")

        self.checkouts_attempted = 0
        self.checkouts_succeeded = 0
        self.checkouts_failed = 0
        self.last_checkout_seconds = 0.0

    @property
    def supports_polling(self) -> bool:
        """Endevor has no change detection, so builds are never triggered by polling."""
        return False

    def check_field(self, field: str, value: Optional[str]) -> ValidationResult:
        """Validate one form field.

        Raises:
            KeyError: If ``field`` is not a configuration field
        """
        return self.validator.check(field, value)

    def code_page_options(self) -> List[Dict[str, str]]:
        """List box items for the code page field, in numeric id order."""
        return [{"name": page.description, "value": page.id} for page in self.validator.catalog]

    def credential_options(self, selected_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """List box items for the credentials field.

        The first item is empty so that no credential is preselected by default.
        """
        options: List[Dict[str, Any]] = [{"name": "", "value": "", "selected": False}]
        for credential in self.credential_resolver.list_credentials():
            options.append(
                {
                    "name": credential.display_name,
                    "value": credential.id,
                    "selected": selected_id is not None and credential.id == selected_id,
                }
            )
        return options

    def checkout(
        self,
        config: RetrievalConfiguration,
        workspace: str | Path,
        change_log_file: str | Path,
    ) -> RetrievalResult:
        """Retrieve Endevor source into the build workspace.

        Raises:
            CheckoutAbortedError: If the configuration is invalid or the retrieval fails
        """
        self.checkouts_attempted += 1
        start = time.time()

        try:
            self.validator.ensure_valid(config)
        except ConfigurationError as e:
            for failure in e.failures:
                self.logger.error(failure.message, field=failure.field)
            self.checkouts_failed += 1
            raise CheckoutAbortedError(str(e), failures=e.failures) from e

        self.logger.info(f"Checking out Endevor source from {config.host_port.strip()}", workspace=str(workspace))
        succeeded = False
        try:
            result = self.retriever.retrieve(config, workspace, change_log_file)
            if not result.success:
                raise CheckoutAbortedError(result.error or "Endevor retrieval failed")
            succeeded = True
        finally:
            self.last_checkout_seconds = time.time() - start
            if succeeded:
                self.checkouts_succeeded += 1
            else:
                self.checkouts_failed += 1

        return result

    def get_stats(self) -> Dict[str, Any]:
        """Get service statistics."""
        return {
            "checkouts_attempted": self.checkouts_attempted,
            "checkouts_succeeded": self.checkouts_succeeded,
            "checkouts_failed": self.checkouts_failed,
            "last_checkout_seconds": self.last_checkout_seconds,
        }


def create_scm_service(settings: ScmSettings) -> EndevorScmService:
    """Wire the validator, credential resolver and Topaz CLI retriever from settings."""
    build_logger = create_logger(logger_type="stdout", level=settings.log_level, name="endevor_scm")

    resolver_kwargs = {}
    if settings.credential_resolver_type == "local":
        resolver_kwargs["base_path"] = settings.credentials_base_path
    credential_resolver = create_credential_resolver(settings.credential_resolver_type, **resolver_kwargs)

    retriever = TopazCliRetriever(
        cli_location=settings.topaz_cli_location,
        credential_resolver=credential_resolver,
        logger=build_logger,
        timeout_seconds=settings.cli_timeout_seconds,
    )
    return EndevorScmService(
        validator=ConfigurationValidator(),
        credential_resolver=credential_resolver,
        retriever=retriever,
        logger=build_logger,
    )
