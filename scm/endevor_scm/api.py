# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""REST API for the Endevor SCM form descriptor and checkout."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from endevor_config import RetrievalConfiguration
from endevor_logging import Logger

from .exceptions import CheckoutAbortedError

CHANGE_LOG_FILE_NAME = "changelog.xml"


class CheckoutRequest(BaseModel):
    """Checkout request body."""

    configuration: Dict[str, Any] = Field(..., description="Retrieval configuration keyed by form field name")
    workspace: str = Field(..., description="Directory receiving the retrieved elements")
    change_log: Optional[str] = Field(None, description="Change log file (defaults to changelog.xml beside the workspace)")


class ChangeEntry(BaseModel):
    path: str
    action: str


class CheckoutResponse(BaseModel):
    """Response for a completed checkout."""

    success: bool
    change_log: str
    changes: List[ChangeEntry] = []


def default_change_log_path(workspace: str) -> Path:
    return Path(workspace).resolve().parent / CHANGE_LOG_FILE_NAME


def create_api_router(service: Any, logger: Logger) -> APIRouter:
    """Create FastAPI router for the SCM descriptor and checkout.

    Args:
        service: EndevorScmService instance
        logger: Logger instance

    Returns:
        APIRouter instance
    """
    router = APIRouter()

    @router.get("/stats")
    def get_stats():
        """Get checkout statistics."""
        return service.get_stats()

    @router.get("/descriptor")
    def get_descriptor():
        """Describe the SCM to the form."""
        return {"display_name": service.display_name, "supports_polling": service.supports_polling}

    @router.get("/descriptor/check/{field}")
    def check_field(field: str, value: Optional[str] = Query(None, description="Raw field value")):
        """Validate one form field."""
        try:
            result = service.check_field(field, value)
        except KeyError as e:
            raise HTTPException(status_code=404, detail=str(e.args[0]))
        return result.to_dict()

    @router.get("/descriptor/fill/codePage")
    def fill_code_page():
        """List box items for the code page field."""
        return service.code_page_options()

    @router.get("/descriptor/fill/credentialsId")
    def fill_credentials_id(
        credentials_id: Optional[str] = Query(None, alias="credentialsId", description="Currently selected id"),
    ):
        """List box items for the credentials field."""
        try:
            return service.credential_options(credentials_id)
        except Exception as e:
            logger.exception(f"Error listing credentials: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/api/checkout", response_model=CheckoutResponse)
    def checkout(request: CheckoutRequest):
        """Retrieve Endevor source into a workspace."""
        config = RetrievalConfiguration.from_dict(request.configuration)
        change_log = Path(request.change_log) if request.change_log else default_change_log_path(request.workspace)

        try:
            result = service.checkout(config, request.workspace, change_log)
        except CheckoutAbortedError as e:
            if e.invalid_configuration:
                raise HTTPException(
                    status_code=400,
                    detail={"message": str(e), "failures": [failure.to_dict() for failure in e.failures]},
                )
            logger.error(f"Checkout failed: {e}")
            raise HTTPException(status_code=502, detail=str(e))

        return CheckoutResponse(
            success=True,
            change_log=str(result.change_log_path),
            changes=[ChangeEntry(**entry.to_dict()) for entry in result.changes],
        )

    return router
