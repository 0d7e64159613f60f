# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Endevor SCM Service: validate job configuration and retrieve source over REST."""

import logging
import sys

from fastapi import FastAPI
import uvicorn

from endevor_config import load_settings

from endevor_scm import __version__
from endevor_scm.api import create_api_router
from endevor_scm.service import create_scm_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(title="Endevor SCM Service", version=__version__)

# Global service instance
scm_service = None


@app.get("/")
def root():
    """Root endpoint redirects to health check."""
    return health()


@app.get("/health")
def health():
    """Health check endpoint."""
    global scm_service

    stats = scm_service.get_stats() if scm_service is not None else {}

    return {
        "status": "healthy",
        "service": "endevor-scm",
        "version": __version__,
        "checkouts_attempted": stats.get("checkouts_attempted", 0),
        "checkouts_failed": stats.get("checkouts_failed", 0),
    }


def main():
    """Main entry point for the Endevor SCM service."""
    global scm_service

    logger.info(f"Starting Endevor SCM Service (version {__version__})")

    try:
        settings = load_settings()
        logger.info("Configuration loaded successfully")

        if not settings.topaz_cli_location:
            logger.warning("TOPAZ_CLI_LOCATION is not set; checkouts will fail until it is configured")

        scm_service = create_scm_service(settings)
        app.include_router(create_api_router(scm_service, scm_service.logger))

        logger.info(f"Starting HTTP server on port {settings.http_port}...")
        uvicorn.run(app, host="0.0.0.0", port=settings.http_port)

    except Exception as e:
        logger.error(f"Failed to start Endevor SCM service: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
