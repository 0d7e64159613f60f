# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Shared fixtures for the SCM service tests."""

from pathlib import Path

import pytest

from endevor_config import ConfigurationValidator, RetrievalConfiguration
from endevor_logging import create_logger
from endevor_retrieval import ChangeLogEntry, RetrievalResult, SourceRetriever, write_change_log
from endevor_secrets import StaticCredentialResolver, UsernamePasswordCredentials

from endevor_scm.service import EndevorScmService


class FakeRetriever(SourceRetriever):
    """Retriever that records calls and returns a canned result."""

    def __init__(self, success: bool = True, error: str | None = None):
        self.success = success
        self.error = error
        self.calls = []

    def retrieve(self, config, target_dir, change_log_path):
        self.calls.append((config, target_dir, change_log_path))
        if not self.success:
            return RetrievalResult(success=False, error=self.error)

        changes = [ChangeLogEntry(path="PAYROLL.cbl", action="add")]
        write_change_log(change_log_path, changes)
        return RetrievalResult(success=True, change_log_path=str(change_log_path), changes=changes)


@pytest.fixture
def valid_config():
    return RetrievalConfiguration(
        host_port="mvs1:30947",
        filter_pattern="PROD.COBOL.*",
        file_extension="cbl",
        credentials_id="build",
        code_page="1047",
    )


@pytest.fixture
def credential_resolver():
    return StaticCredentialResolver(
        [
            UsernamePasswordCredentials(id="build", username="TSOUSER", password="pw", description="Build user"),
            UsernamePasswordCredentials(id="admin", username="TSOADM", password="pw"),
        ]
    )


@pytest.fixture
def retriever():
    return FakeRetriever()


@pytest.fixture
def logger():
    return create_logger(logger_type="silent", level="INFO", name="endevor-scm-test")


@pytest.fixture
def service(credential_resolver, retriever, logger):
    return EndevorScmService(
        validator=ConfigurationValidator(),
        credential_resolver=credential_resolver,
        retriever=retriever,
        logger=logger,
    )


@pytest.fixture
def workspace(tmp_path) -> Path:
    return tmp_path / "workspace"
