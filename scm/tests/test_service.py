# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Tests for EndevorScmService."""

from dataclasses import replace
from unittest.mock import Mock

import pytest

from endevor_config import ConfigurationValidator, RetrievalConfiguration, ScmSettings, ValidationErrorCode
from endevor_retrieval import TopazCliRetriever, read_change_log
from endevor_secrets import CredentialResolverError, LocalFileCredentialResolver, StaticCredentialResolver

from endevor_scm.exceptions import CheckoutAbortedError
from endevor_scm.service import EndevorScmService, create_scm_service


class TestDescriptor:
    """Tests for the form descriptor operations."""

    def test_display_name(self, service):
        assert service.display_name == "Endevor"

    def test_never_supports_polling(self, service):
        assert service.supports_polling is False

    def test_check_field_ok(self, service):
        assert service.check_field("hostPort", "mvs1:30947").ok

    def test_check_field_error(self, service):
        result = service.check_field("hostPort", ":8080")
        assert result.error == ValidationErrorCode.MISSING_HOST
        assert result.message == "Host is missing from host:port"

    def test_check_unknown_field(self, service):
        with pytest.raises(KeyError):
            service.check_field("branch", "main")

    def test_code_page_options_numeric_order(self, service):
        options = service.code_page_options()
        ids = [int(option["value"]) for option in options]

        assert ids == sorted(ids)
        assert options[0]["value"] == "37"
        assert options[0]["name"].startswith("37")

    def test_credential_options_leading_empty_item(self, service):
        options = service.credential_options()

        assert options[0] == {"name": "", "value": "", "selected": False}
        assert [option["value"] for option in options[1:]] == ["admin", "build"]
        assert not any(option["selected"] for option in options)

    def test_credential_option_labels(self, service):
        options = {option["value"]: option["name"] for option in service.credential_options()}

        assert options["build"] == "TSOUSER (Build user)"
        assert options["admin"] == "TSOADM"

    def test_credential_options_marks_selection(self, service):
        options = service.credential_options("build")

        selected = [option["value"] for option in options if option["selected"]]
        assert selected == ["build"]

    def test_credential_options_with_no_credentials(self, retriever, logger):
        service = EndevorScmService(ConfigurationValidator(), StaticCredentialResolver(), retriever, logger)
        assert service.credential_options() == [{"name": "", "value": "", "selected": False}]


class TestCheckout:
    """Tests for EndevorScmService.checkout."""

    def test_successful_checkout(self, service, valid_config, workspace, tmp_path):
        change_log = tmp_path / "changelog.xml"

        result = service.checkout(valid_config, workspace, change_log)

        assert result.success
        assert read_change_log(change_log)[0].path == "PAYROLL.cbl"
        assert service.get_stats()["checkouts_succeeded"] == 1

    def test_invalid_configuration_never_retrieves(self, service, retriever, valid_config, workspace, tmp_path, logger):
        config = replace(valid_config, host_port="mvs1", file_extension="c-b-l")

        with pytest.raises(CheckoutAbortedError) as exc_info:
            service.checkout(config, workspace, tmp_path / "changelog.xml")

        assert retriever.calls == []
        assert exc_info.value.invalid_configuration
        assert [failure.field for failure in exc_info.value.failures] == ["hostPort", "fileExtension"]
        assert logger.has_log("Host:port must be in the format host:port", level="ERROR")
        assert not (tmp_path / "changelog.xml").exists()

    def test_failed_retrieval_aborts(self, service, retriever, valid_config, workspace, tmp_path):
        retriever.success = False
        retriever.error = "Topaz CLI failed with code 8: Login failed"

        with pytest.raises(CheckoutAbortedError, match="Login failed") as exc_info:
            service.checkout(valid_config, workspace, tmp_path / "changelog.xml")

        assert not exc_info.value.invalid_configuration
        assert len(retriever.calls) == 1

    def test_stats_count_attempts(self, service, retriever, valid_config, workspace, tmp_path):
        service.checkout(valid_config, workspace, tmp_path / "changelog.xml")
        retriever.success = False
        with pytest.raises(CheckoutAbortedError):
            service.checkout(valid_config, workspace, tmp_path / "changelog.xml")

        stats = service.get_stats()
        assert stats["checkouts_attempted"] == 2
        assert stats["checkouts_succeeded"] == 1
        assert stats["checkouts_failed"] == 1


class TestCreateScmService:
    """Tests for wiring the service from settings."""

    def test_local_resolver(self, tmp_path):
        settings = ScmSettings(topaz_cli_location="/opt/topaz", credentials_base_path=str(tmp_path))

        service = create_scm_service(settings)

        assert isinstance(service.retriever, TopazCliRetriever)
        assert service.retriever.cli_location == "/opt/topaz"
        assert service.retriever.timeout_seconds == 3600

    def test_static_resolver(self):
        service = create_scm_service(ScmSettings(credential_resolver_type="static"))
        assert isinstance(service.credential_resolver, StaticCredentialResolver)

    def test_missing_credentials_directory(self, tmp_path):
        settings = ScmSettings(credentials_base_path=str(tmp_path / "missing"))

        with pytest.raises(CredentialResolverError):
            create_scm_service(settings)


class TestCheckoutUnexpectedFailures:
    """Failures below the retriever still abort the checkout and are counted."""

    def test_workspace_is_a_file(self, tmp_path, credential_resolver, logger):
        cli_dir = tmp_path / "cli"
        cli_dir.mkdir()
        (cli_dir / "TopazCLI.sh").write_text("#!/bin/sh\n")
        workspace = tmp_path / "ws"
        workspace.write_text("not a directory")
        retriever = TopazCliRetriever(str(cli_dir), credential_resolver, logger=logger, windows=False)
        service = EndevorScmService(ConfigurationValidator(), credential_resolver, retriever, logger)
        config = RetrievalConfiguration("mvs1:30947", "PROD.*", "cbl", "build", "1047")

        with pytest.raises(CheckoutAbortedError, match="Cannot prepare target folder"):
            service.checkout(config, workspace, tmp_path / "changelog.xml")

        stats = service.get_stats()
        assert stats["checkouts_attempted"] == 1
        assert stats["checkouts_failed"] == 1
        assert stats["checkouts_succeeded"] == 0

    def test_unexpected_retriever_error_counted_as_failure(self, service, retriever, valid_config, workspace, tmp_path):
        retriever.retrieve = Mock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            service.checkout(valid_config, workspace, tmp_path / "changelog.xml")

        stats = service.get_stats()
        assert stats["checkouts_attempted"] == 1
        assert stats["checkouts_failed"] == 1

    def test_null_byte_credentials_id_aborts(self, tmp_path, logger):
        cli_dir = tmp_path / "cli"
        cli_dir.mkdir()
        (cli_dir / "TopazCLI.sh").write_text("#!/bin/sh\n")
        secrets_dir = tmp_path / "secrets"
        secrets_dir.mkdir()
        resolver = LocalFileCredentialResolver(base_path=str(secrets_dir))
        retriever = TopazCliRetriever(str(cli_dir), resolver, logger=logger, windows=False)
        service = EndevorScmService(ConfigurationValidator(), resolver, retriever, logger)
        config = RetrievalConfiguration("mvs1:30947", "PROD.*", "cbl", "bu\x00ild", "1047")

        with pytest.raises(CheckoutAbortedError, match="Unable to resolve credentials"):
            service.checkout(config, tmp_path / "ws", tmp_path / "changelog.xml")

        assert service.get_stats()["checkouts_failed"] == 1
