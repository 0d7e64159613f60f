# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Tests for the endevor-scm command line and the service entry point."""

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from endevor_scm import cli, main as service_main
from endevor_scm.exceptions import CheckoutAbortedError

VALID_ARGS = [
    "--host-port", "mvs1:30947",
    "--filter", "PROD.COBOL.*",
    "--file-extension", "cbl",
    "--credentials-id", "build",
    "--code-page", "1047",
]


class TestValidateCommand:
    """Tests for `endevor-scm validate`."""

    def test_valid_configuration(self, capsys):
        assert cli.main(["validate", *VALID_ARGS]) == 0

        out = capsys.readouterr().out
        assert "hostPort: ok" in out
        assert "codePage: ok" in out

    def test_invalid_configuration(self, capsys):
        assert cli.main(["validate", "--host-port", "mvs1:port"]) == 1

        out = capsys.readouterr().out
        assert "hostPort: Port must be numeric" in out
        assert "filterPattern: Filter pattern is required" in out

    def test_json_output(self, capsys):
        cli.main(["validate", "--json", *VALID_ARGS])

        results = json.loads(capsys.readouterr().out)
        assert [result["kind"] for result in results] == ["ok"] * 5

    def test_config_file_with_override(self, tmp_path, capsys):
        config_file = tmp_path / "job.json"
        config_file.write_text(
            json.dumps(
                {
                    "hostPort": "mvs1:30947",
                    "filterPattern": "PROD.*",
                    "fileExtension": "cbl",
                    "credentialsId": "build",
                    "codePage": "1047",
                }
            )
        )

        assert cli.main(["validate", "--config", str(config_file), "--code-page", "12"]) == 1
        assert "codePage: Code page is not a supported code page" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "content, expected",
        [
            ("{not json", "is not valid JSON"),
            ("[\"mvs1:30947\"]", "must contain a JSON object"),
            (b"\xff\xfe{}", "is not valid JSON"),
        ],
    )
    def test_malformed_config_file(self, tmp_path, capsys, content, expected):
        config_file = tmp_path / "job.json"
        if isinstance(content, bytes):
            config_file.write_bytes(content)
        else:
            config_file.write_text(content)

        assert cli.main(["validate", "--config", str(config_file)]) == 1

        err = capsys.readouterr().err
        assert "Invalid configuration file" in err
        assert expected in err

    def test_missing_config_file(self, tmp_path, capsys):
        assert cli.main(["validate", "--config", str(tmp_path / "missing.json")]) == 1
        assert "Failed to read" in capsys.readouterr().err


class TestCodePagesCommand:
    """Tests for `endevor-scm code-pages`."""

    def test_lists_catalog_in_numeric_order(self, capsys):
        assert cli.main(["code-pages"]) == 0

        ids = [int(line.split("\t")[0]) for line in capsys.readouterr().out.splitlines()]
        assert ids == sorted(ids)
        assert 1047 in ids


class TestCheckoutCommand:
    """Tests for `endevor-scm checkout`."""

    def test_checkout_success(self, service, tmp_path, capsys):
        args = ["checkout", *VALID_ARGS, "--workspace", str(tmp_path / "ws"), "--change-log", str(tmp_path / "log.xml")]

        with patch.object(cli, "create_scm_service", return_value=service):
            assert cli.main(args) == 0

        assert "Checked out 1 change(s)" in capsys.readouterr().out

    def test_checkout_aborted(self, service, tmp_path, capsys):
        args = ["checkout", *VALID_ARGS, "--workspace", str(tmp_path / "ws")]

        with patch.object(cli, "create_scm_service", return_value=service), patch.object(
            service, "checkout", side_effect=CheckoutAbortedError("Topaz CLI not found: /opt/TopazCLI.sh")
        ):
            assert cli.main(args) == 1

        assert "Checkout aborted: Topaz CLI not found" in capsys.readouterr().err


class TestHealthEndpoint:
    """Tests for the service entry point."""

    def test_health_before_startup(self):
        client = TestClient(service_main.app)

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "endevor-scm"

    def test_health_reports_stats(self, service, monkeypatch):
        monkeypatch.setattr(service_main, "scm_service", service)
        client = TestClient(service_main.app)

        assert client.get("/health").json()["checkouts_attempted"] == 0

    def test_startup_failure_exits(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CREDENTIALS_BASE_PATH", str(tmp_path / "missing"))
        monkeypatch.setenv("CREDENTIAL_RESOLVER_TYPE", "local")

        with patch.object(service_main.uvicorn, "run") as run, pytest.raises(SystemExit) as exc_info:
            service_main.main()

        assert exc_info.value.code == 1
        run.assert_not_called()
