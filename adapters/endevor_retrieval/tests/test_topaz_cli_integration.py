# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Integration tests running a stand-in TopazCLI.sh as a real process."""

import os
from pathlib import Path
import stat

import pytest

from endevor_config import RetrievalConfiguration
from endevor_logging import SilentLogger
from endevor_retrieval import TopazCliRetriever, read_change_log
from endevor_secrets import StaticCredentialResolver, UsernamePasswordCredentials

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(os.name == "nt", reason="requires a POSIX shell"),
]

# Writes one element per filter into -targetFolder and echoes its arguments.
FAKE_CLI = """#!/bin/sh
while [ $# -gt 0 ]; do
  case "$1" in
    -targetFolder) target="$2"; shift 2 ;;
    -filter) filter="$2"; shift 2 ;;
    -ext) ext="$2"; shift 2 ;;
    -code) code="$2"; shift 2 ;;
    -pass) shift 2 ;;
    *) echo "arg $1"; shift ;;
  esac
done
echo "$filter" | tr ',' '\\n' | while read -r name; do
  echo "element $name" > "$target/$name.$ext"
done
echo "retrieved with code page $code"
"""

FAILING_CLI = """#!/bin/sh
echo "Login failed for user" >&2
exit 12
"""


def install_cli(directory: Path, script: str) -> None:
    path = directory / "TopazCLI.sh"
    path.write_text(script)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def config():
    return RetrievalConfiguration(
        host_port="mvs1:30947",
        filter_pattern="PAYROLL\nEMPREC",
        file_extension="cbl",
        credentials_id="build",
        code_page="1047",
    )


@pytest.fixture
def resolver():
    return StaticCredentialResolver([UsernamePasswordCredentials(id="build", username="TSOUSER", password="pw")])


class TestTopazCliProcess:
    """Runs the retriever against a shell script standing in for the CLI."""

    def test_elements_written_and_logged(self, tmp_path, config, resolver):
        install_cli(tmp_path, FAKE_CLI)
        logger = SilentLogger()
        retriever = TopazCliRetriever(str(tmp_path), resolver, logger=logger, timeout_seconds=30, windows=False)

        result = retriever.retrieve(config, tmp_path / "target", tmp_path / "changelog.xml")

        assert result.success, result.error
        assert sorted((tmp_path / "target").iterdir()) == [
            tmp_path / "target" / "EMPREC.cbl",
            tmp_path / "target" / "PAYROLL.cbl",
        ]
        assert [entry.path for entry in read_change_log(tmp_path / "changelog.xml")] == ["EMPREC.cbl", "PAYROLL.cbl"]
        assert logger.has_log("retrieved with code page 1047")

    def test_second_run_reports_no_changes(self, tmp_path, config, resolver):
        install_cli(tmp_path, FAKE_CLI)
        retriever = TopazCliRetriever(str(tmp_path), resolver, logger=SilentLogger(), windows=False)

        retriever.retrieve(config, tmp_path / "target", tmp_path / "first.xml")
        result = retriever.retrieve(config, tmp_path / "target", tmp_path / "second.xml")

        assert result.success
        assert read_change_log(tmp_path / "second.xml") == []

    def test_failing_cli(self, tmp_path, config, resolver):
        install_cli(tmp_path, FAILING_CLI)
        retriever = TopazCliRetriever(str(tmp_path), resolver, logger=SilentLogger(), windows=False)

        result = retriever.retrieve(config, tmp_path / "target", tmp_path / "changelog.xml")

        assert not result.success
        assert "code 12" in result.error
        assert "Login failed for user" in result.error
        assert not (tmp_path / "changelog.xml").exists()
