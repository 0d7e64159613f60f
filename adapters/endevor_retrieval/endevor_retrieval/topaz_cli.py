# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Source retriever that drives the Topaz command-line interface."""

import os
import subprocess
from pathlib import Path

from endevor_config import RetrievalConfiguration
from endevor_logging import Logger, create_logger
from endevor_secrets import CredentialError, CredentialResolver, UsernamePasswordCredentials

from .base import SourceRetriever
from .changelog import diff_fingerprints, fingerprint_directory, write_change_log
from .constants import (
    CODE_PAGE_PARM,
    COMMA,
    DATA_PARM,
    DOUBLE_QUOTE,
    DOUBLE_QUOTE_ESCAPED,
    ENDEVOR,
    FILE_EXT_PARM,
    FILTER_PARM,
    HOST_PARM,
    PASSWORD_MASK,
    PASSWORD_PARM,
    PORT_PARM,
    SCM_TYPE_PARM,
    TARGET_FOLDER_PARM,
    TOPAZ_CLI_BAT,
    TOPAZ_CLI_SH,
    TOPAZ_CLI_WORKSPACE,
    USERID_PARM,
)
from .exceptions import ChangeLogError, CliNotFoundError
from .models import RetrievalResult

DEFAULT_TIMEOUT_SECONDS = 3600


def format_filter(filter_pattern: str, quote: bool = False) -> str:
    """Turn a (possibly multi-line) filter pattern into the CLI argument.

    Non-blank lines are trimmed and joined with commas. With ``quote`` the
    result is wrapped in double quotes and embedded quotes are doubled, as a
    Windows batch script expects.
    """
    filters = COMMA.join(line.strip() for line in filter_pattern.splitlines() if line.strip())
    if quote:
        return DOUBLE_QUOTE + filters.replace(DOUBLE_QUOTE, DOUBLE_QUOTE_ESCAPED) + DOUBLE_QUOTE
    return filters


def mask_command(command: list[str]) -> list[str]:
    """Return a copy of ``command`` with the password argument masked."""
    masked = list(command)
    for index, argument in enumerate(masked[:-1]):
        if argument == PASSWORD_PARM:
            masked[index + 1] = PASSWORD_MASK
    return masked


class TopazCliRetriever(SourceRetriever):
    """Retrieves Endevor elements by running TopazCLI.sh or TopazCLI.bat.

    Attributes:
        cli_location: Directory containing the Topaz CLI scripts
        credential_resolver: Resolves the job's credential reference
        timeout_seconds: Upper bound for one CLI run
        windows: Whether to run the batch script instead of the shell script
    """

    def __init__(
        self,
        cli_location: str,
        credential_resolver: CredentialResolver,
        logger: Logger | None = None,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        windows: bool | None = None,
    ):
        self.cli_location = cli_location
        self.credential_resolver = credential_resolver
        self.logger = logger or create_logger(logger_type="stdout", name="endevor_retrieval.topaz")
        self.timeout_seconds = timeout_seconds
        self.windows = os.name == "nt" if windows is None else windows

    @property
    def script_name(self) -> str:
        return TOPAZ_CLI_BAT if self.windows else TOPAZ_CLI_SH

    def cli_script_path(self) -> Path:
        """Locate the CLI script.

        Raises:
            CliNotFoundError: If no CLI location is configured or the script is missing
        """
        if not self.cli_location or not self.cli_location.strip():
            raise CliNotFoundError("Topaz CLI location is not configured")

        script = Path(self.cli_location.strip()) / self.script_name
        if not script.is_file():
            raise CliNotFoundError(f"Topaz CLI not found: {script}")
        return script

    def build_command(
        self,
        script: Path,
        config: RetrievalConfiguration,
        credentials: UsernamePasswordCredentials,
        target_dir: Path,
    ) -> list[str]:
        """Build the CLI argument list for one retrieval."""
        return [
            str(script),
            HOST_PARM, config.host,
            PORT_PARM, config.port,
            USERID_PARM, credentials.username,
            PASSWORD_PARM, credentials.password,
            TARGET_FOLDER_PARM, str(target_dir),
            SCM_TYPE_PARM, ENDEVOR,
            FILTER_PARM, format_filter(config.filter_pattern, quote=self.windows),
            FILE_EXT_PARM, config.file_extension.strip(),
            CODE_PAGE_PARM, config.code_page.strip(),
            DATA_PARM, str(target_dir / TOPAZ_CLI_WORKSPACE),
        ]

    def _failed(self, message: str) -> RetrievalResult:
        self.logger.error(message)
        return RetrievalResult(success=False, error=message)

    def retrieve(
        self,
        config: RetrievalConfiguration,
        target_dir: str | Path,
        change_log_path: str | Path,
    ) -> RetrievalResult:
        try:
            credentials = self.credential_resolver.resolve(config.credentials_id.strip())
        except CredentialError as e:
            return self._failed(f"Unable to resolve credentials '{config.credentials_id}': {e}")

        try:
            script = self.cli_script_path()
        except CliNotFoundError as e:
            return self._failed(str(e))

        try:
            target = Path(target_dir).resolve()
            target.mkdir(parents=True, exist_ok=True)
            before = fingerprint_directory(target, exclude=[TOPAZ_CLI_WORKSPACE])
        except (OSError, ValueError) as e:
            return self._failed(f"Cannot prepare target folder {target_dir}: {e}")

        command = self.build_command(script, config, credentials, target)
        self.logger.info(
            f"Executing Topaz CLI: {' '.join(mask_command(command))}",
            host=config.host,
            port=config.port,
        )

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
                cwd=str(script.parent),
            )
        except subprocess.TimeoutExpired:
            return self._failed(f"Topaz CLI timed out after {self.timeout_seconds} seconds")
        except OSError as e:
            return self._failed(f"Failed to start Topaz CLI: {e}")

        for line in (result.stdout or "").splitlines():
            self.logger.info(line)

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            return self._failed(f"Topaz CLI failed with code {result.returncode}: {stderr}")

        try:
            after = fingerprint_directory(target, exclude=[TOPAZ_CLI_WORKSPACE])
        except OSError as e:
            return self._failed(f"Cannot scan target folder {target}: {e}")

        changes = diff_fingerprints(before, after)
        try:
            write_change_log(change_log_path, changes)
        except ChangeLogError as e:
            return self._failed(str(e))

        self.logger.info(f"Topaz CLI completed, {len(changes)} file(s) changed", target=str(target))
        return RetrievalResult(success=True, change_log_path=str(change_log_path), changes=changes)
